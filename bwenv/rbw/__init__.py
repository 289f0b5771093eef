"""
rbw adapter — read and write Bitwarden notes through the rbw CLI.

Public API:
    rbw.list_namespaces(folder)                      → item names in folder
    rbw.get_item(name, folder)                       → ItemDetail or None
    rbw.create_item(name, folder, notes)             → new Login entry
    rbw.edit_item(name, folder, notes, is_secure_note)
    rbw.delete_item(name, folder)
    rbw.save_item(name, folder, notes)               → True if created
"""

from __future__ import annotations

from bwenv.config import get_config
from bwenv.rbw.client import RbwClient, login_payload, secure_note_payload
from bwenv.rbw.errors import (
    RbwCommandError,
    RbwError,
    RbwLaunchError,
    RbwParseError,
    RbwUnlockError,
)
from bwenv.rbw.models import CatalogEntry, ItemDetail
from bwenv.rbw.process import CommandResult, ProcessInvoker, RbwProcess


def default_client() -> RbwClient:
    """Client wired from the environment config."""
    cfg = get_config().rbw
    return RbwClient(RbwProcess(binary=cfg.binary, show_spinner=cfg.show_spinner))


def list_namespaces(folder: str) -> list[str]:
    """List the names of the entries in a vault folder."""
    return default_client().list_namespaces(folder)


def get_item(name: str, folder: str) -> ItemDetail | None:
    """Fetch an entry by name. Returns None if not found."""
    return default_client().get_item(name, folder)


def create_item(name: str, folder: str, notes: str) -> None:
    """Create a new Login entry holding the notes."""
    default_client().create_item(name, folder, notes)


def edit_item(name: str, folder: str, notes: str, is_secure_note: bool) -> None:
    """Replace the notes of an existing entry."""
    default_client().edit_item(name, folder, notes, is_secure_note)


def delete_item(name: str, folder: str) -> None:
    """Remove an entry from the vault."""
    default_client().delete_item(name, folder)


def save_item(name: str, folder: str, notes: str) -> bool:
    """Create or update an entry. Returns True if it was created."""
    return default_client().save_item(name, folder, notes)


__all__ = [
    "CatalogEntry",
    "CommandResult",
    "ItemDetail",
    "ProcessInvoker",
    "RbwClient",
    "RbwCommandError",
    "RbwError",
    "RbwLaunchError",
    "RbwParseError",
    "RbwProcess",
    "RbwUnlockError",
    "create_item",
    "default_client",
    "delete_item",
    "edit_item",
    "get_item",
    "list_namespaces",
    "login_payload",
    "save_item",
    "secure_note_payload",
]
