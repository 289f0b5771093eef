"""
Vault operations on top of the rbw CLI.

Every operation starts with ensure_unlocked() and then runs exactly one rbw
command; nothing is cached between calls.
"""

from __future__ import annotations

import logging

from bwenv.rbw.errors import RbwCommandError, check_status, is_not_found
from bwenv.rbw.models import ItemDetail, parse_catalog, parse_item
from bwenv.rbw.process import ProcessInvoker, RbwProcess
from bwenv.rbw.unlock import ensure_unlocked

logger = logging.getLogger(__name__)


def login_payload(notes: str) -> str:
    """Editor content for a Login entry: empty password line, then notes."""
    return f"\n{notes}\n"


def secure_note_payload(notes: str) -> str:
    """Editor content for a SecureNote entry (rbw prepends the blank line itself)."""
    return f"{notes}\n"


class RbwClient:
    """List, read, create, edit and delete notes in an rbw folder."""

    def __init__(self, invoker: ProcessInvoker | None = None):
        self.invoker = invoker or RbwProcess()

    def list_namespaces(self, folder: str) -> list[str]:
        """Names of all items in `folder`, regardless of type, in rbw's order."""
        ensure_unlocked(self.invoker)

        result = self.invoker.capture(["list", "--raw"], status="Fetching namespaces…")
        check_status("rbw list", result)

        items = parse_catalog(result.stdout)
        return [item.name for item in items if (item.folder or "") == folder]

    def get_item(self, name: str, folder: str) -> ItemDetail | None:
        """Fetch one item. Returns None if it does not exist in `folder`."""
        ensure_unlocked(self.invoker)

        result = self.invoker.capture(
            ["get", "--raw", "--folder", folder, name],
            status=f"Fetching '{name}'…",
        )
        if is_not_found(result):
            logger.debug("No entry '%s' in folder '%s'", name, folder)
            return None
        check_status("rbw get", result)

        return parse_item(result.stdout)

    def create_item(self, name: str, folder: str, notes: str) -> None:
        """Create a new entry holding `notes`.

        `rbw add` always creates a Login entry, so the first line of the
        piped content is the (empty) password.
        """
        self._pipe(["add", "--folder", folder, name], login_payload(notes))

    def edit_item(self, name: str, folder: str, notes: str, is_secure_note: bool) -> None:
        """Replace the notes of an existing entry.

        The caller states the entry type; it is not looked up. Login entries
        (everything create_item makes) keep an empty password line.
        """
        payload = secure_note_payload(notes) if is_secure_note else login_payload(notes)
        self._pipe(["edit", "--folder", folder, name], payload)

    def delete_item(self, name: str, folder: str) -> None:
        ensure_unlocked(self.invoker)

        result = self.invoker.capture(
            ["remove", "--folder", folder, name],
            status="Deleting from Bitwarden…",
        )
        check_status("rbw remove", result)

    def save_item(self, name: str, folder: str, notes: str) -> bool:
        """Create or update `name`. Returns True if a new entry was created.

        Unlike edit_item, the payload format follows the stored entry type.
        """
        existing = self.get_item(name, folder)
        if existing is None:
            self.create_item(name, folder, notes)
            return True
        self.edit_item(name, folder, notes, existing.is_secure_note)
        return False

    def _pipe(self, args: list[str], payload: str) -> None:
        ensure_unlocked(self.invoker)

        returncode = self.invoker.pipe(args, payload, status="Saving to Bitwarden…")
        if returncode != 0:
            # stderr went straight to the terminal
            raise RbwCommandError(f"rbw {args[0]}", returncode)
