"""JSON shapes printed by `rbw list --raw` and `rbw get --raw`."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from bwenv.rbw.errors import RbwParseError

SECURE_NOTE_TYPES = frozenset({"Note", "SecureNote"})


class CatalogEntry(BaseModel):
    """One item from `rbw list --raw` (identity only, never secrets)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    folder: str | None = None
    item_type: str = Field(alias="type")


class ItemDetail(BaseModel):
    """A single item from `rbw get --raw`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # "Login", "Note", etc.
    item_type: str | None = Field(default=None, alias="type")
    notes: str | None = None

    @property
    def is_secure_note(self) -> bool:
        return self.item_type in SECURE_NOTE_TYPES


_catalog_adapter = TypeAdapter(list[CatalogEntry])


def parse_catalog(data: bytes) -> list[CatalogEntry]:
    """Decode `rbw list --raw` output."""
    try:
        return _catalog_adapter.validate_json(data)
    except ValidationError as e:
        raise RbwParseError(f"failed to parse `rbw list --raw` output: {e}") from e


def parse_item(data: bytes) -> ItemDetail:
    """Decode `rbw get --raw` output."""
    try:
        return ItemDetail.model_validate_json(data)
    except ValidationError as e:
        raise RbwParseError(f"failed to parse `rbw get --raw` output: {e}") from e
