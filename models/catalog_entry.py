"""
models/catalog_entry.py – Immutable data model for a single game catalogue entry.
"""

import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, StrictInt, StrictStr, ValidationError

from services.exceptions import DocumentSchemaError

_LINK_LABELS: Tuple[Tuple[str, str], ...] = (
    ("title_link", "Game page"),
    ("developer_link", "Developer page"),
    ("publisher_link", "Publisher page"),
    ("platform_link", "Platform page"),
)


class CatalogEntry(BaseModel):
    """
    Represents one game in the catalogue.

    Field aliases are the keys used in games.json and must stay byte-for-byte
    compatible with existing data files. Values are strictly typed: "2013",
    2013.5 and true are not years.

    Attributes
    ----------
    title          : Human-readable game title.
    year           : Release year.
    developer      : Developer studio name.
    publisher      : Publisher name.
    platform       : Platform label (e.g. "the 3DS").
    *_link         : Optional URLs; ``None`` when the document omits them.
    id             : Opaque identifier, fresh for every instance, never stored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: StrictStr = Field(alias="Game")
    title_link: Optional[StrictStr] = Field(default=None, alias="GameLink")
    year: StrictInt = Field(alias="Year")
    developer: StrictStr = Field(alias="Dev")
    developer_link: Optional[StrictStr] = Field(default=None, alias="DevLink")
    publisher: StrictStr = Field(alias="Publisher")
    publisher_link: Optional[StrictStr] = Field(default=None, alias="PublisherLink")
    platform: StrictStr = Field(alias="Platform")
    platform_link: Optional[StrictStr] = Field(default=None, alias="PlatformLink")

    _id: uuid.UUID = PrivateAttr(default_factory=uuid.uuid4)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    def __str__(self) -> str:
        return f"{self.title}  ·  {self.developer}"

    # ── Interchange ──────────────────────────────────────────────────────────

    @classmethod
    def from_document(cls, obj: Any, index: Optional[int] = None) -> "CatalogEntry":
        """
        Decode one object of the bundled document.

        Raises
        ------
        DocumentSchemaError
            When *obj* is not a mapping, a required key is missing, or a
            value has the wrong JSON type. Unknown keys are ignored.
        """
        try:
            return cls.model_validate(obj)
        except ValidationError as exc:
            raise schema_error(exc, index=index) from exc

    def to_document(self) -> Dict[str, Any]:
        """Encode under the document key names; absent links are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def links(self) -> List[Tuple[str, str]]:
        """(label, url) pairs for every link that is present, in display order."""
        return [
            (label, getattr(self, attr))
            for attr, label in _LINK_LABELS
            if getattr(self, attr)
        ]


# attribute name → key used in games.json
DOCUMENT_KEYS: Dict[str, str] = {
    name: info.alias for name, info in CatalogEntry.model_fields.items()
}


def schema_error(
    exc: ValidationError,
    index: Optional[int] = None,
    path: Optional[Path] = None,
) -> DocumentSchemaError:
    """
    Turn the first pydantic error into a DocumentSchemaError.

    When *index* is None and the error location starts with an array
    position (validation of a whole list), that position is used instead.
    """
    err = exc.errors()[0]
    loc = list(err["loc"])
    if index is None and loc and isinstance(loc[0], int):
        index = loc.pop(0)
    where = ".".join(str(part) for part in loc)
    reason = f"key '{where}': {err['msg']}" if where else err["msg"]
    return DocumentSchemaError(reason, index=index, path=path)
