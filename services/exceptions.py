"""
services/exceptions.py – Structured custom exception hierarchy for Game Explorer.

All service-level errors derive from GameExplorerError so callers can catch
broadly or specifically depending on context.
"""

from pathlib import Path
from typing import Iterable, Optional, Tuple


class GameExplorerError(Exception):
    """Base class for all Game Explorer exceptions."""


class CatalogLoadError(GameExplorerError):
    """
    Raised when the bundled catalogue cannot be loaded at startup.

    Attributes
    ----------
    path : Document that was being loaded (``None`` if not yet known).
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


class DocumentNotFoundError(CatalogLoadError):
    """Raised when the bundled document does not exist."""


class DocumentReadError(CatalogLoadError):
    """Raised when the document cannot be read or is not valid JSON."""


class DocumentSchemaError(CatalogLoadError):
    """
    Raised when the document does not match the expected schema.

    Attributes
    ----------
    index : Position of the offending entry in the array, if applicable.
    """

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        path: Optional[Path] = None,
    ) -> None:
        self.index = index
        self.reason = message
        if index is not None:
            message = f"entry {index}: {message}"
        super().__init__(message, path=path)


class EntryValidationError(GameExplorerError):
    """
    Raised when add-form input is rejected.

    Attributes
    ----------
    fields : Names of the offending form fields, in form order.
    """

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields: Tuple[str, ...] = tuple(fields)
        super().__init__(
            "Please fill in every field correctly. The year must be a number. "
            f"(invalid: {', '.join(self.fields)})"
        )
