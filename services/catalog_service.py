"""
services/catalog_service.py – Reading and decoding the bundled games document.

Responsibilities
----------------
1. Resolve the location of ``games.json`` (source tree or frozen bundle).
2. Read and parse it, mapping every failure onto a CatalogLoadError subclass.
3. Encode entries back to the document schema for lossless snapshots.
"""

import json
import logging
import sys
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from models.catalog_entry import CatalogEntry, schema_error
from services.exceptions import DocumentNotFoundError, DocumentReadError

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

DATA_PACKAGE: str = "services.data"
DOCUMENT_NAME: str = "games.json"


def _resolve_bundled_document() -> Path:
    """Locate games.json in a PyInstaller bundle or in the installed package."""
    frozen_base = getattr(sys, "_MEIPASS", None)
    if frozen_base is not None:
        return Path(frozen_base).joinpath(*DATA_PACKAGE.split("."), DOCUMENT_NAME)
    return Path(str(files(DATA_PACKAGE) / DOCUMENT_NAME))


BUNDLED_DOCUMENT: Path = _resolve_bundled_document()

_ENTRIES: TypeAdapter = TypeAdapter(List[CatalogEntry])

# ── Public API ───────────────────────────────────────────────────────────────


def load_document(path: Optional[Path] = None) -> List[CatalogEntry]:
    """
    Read and decode the games document.

    Parameters
    ----------
    path : Document to read; defaults to BUNDLED_DOCUMENT.

    Returns
    -------
    List[CatalogEntry]
        Entries in document order (may be empty for ``[]``).

    Raises
    ------
    DocumentNotFoundError, DocumentReadError, DocumentSchemaError
    """
    path = Path(path) if path is not None else BUNDLED_DOCUMENT

    if not path.is_file():
        raise DocumentNotFoundError("Games document not found", path=path)

    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(f"Could not read games document: {exc}", path=path) from exc

    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise DocumentReadError(f"Games document is not valid UTF-8: {exc}", path=path) from exc
    except json.JSONDecodeError as exc:
        raise DocumentReadError(f"Games document is not valid JSON: {exc}", path=path) from exc

    entries = decode_entries(data, path=path)
    logger.info("Loaded %d entries from %s", len(entries), path)
    return entries


def decode_entries(data: Any, path: Optional[Path] = None) -> List[CatalogEntry]:
    """Decode an already-parsed JSON value (must be an array of objects)."""
    try:
        return _ENTRIES.validate_python(data)
    except ValidationError as exc:
        raise schema_error(exc, path=path) from exc


def encode_entries(entries: Iterable[CatalogEntry]) -> List[Dict[str, Any]]:
    """Encode *entries* under the fixed document key mapping."""
    return [entry.to_document() for entry in entries]
