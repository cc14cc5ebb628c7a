"""
services/catalog_store.py – The in-memory owner of the game catalogue.

Signal contract
---------------
  changed()            : Emitted after every successful load() and add()
  entry_added(object)  : The CatalogEntry just inserted, emitted before changed()

Connections are direct (same thread), so observers run synchronously inside
load() / add().
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from models.catalog_entry import CatalogEntry
from services import catalog_service

logger = logging.getLogger(__name__)


class CatalogStore(QObject):
    """
    Ordered sequence of CatalogEntry, newest additions first.

    The sequence only grows, and only at the head. Entries are never mutated
    or removed.
    """

    # ── Signals ───────────────────────────────────────────────────────────────
    changed     = Signal()
    entry_added = Signal(object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._entries: List[CatalogEntry] = []

    # ── Mutation ──────────────────────────────────────────────────────────────

    def load(self, path: Optional[Path] = None) -> None:
        """
        Replace the sequence with the contents of the games document.

        Raises CatalogLoadError on any failure; the store is left untouched.
        """
        entries = catalog_service.load_document(path)
        self._entries = entries
        self.changed.emit()

    def add(self, entry: CatalogEntry) -> None:
        """Insert *entry* at position 0. The caller is responsible for validation."""
        self._entries.insert(0, entry)
        logger.info("Added entry: %s (%d)", entry.title, entry.year)
        self.entry_added.emit(entry)
        self.changed.emit()

    # ── Read access ───────────────────────────────────────────────────────────

    def current(self) -> Tuple[CatalogEntry, ...]:
        """Snapshot of the present sequence."""
        return tuple(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def to_document(self) -> List[Dict[str, Any]]:
        """The current sequence under the games.json key mapping."""
        return catalog_service.encode_entries(self._entries)
