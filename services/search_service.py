"""
services/search_service.py – In-memory title filter for the game list.
"""

import unicodedata
from typing import Iterable, List

from models.catalog_entry import CatalogEntry


def search(entries: Iterable[CatalogEntry], query: str) -> List[CatalogEntry]:
    """
    Case-insensitive title filter.

    Parameters
    ----------
    entries : Current catalogue, in display order.
    query   : Live search text. Not stripped: "  " is a real query.

    Returns
    -------
    Matching entries in their original relative order; every entry when
    query is empty.
    """
    if not query:
        return list(entries)
    needle = _fold(query)
    return [e for e in entries if needle in _fold(e.title)]


def _fold(text: str) -> str:
    """Normalise composed/decomposed forms, then apply full case folding."""
    return unicodedata.normalize("NFC", text).casefold()
