"""
services/entry_validator.py – Gatekeeper between the "Add game" form and the
catalogue store.

Responsibilities
----------------
1. Check the four free-text form fields (no trimming is applied).
2. Build a CatalogEntry with the fixed platform values.
3. Hand it to the store and clear the form, or leave everything untouched and
   raise EntryValidationError.
"""

import logging
import re
from dataclasses import dataclass
from typing import List

from models.catalog_entry import CatalogEntry
from services.catalog_store import CatalogStore
from services.exceptions import EntryValidationError

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

# Every game added through the form is filed under this platform.
DEFAULT_PLATFORM: str = "the 3DS"
DEFAULT_PLATFORM_LINK: str = "https://en.wikipedia.org/wiki/Nintendo_3DS"

# Year must fit a signed 64-bit integer.
YEAR_MIN: int = -(2 ** 63)
YEAR_MAX: int = 2 ** 63 - 1

# Optional sign, ASCII digits only. int() alone would also accept
# surrounding whitespace, "_" separators and non-ASCII digits.
_YEAR_PATTERN: re.Pattern = re.compile(r"[+-]?[0-9]+")

# ── Public API ───────────────────────────────────────────────────────────────


def parse_year(year_text: str) -> int:
    """
    Parse *year_text* as a plain integer.

    Raises
    ------
    ValueError
        For anything other than an optionally signed run of ASCII digits
        within the 64-bit range ("", "abc", "19.5", " 2020" all fail).
    """
    if not _YEAR_PATTERN.fullmatch(year_text):
        raise ValueError(f"not a plain integer: {year_text!r}")
    year = int(year_text)
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise ValueError(f"year out of range: {year_text!r}")
    return year


def validate_entry(
    title: str, developer: str, publisher: str, year_text: str
) -> CatalogEntry:
    """
    Validate raw form input and build the entry to add.

    Returns
    -------
    CatalogEntry with no title/developer/publisher links and the fixed
    platform label and link.

    Raises
    ------
    EntryValidationError
        Listing every offending field.
    """
    invalid: List[str] = []
    if not title:
        invalid.append("title")
    if not developer:
        invalid.append("developer")
    if not publisher:
        invalid.append("publisher")

    year = None
    try:
        year = parse_year(year_text)
    except ValueError:
        invalid.append("year")

    if invalid:
        logger.debug("Rejected add-form input, invalid fields: %s", invalid)
        raise EntryValidationError(invalid)

    return CatalogEntry(
        title=title,
        year=year,
        developer=developer,
        publisher=publisher,
        platform=DEFAULT_PLATFORM,
        platform_link=DEFAULT_PLATFORM_LINK,
    )


@dataclass
class AddEntryForm:
    """
    Field state of the "Add game" form.

    Attributes
    ----------
    title, developer, publisher : Free text, exactly as typed.
    year_text                   : Release year as typed.
    """

    title: str = ""
    developer: str = ""
    publisher: str = ""
    year_text: str = ""

    def submit(self, store: CatalogStore) -> CatalogEntry:
        """
        Validate, add to *store*, then clear the fields.

        On EntryValidationError neither the fields nor the store change.
        """
        entry = validate_entry(self.title, self.developer, self.publisher, self.year_text)
        store.add(entry)
        self.clear()
        return entry

    def clear(self) -> None:
        self.title = ""
        self.developer = ""
        self.publisher = ""
        self.year_text = ""
