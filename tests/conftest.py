"""
Shared fixtures for the Game Explorer test suite.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List

import pytest
from PySide6.QtWidgets import QApplication

from models.catalog_entry import CatalogEntry
from services.catalog_store import CatalogStore

PROJECT_ROOT = Path(__file__).resolve().parents[1]
BUNDLED_DOCUMENT = PROJECT_ROOT / "services" / "data" / "games.json"


@pytest.fixture(scope="session", autouse=True)
def qt_app() -> QApplication:
    """One offscreen QApplication for the session; signals are delivered directly."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return QApplication.instance() or QApplication([])


def make_entry(title: str, **overrides: Any) -> CatalogEntry:
    values: Dict[str, Any] = {
        "title": title,
        "year": 2012,
        "developer": "Nintendo EAD",
        "publisher": "Nintendo",
        "platform": "the 3DS",
    }
    values.update(overrides)
    return CatalogEntry(**values)


@pytest.fixture
def sample_documents() -> List[Dict[str, Any]]:
    return [
        {
            "Game": "Zelda",
            "GameLink": "https://example.org/zelda",
            "Year": 2013,
            "Dev": "Nintendo EAD",
            "DevLink": "https://example.org/ead",
            "Publisher": "Nintendo",
            "PublisherLink": "https://example.org/nintendo",
            "Platform": "the 3DS",
            "PlatformLink": "https://example.org/3ds",
        },
        {
            "Game": "Bravely Default",
            "Year": 2012,
            "Dev": "Silicon Studio",
            "Publisher": "Square Enix",
            "Platform": "the 3DS",
        },
    ]


@pytest.fixture
def document_path(tmp_path: Path, sample_documents: List[Dict[str, Any]]) -> Path:
    path = tmp_path / "games.json"
    path.write_text(json.dumps(sample_documents), encoding="utf-8")
    return path


@pytest.fixture
def store(document_path: Path) -> CatalogStore:
    s = CatalogStore()
    s.load(document_path)
    return s
