"""
Unit tests for services/catalog_service.py – reading the games document.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

import services.data as data_package
from services import catalog_service
from services.exceptions import (
    CatalogLoadError,
    DocumentNotFoundError,
    DocumentReadError,
    DocumentSchemaError,
)

from conftest import BUNDLED_DOCUMENT


class TestLoadDocument:
    def test_loads_entries_in_document_order(self, document_path: Path) -> None:
        entries = catalog_service.load_document(document_path)
        assert [e.title for e in entries] == ["Zelda", "Bravely Default"]

    def test_empty_array_is_an_empty_catalogue(self, tmp_path: Path) -> None:
        path = tmp_path / "games.json"
        path.write_text("[]", encoding="utf-8")
        assert catalog_service.load_document(path) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nope.json"
        with pytest.raises(DocumentNotFoundError) as excinfo:
            catalog_service.load_document(path)
        assert excinfo.value.path == path
        assert str(path) in str(excinfo.value)

    def test_directory_is_not_a_document(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentNotFoundError):
            catalog_service.load_document(tmp_path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "games.json"
        path.write_text('[{"Game": "Zelda",', encoding="utf-8")
        with pytest.raises(DocumentReadError):
            catalog_service.load_document(path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "games.json"
        path.write_bytes(b'[{"Game": "\xff"}]')
        with pytest.raises(DocumentReadError):
            catalog_service.load_document(path)

    def test_top_level_must_be_array(self, tmp_path: Path) -> None:
        path = tmp_path / "games.json"
        path.write_text('{"Game": "Zelda"}', encoding="utf-8")
        with pytest.raises(DocumentSchemaError):
            catalog_service.load_document(path)

    def test_schema_error_reports_index_and_path(self, tmp_path: Path, sample_documents) -> None:
        broken = dict(sample_documents[1])
        del broken["Dev"]
        path = tmp_path / "games.json"
        path.write_text(json.dumps([sample_documents[0], broken]), encoding="utf-8")

        with pytest.raises(DocumentSchemaError) as excinfo:
            catalog_service.load_document(path)
        assert excinfo.value.index == 1
        assert excinfo.value.path == path
        assert "Dev" in str(excinfo.value)

    def test_all_failures_share_a_base_class(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogLoadError):
            catalog_service.load_document(tmp_path / "missing.json")


class TestBundledDocument:
    def test_default_location(self) -> None:
        assert catalog_service.BUNDLED_DOCUMENT.resolve() == BUNDLED_DOCUMENT.resolve()

    def test_resolved_through_the_data_package(self) -> None:
        package_dir = Path(data_package.__file__).resolve().parent
        assert catalog_service.BUNDLED_DOCUMENT.resolve() == package_dir / "games.json"
        assert catalog_service.BUNDLED_DOCUMENT.is_file()

    def test_frozen_bundle_location(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setattr(sys, "_MEIPASS", str(tmp_path), raising=False)
        assert catalog_service._resolve_bundled_document() == (
            tmp_path / "services" / "data" / "games.json"
        )

    def test_bundled_document_loads(self) -> None:
        entries = catalog_service.load_document()
        assert entries
        assert all(e.platform == "the 3DS" for e in entries)

    def test_bundled_document_round_trip(self) -> None:
        original = json.loads(BUNDLED_DOCUMENT.read_text(encoding="utf-8"))
        entries = catalog_service.load_document()
        assert catalog_service.encode_entries(entries) == original


def test_null_links_round_trip_as_absent(sample_documents) -> None:
    doc = dict(sample_documents[1], GameLink=None, PlatformLink=None)
    entries = catalog_service.decode_entries([doc])
    encoded = catalog_service.encode_entries(entries)
    assert encoded == [{k: v for k, v in doc.items() if v is not None}]
