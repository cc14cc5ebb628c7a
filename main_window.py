"""
main_window.py – 3DS Game Explorer main window.

Layout
------
  ┌──────────────────────────────────────────────────────┐
  │  [ Games ] [ Add ] [ About ]                         │  ← tabs
  ├───────────────────────────┬──────────────────────────┤
  │  [Search bar]             │                          │
  │  Game list                │  Detail panel            │
  │  (QListWidget)            │  (info + links)          │
  ├───────────────────────────┴──────────────────────────┤
  │  Status bar  ·  "N games"                            │  ← BOTTOM
  └──────────────────────────────────────────────────────┘
"""

from __future__ import annotations

import html
from typing import List

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSplitter,
    QStatusBar,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from models.catalog_entry import CatalogEntry
from services import search_service
from services.catalog_store import CatalogStore
from services.entry_validator import AddEntryForm
from services.exceptions import EntryValidationError

# ── Colour palette ─────────────────────────────────────────────────────────────
_BG         = "#0f1117"
_BG2        = "#1a1d27"
_BG3        = "#22263a"
_ACCENT     = "#e4000f"
_ACCENT2    = "#b0000c"
_TEXT       = "#e2e8f0"
_TEXT_DIM   = "#718096"
_BORDER     = "#2d3748"

_STYLESHEET = f"""
QMainWindow, QWidget {{
    background-color: {_BG};
    color: {_TEXT};
    font-family: 'Segoe UI', sans-serif;
    font-size: 13px;
}}

/* ── Search bar & form fields ───────────────────────────────────────────── */
QLineEdit {{
    background-color: {_BG2};
    border: 1px solid {_BORDER};
    border-radius: 6px;
    padding: 7px 12px;
    color: {_TEXT};
    selection-background-color: {_ACCENT};
}}
QLineEdit:focus {{
    border-color: {_ACCENT};
}}

/* ── Game list ──────────────────────────────────────────────────────────── */
QListWidget#gameList {{
    background-color: {_BG2};
    border: 1px solid {_BORDER};
    border-radius: 6px;
    outline: none;
    padding: 4px;
}}
QListWidget#gameList::item {{
    padding: 8px 12px;
    border-radius: 4px;
}}
QListWidget#gameList::item:selected {{
    background-color: {_ACCENT};
    color: white;
}}
QListWidget#gameList::item:hover {{
    background-color: {_BG3};
}}

/* ── Group boxes ────────────────────────────────────────────────────────── */
QGroupBox {{
    background-color: {_BG2};
    border: 1px solid {_BORDER};
    border-radius: 8px;
    margin-top: 18px;
    padding: 12px 10px 10px 10px;
    font-weight: bold;
    color: {_TEXT_DIM};
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 6px;
    left: 10px;
}}

/* ── Buttons ────────────────────────────────────────────────────────────── */
QPushButton#addBtn {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
        stop:0 {_ACCENT}, stop:1 {_ACCENT2});
    color: white;
    font-weight: bold;
    border: none;
    border-radius: 8px;
    padding: 10px 18px;
}}

/* ── Tabs ───────────────────────────────────────────────────────────────── */
QTabBar::tab {{
    background: {_BG2};
    color: {_TEXT_DIM};
    padding: 8px 18px;
    border: 1px solid {_BORDER};
}}
QTabBar::tab:selected {{
    background: {_BG3};
    color: {_TEXT};
}}

/* ── Status bar ─────────────────────────────────────────────────────────── */
QStatusBar {{
    background: {_BG2};
    color: {_TEXT_DIM};
    border-top: 1px solid {_BORDER};
    font-size: 11px;
}}
"""

_ABOUT_TEXT = (
    "Browse a catalogue of Nintendo 3DS games, search it by title and add "
    "your own entries. Additions live in memory only and are discarded when "
    "the application closes."
)


class MainWindow(QMainWindow):
    """Primary application window. Expects an already-loaded *store*."""

    def __init__(self, store: CatalogStore) -> None:
        super().__init__()
        self.setWindowTitle("3DS Game Explorer")
        self.setMinimumSize(900, 600)
        self.setStyleSheet(_STYLESHEET)

        # State
        self._store = store
        self._filtered: List[CatalogEntry] = []
        self._form = AddEntryForm()

        self._build_ui()
        self._connect_signals()
        self._on_catalog_changed()

    # ── UI construction ───────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        tabs = QTabWidget()
        tabs.addTab(self._build_games_tab(), "Games")
        tabs.addTab(self._build_add_tab(), "Add")
        tabs.addTab(self._build_about_tab(), "About")
        self.setCentralWidget(tabs)

        self._count_label = QLabel()
        self._status_bar = QStatusBar()
        self._status_bar.addPermanentWidget(self._count_label)
        self.setStatusBar(self._status_bar)

    def _build_games_tab(self) -> QWidget:
        w = QWidget()
        layout = QVBoxLayout(w)
        layout.setContentsMargins(16, 16, 16, 8)

        self._search_bar = QLineEdit()
        self._search_bar.setPlaceholderText("Search by game title...")
        self._search_bar.setClearButtonEnabled(True)
        layout.addWidget(self._search_bar)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.setChildrenCollapsible(False)

        self._game_list = QListWidget()
        self._game_list.setObjectName("gameList")
        splitter.addWidget(self._game_list)

        self._detail = QLabel("Select a game to see its details.")
        self._detail.setWordWrap(True)
        self._detail.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self._detail.setTextFormat(Qt.TextFormat.RichText)
        self._detail.setOpenExternalLinks(True)
        self._detail.setMinimumWidth(280)
        splitter.addWidget(self._detail)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)

        layout.addWidget(splitter, stretch=1)
        return w

    def _build_add_tab(self) -> QWidget:
        w = QWidget()
        layout = QVBoxLayout(w)
        layout.setContentsMargins(16, 16, 16, 16)

        group = QGroupBox("Game Details")
        form = QFormLayout(group)
        self._title_edit = QLineEdit()
        self._dev_edit = QLineEdit()
        self._pub_edit = QLineEdit()
        self._year_edit = QLineEdit()
        self._year_edit.setInputMethodHints(Qt.InputMethodHint.ImhDigitsOnly)
        form.addRow("Title", self._title_edit)
        form.addRow("Developer", self._dev_edit)
        form.addRow("Publisher", self._pub_edit)
        form.addRow("Release year", self._year_edit)
        layout.addWidget(group)

        self._add_btn = QPushButton("Add Game")
        self._add_btn.setObjectName("addBtn")
        layout.addWidget(self._add_btn)
        layout.addStretch()
        return w

    def _build_about_tab(self) -> QWidget:
        w = QWidget()
        layout = QVBoxLayout(w)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        title = QLabel("3DS Game Explorer")
        title.setFont(QFont("Segoe UI", 22, QFont.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        body = QLabel(_ABOUT_TEXT)
        body.setWordWrap(True)
        body.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout.addWidget(title)
        layout.addWidget(body)
        return w

    # ── Signal wiring ─────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._store.changed.connect(self._on_catalog_changed)
        self._store.entry_added.connect(self._on_entry_added)
        self._search_bar.textChanged.connect(self._on_search_changed)
        self._game_list.currentItemChanged.connect(self._on_game_selected)
        self._add_btn.clicked.connect(self._on_add)

    # ── Slots ─────────────────────────────────────────────────────────────────

    @Slot()
    def _on_catalog_changed(self) -> None:
        self._apply_search()
        self._count_label.setText(f"{self._store.count()} games")

    @Slot(object)
    def _on_entry_added(self, entry: CatalogEntry) -> None:
        self._set_status(f"Added: {entry.title}")

    @Slot(str)
    def _on_search_changed(self, text: str) -> None:
        self._apply_search()

    @Slot()
    def _on_game_selected(self) -> None:
        row = self._game_list.currentRow()
        if row < 0:
            return
        self._detail.setText(_detail_html(self._filtered[row]))

    @Slot()
    def _on_add(self) -> None:
        self._form.title = self._title_edit.text()
        self._form.developer = self._dev_edit.text()
        self._form.publisher = self._pub_edit.text()
        self._form.year_text = self._year_edit.text()

        try:
            self._form.submit(self._store)
        except EntryValidationError:
            QMessageBox.warning(
                self,
                "Invalid Fields",
                "Please fill in every field correctly. The year must be a number.",
            )
            return

        # Mirror the cleared form state back into the widgets.
        self._title_edit.setText(self._form.title)
        self._dev_edit.setText(self._form.developer)
        self._pub_edit.setText(self._form.publisher)
        self._year_edit.setText(self._form.year_text)

    # ── UI helpers ────────────────────────────────────────────────────────────

    def _apply_search(self) -> None:
        query = self._search_bar.text()
        self._filtered = search_service.search(self._store.current(), query)
        self._game_list.clear()
        for entry in self._filtered:
            self._game_list.addItem(QListWidgetItem(str(entry)))

    def _set_status(self, msg: str) -> None:
        self._status_bar.showMessage(msg, 5000)


def _detail_html(entry: CatalogEntry) -> str:
    rows = [
        ("Title", entry.title),
        ("Year", str(entry.year)),
        ("Platform", entry.platform),
        ("Developer", entry.developer),
        ("Publisher", entry.publisher),
    ]
    parts = [f"<h2>{html.escape(entry.title)}</h2>", "<table cellspacing='6'>"]
    for label, value in rows:
        parts.append(
            f"<tr><td style='color:{_TEXT_DIM}'>{label}</td>"
            f"<td>{html.escape(value)}</td></tr>"
        )
    parts.append("</table>")

    links = entry.links()
    if links:
        parts.append("<p>")
        parts.append("<br>".join(
            f"<a style='color:{_ACCENT}' href='{html.escape(url, quote=True)}'>{label}</a>"
            for label, url in links
        ))
        parts.append("</p>")
    return "".join(parts)
