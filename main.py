"""
main.py – 3DS Game Explorer application entry point.
Bootstraps the PySide6 QApplication, loads the bundled catalogue and launches
the main window.
"""

import logging
import sys

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QMessageBox

from main_window import MainWindow
from services.catalog_store import CatalogStore
from services.exceptions import CatalogLoadError

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    app = QApplication.instance()
    if app is None:
        QApplication.setHighDpiScaleFactorRoundingPolicy(
            Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
        )
        app = QApplication(sys.argv)
    app.setApplicationName("GameExplorer")
    app.setApplicationDisplayName("3DS Game Explorer")

    store = CatalogStore()
    try:
        store.load()
    except CatalogLoadError as exc:
        logger.critical("Startup failed, catalogue could not be loaded: %s", exc, exc_info=True)
        QMessageBox.critical(None, "Catalogue Error", str(exc))
        sys.exit(f"Fatal: {exc}")

    window = MainWindow(store)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
