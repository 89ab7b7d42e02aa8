"""Application entry point and setup for Numbrle."""

import logging
import os
import sys
from datetime import date

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from numbrle.core.session import GameSession
from numbrle.core.settings import apply_environment, load_settings
from numbrle.core.storage import JsonFileStore
from numbrle.ui.main_window import MainWindow

DEBUG_ENV = "NUMBRLE_DEBUG"


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    level = logging.DEBUG if os.environ.get(DEBUG_ENV) == "1" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def configure_font(app: QApplication) -> None:
    """Use a bold sans font with emoji fallbacks for the tiles and share text."""
    app_font = QFont()
    app_font.setFamilies(
        [
            "Inter",
            "Helvetica Neue",
            "Arial",
            "Noto Color Emoji",  # Linux (common)
            "Segoe UI Emoji",  # Windows
            "Apple Color Emoji",  # macOS
        ]
    )
    app_font.setPointSize(11)
    app.setFont(app_font)
    QGuiApplication.setFont(app_font)


def run() -> None:
    """Load settings and today's session, then start the main window."""
    configure_logging()
    settings = apply_environment(load_settings())

    app = QApplication(sys.argv)
    app.setApplicationName(settings.title)
    app.setApplicationDisplayName(settings.title)
    configure_font(app)

    store = JsonFileStore(settings.data_dir)
    session = GameSession(
        store,
        today=date.today(),
        epoch=settings.epoch,
        share_footer=settings.share_footer,
    )
    logging.info("Numbrle #%d ready, data in %s", session.day, store.directory)

    window = MainWindow(session, title=settings.title)
    window.resize(480, 760)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
