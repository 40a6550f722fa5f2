"""
app/main.py -- Application entry point.

Initializes the QApplication, applies the dark theme, loads the hero
table, creates the MainWindow, and runs the event loop.

Usage::

    python -m app.main
    # or, once installed
    jetheroes
"""

from __future__ import annotations

import os
os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

import logging
import sys
import traceback

# Ensure project root is on sys.path
_THIS_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_THIS_DIR)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from app.paths import get_heroes_data_path, is_frozen


def _setup_logging() -> None:
    """Configure logging for the desktop application."""
    level = logging.DEBUG if os.environ.get("JETHEROES_DEBUG") else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _global_exception_hook(exc_type, exc_value, exc_tb):
    """Last-resort handler for uncaught exceptions.

    Logs the traceback and shows a message box (if a QApplication exists).
    """
    logger = logging.getLogger("app")
    logger.critical(
        "Uncaught exception: %s",
        "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
    )

    try:
        from PySide6.QtWidgets import QApplication, QMessageBox
        app = QApplication.instance()
        if app is not None:
            QMessageBox.critical(
                None,
                "Unexpected Error",
                f"An unexpected error occurred:\n\n{exc_value}\n\n"
                "The application will attempt to continue.\n"
                "Please check the logs for details.",
            )
    except Exception:
        pass  # Can't show GUI -- already logged above


def main() -> int:
    """Launch JetHeroes."""
    _setup_logging()
    logger = logging.getLogger("app")
    logger.info("Starting JetHeroes (frozen=%s)", is_frozen())

    sys.excepthook = _global_exception_hook

    # Must create QApplication before anything else Qt-related
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication(sys.argv)

    from app.theme.dark_theme import apply_theme
    apply_theme(app)

    # Load the hero table; an empty list keeps the window usable
    from engine.hero_repository import HeroRepository
    data_path = get_heroes_data_path()
    try:
        repository = HeroRepository.from_json_file(data_path)
    except (OSError, ValueError):
        logger.exception("Failed to load hero data from %s", data_path)
        repository = HeroRepository()

    from app.services.hero_search import HeroSearchViewModel
    view_model = HeroSearchViewModel(repository)

    from app.main_window import MainWindow
    window = MainWindow(view_model)
    window.show()
    logger.info("Main window displayed with %d heroes", len(repository))

    if len(repository) == 0:
        from app.services.event_bus import EventBus
        EventBus.instance().error_occurred.emit(f"No heroes loaded from {data_path}")

    exit_code = app.exec()
    logger.info("Goodbye!")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
