"""
app/main_window.py -- Main application window.

Hosts the hero list as the central widget, a status bar fed by the
EventBus, and a small Help menu.  Window geometry is saved/restored
across sessions via QSettings.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QSettings
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QMainWindow, QStatusBar, QWidget

from app.panels.hero_list import HeroListPanel
from app.services.event_bus import EventBus
from app.services.hero_search import HeroSearchViewModel

logger = logging.getLogger(__name__)

_ORG_NAME = "JetHeroes"
_APP_NAME = "JetHeroes"


class MainWindow(QMainWindow):
    """Single-screen window showing the searchable hero list."""

    def __init__(
        self,
        view_model: HeroSearchViewModel | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._settings = QSettings(_ORG_NAME, _APP_NAME)
        self._view_model = view_model

        self.setWindowTitle("JetHeroes")
        self.setMinimumSize(360, 640)

        self._hero_panel = HeroListPanel(view_model)
        self.setCentralWidget(self._hero_panel)

        # Menu bar
        self._build_menus()

        # Status bar
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Ready")

        # Connect EventBus status messages
        self._bus = bus = EventBus.instance()
        bus.status_message.connect(self._on_status_message)
        bus.error_occurred.connect(self._on_error)
        bus.hero_selected.connect(self._on_hero_selected)

        # Keyboard shortcuts
        self._setup_shortcuts()

        # Restore geometry from previous session
        self._restore_layout()

    @property
    def hero_panel(self) -> HeroListPanel:
        return self._hero_panel

    def inject_view_model(self, view_model: HeroSearchViewModel) -> None:
        """Wire the search view model into the hero list."""
        self._view_model = view_model
        self._hero_panel.set_view_model(view_model)

    # ------------------------------------------------------------------
    # Menus and shortcuts
    # ------------------------------------------------------------------

    def _build_menus(self) -> None:
        help_menu = self.menuBar().addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _setup_shortcuts(self) -> None:
        """Register window-wide keyboard shortcuts."""
        # Ctrl+F -- focus hero search
        search_action = QAction("Search Heroes", self)
        search_action.setShortcut(QKeySequence("Ctrl+F"))
        search_action.triggered.connect(self._hero_panel.focus_search)
        self.addAction(search_action)

        # Escape -- clear the query
        esc_action = QAction("Clear Search", self)
        esc_action.setShortcut(QKeySequence("Escape"))
        esc_action.triggered.connect(self._hero_panel.clear_search)
        self.addAction(esc_action)

        # Ctrl+Home -- back to the first row
        top_action = QAction("Scroll to Top", self)
        top_action.setShortcut(QKeySequence("Ctrl+Home"))
        top_action.triggered.connect(self._hero_panel.scroll_to_top)
        self.addAction(top_action)

    # ------------------------------------------------------------------
    # Layout save / restore
    # ------------------------------------------------------------------

    def _save_layout(self) -> None:
        self._settings.setValue("geometry", self.saveGeometry())

    def _restore_layout(self) -> None:
        geometry = self._settings.value("geometry")
        if geometry:
            self.restoreGeometry(geometry)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_hero_selected(self, hero_id: str) -> None:
        self._hero_panel.select_hero(hero_id)
        if self._view_model is None:
            return
        hero = self._view_model.repository.get(hero_id)
        if hero is not None:
            self._status_bar.showMessage(hero.name, 5000)

    def _on_status_message(self, message: str) -> None:
        self._status_bar.showMessage(message, 5000)

    def _on_error(self, message: str) -> None:
        self._status_bar.showMessage(f"Error: {message}", 10000)

    def _show_about(self) -> None:
        from PySide6.QtWidgets import QMessageBox
        QMessageBox.about(
            self,
            "JetHeroes",
            "Browse Indonesian national heroes.\n\n"
            "Type in the search bar to filter the list by name.",
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def closeEvent(self, event: QCloseEvent) -> None:
        """Save geometry on close."""
        self._save_layout()
        logger.info("Main window closing, layout saved")
        super().closeEvent(event)
