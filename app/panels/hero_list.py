"""
app/panels/hero_list.py -- Hero list panel.

Search bar plus a list of heroes grouped under alphabetical headers.
The panel holds no search logic: it forwards every text change to
``HeroSearchViewModel.set_query`` and rebuilds the tree whenever the view
model reports a new grouped view.

Rows are keyed by hero ID and headers by group key.  A sticky header
label mirrors the group of the top visible row, and a floating button
scrolls back to the top once the list has been scrolled.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QBrush, QColor, QFont
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from app.services.event_bus import EventBus
from app.services.hero_search import HeroSearchViewModel
from app.widgets.scroll_to_top import ScrollToTopButton

logger = logging.getLogger(__name__)

# Custom roles for storing hero data in tree items
HERO_ID_ROLE = Qt.ItemDataRole.UserRole + 1
PHOTO_URL_ROLE = Qt.ItemDataRole.UserRole + 2
GROUP_KEY_ROLE = Qt.ItemDataRole.UserRole + 3

_HEADER_BACKGROUND = "#00897b"


class HeroListPanel(QWidget):
    """Searchable, alphabetically grouped hero list."""

    def __init__(
        self,
        view_model: HeroSearchViewModel | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._view_model: HeroSearchViewModel | None = None
        self._bus = EventBus.instance()
        self._hero_items: dict[str, QTreeWidgetItem] = {}
        self._setup_ui()
        self._connect_signals()
        if view_model is not None:
            self.set_view_model(view_model)

    def set_view_model(self, view_model: HeroSearchViewModel) -> None:
        """Attach the search view model and render its current state."""
        if self._view_model is not None:
            self._view_model.grouped_view_changed.disconnect(self.rebuild)
            self._view_model.query_changed.disconnect(self._on_query_changed)
        self._view_model = view_model
        view_model.grouped_view_changed.connect(self.rebuild)
        view_model.query_changed.connect(self._on_query_changed)
        self._on_query_changed(view_model.current_query())
        self.rebuild()

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Search bar
        search_row = QHBoxLayout()
        search_row.setContentsMargins(16, 16, 16, 8)
        self._search = QLineEdit()
        self._search.setPlaceholderText("Search hero")
        self._search.setClearButtonEnabled(True)
        self._search.setMinimumHeight(48)
        search_row.addWidget(self._search, 1)

        self._count_label = QLabel("0 heroes")
        self._count_label.setStyleSheet("color: #888; font-size: 11px;")
        search_row.addWidget(self._count_label)
        layout.addLayout(search_row)

        # Grouped list
        self._tree = QTreeWidget()
        self._tree.setHeaderHidden(True)
        self._tree.setRootIsDecorated(False)
        self._tree.setItemsExpandable(False)
        self._tree.setIndentation(0)
        self._tree.setUniformRowHeights(False)
        layout.addWidget(self._tree, 1)

        # Sticky header over the top of the viewport
        self._sticky_header = QLabel(self._tree)
        self._sticky_header.setObjectName("stickyHeader")
        self._sticky_header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._sticky_header.setStyleSheet(
            f"background-color: {_HEADER_BACKGROUND}; color: #fff; "
            "font-weight: 900; padding: 8px;"
        )
        self._sticky_header.setVisible(False)

        self._scroll_button = ScrollToTopButton(self._tree)

    # ------------------------------------------------------------------
    # Signal wiring
    # ------------------------------------------------------------------

    def _connect_signals(self) -> None:
        self._search.textChanged.connect(self._on_search_text_changed)
        self._tree.itemClicked.connect(self._on_item_clicked)
        self._tree.verticalScrollBar().valueChanged.connect(self._on_scrolled)
        self._scroll_button.clicked.connect(self.scroll_to_top)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def rebuild(self) -> None:
        """Re-render the tree from the view model's current grouped view."""
        self._tree.clear()
        self._hero_items.clear()
        if self._view_model is None:
            self._update_count_label()
            return

        header_font = QFont()
        header_font.setBold(True)
        header_brush = QBrush(QColor(_HEADER_BACKGROUND))

        for group in self._view_model.current_grouped_view():
            header = QTreeWidgetItem([group.key])
            header.setData(0, GROUP_KEY_ROLE, group.key)
            header.setFlags(Qt.ItemFlag.ItemIsEnabled)
            header.setFont(0, header_font)
            header.setBackground(0, header_brush)
            header.setTextAlignment(0, Qt.AlignmentFlag.AlignCenter)
            self._tree.addTopLevelItem(header)

            for hero in group.heroes:
                row = QTreeWidgetItem([hero.name])
                row.setData(0, HERO_ID_ROLE, hero.id)
                row.setData(0, PHOTO_URL_ROLE, hero.photo_url)
                row.setData(0, GROUP_KEY_ROLE, group.key)
                header.addChild(row)
                self._hero_items[hero.id] = row

        self._tree.expandAll()
        logger.debug("Rendered %d groups, %d heroes", self._tree.topLevelItemCount(), len(self._hero_items))
        self._update_count_label()
        self._update_sticky_header()

    def _update_count_label(self) -> None:
        if self._view_model is None:
            self._count_label.setText("0 heroes")
            return
        visible = self._view_model.match_count
        total = self._view_model.total_count
        if visible == total:
            self._count_label.setText(f"{total} heroes")
        else:
            self._count_label.setText(f"{visible} / {total} heroes")

    def _update_sticky_header(self) -> None:
        scrolled = self._tree.verticalScrollBar().value() > 0
        item = self._tree.itemAt(QPoint(1, 1)) if scrolled else None
        if item is None:
            self._sticky_header.setVisible(False)
            return
        self._sticky_header.setText(item.data(0, GROUP_KEY_ROLE) or "")
        viewport = self._tree.viewport()
        self._sticky_header.setGeometry(
            viewport.x(), viewport.y(), viewport.width(), self._sticky_header.sizeHint().height()
        )
        self._sticky_header.setVisible(True)
        self._sticky_header.raise_()

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _on_search_text_changed(self, text: str) -> None:
        if self._view_model is None:
            return
        self._view_model.set_query(text)
        matched = self._view_model.match_count
        if text:
            self._bus.status_message.emit(f"{matched} heroes match '{text}'")
        else:
            self._bus.status_message.emit(f"Showing all {matched} heroes")

    def _on_query_changed(self, query: str) -> None:
        if self._search.text() != query:
            self._search.blockSignals(True)
            self._search.setText(query)
            self._search.blockSignals(False)

    def _on_item_clicked(self, item: QTreeWidgetItem, _column: int) -> None:
        hero_id = item.data(0, HERO_ID_ROLE)
        if hero_id:
            self._bus.hero_selected.emit(hero_id)

    def _on_scrolled(self, value: int) -> None:
        self._scroll_button.set_active(value > 0)
        self._update_sticky_header()

    # ------------------------------------------------------------------
    # External control
    # ------------------------------------------------------------------

    def scroll_to_top(self) -> None:
        self._tree.scrollToTop()

    def select_hero(self, hero_id: str) -> None:
        """Highlight a hero row if it is part of the current view."""
        item = self._hero_items.get(hero_id)
        if item is None:
            return
        self._tree.setCurrentItem(item)
        self._tree.scrollToItem(item)

    def focus_search(self) -> None:
        self._search.setFocus()
        self._search.selectAll()

    def clear_search(self) -> None:
        self._search.clear()
