"""
app/widgets/scroll_to_top.py -- Floating "scroll to top" button.

A round button that floats over the bottom centre of its parent and
follows the parent's size.  The owner decides when it is active,
typically while the first row of a list is scrolled out of view.

Usage::

    button = ScrollToTopButton(list_view)
    button.clicked.connect(list_view.scrollToTop)
    button.set_active(scroll_value > 0)
"""

from __future__ import annotations

from PySide6.QtCore import QEvent, Qt
from PySide6.QtWidgets import QPushButton, QWidget

_SIZE = 44
_BOTTOM_MARGIN = 24


class ScrollToTopButton(QPushButton):
    """Round overlay button anchored to the bottom centre of *parent*."""

    def __init__(self, parent: QWidget):
        super().__init__("↑", parent)
        self.setObjectName("scrollToTopButton")
        self.setFixedSize(_SIZE, _SIZE)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip("Scroll to top")
        self.setStyleSheet(
            f"QPushButton#scrollToTopButton {{"
            f" background-color: #fff; color: #000;"
            f" border-radius: {_SIZE // 2}px; font-size: 20px; font-weight: bold; }}"
        )
        self.setVisible(False)
        parent.installEventFilter(self)

    def set_active(self, active: bool) -> None:
        """Show or hide the button, keeping it positioned on top."""
        if active == (not self.isHidden()):
            return
        if active:
            self._reposition()
            self.raise_()
        self.setVisible(active)

    def _reposition(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        x = (parent.width() - self.width()) // 2
        y = parent.height() - self.height() - _BOTTOM_MARGIN
        self.move(max(x, 0), max(y, 0))

    def eventFilter(self, obj, event) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._reposition()
        return super().eventFilter(obj, event)
