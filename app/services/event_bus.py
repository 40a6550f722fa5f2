"""
app/services/event_bus.py -- Application-wide event bus using Qt signals.

Singleton that provides typed signals for cross-widget communication.
Widgets connect to the EventBus rather than directly to each other.

Usage::

    from app.services.event_bus import EventBus

    bus = EventBus.instance()
    bus.hero_selected.connect(my_handler)
    bus.hero_selected.emit("13")
"""

from __future__ import annotations

import threading

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """Application-wide signal bus.

    Signals
    -------
    hero_selected(str)
        Fired when the user clicks a hero row. Payload is the hero ID.
    error_occurred(str)
        Fired when an error needs to be shown to the user.
    status_message(str)
        Fired to update the status bar message.
    """

    hero_selected = Signal(str)

    error_occurred = Signal(str)
    status_message = Signal(str)

    # Singleton
    _instance: EventBus | None = None
    _lock = threading.Lock()

    @classmethod
    def instance(cls) -> EventBus:
        """Return the singleton EventBus instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton (for testing)."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance.deleteLater()
            cls._instance = None
