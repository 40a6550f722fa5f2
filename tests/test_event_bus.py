"""
Tests for app/services/event_bus.py -- EventBus singleton and signals.
"""

import threading
from unittest.mock import MagicMock

import pytest

from app.services.event_bus import EventBus


@pytest.fixture(autouse=True)
def _reset_event_bus():
    """Ensure each test starts with a fresh EventBus."""
    EventBus.reset()
    yield
    EventBus.reset()


@pytest.fixture()
def _ensure_qapp(qapp):
    """Make sure a QApplication exists for signal/slot machinery."""
    yield qapp


# ------------------------------------------------------------------
# Singleton tests
# ------------------------------------------------------------------


class TestSingletonPattern:
    def test_instance_returns_same_object(self, _ensure_qapp):
        assert EventBus.instance() is EventBus.instance()

    def test_reset_clears_instance(self, _ensure_qapp):
        bus1 = EventBus.instance()
        EventBus.reset()
        bus2 = EventBus.instance()
        assert bus1 is not bus2

    def test_thread_safe_creation(self, _ensure_qapp):
        """Multiple threads racing to create the instance should all get the same object."""
        results = []
        barrier = threading.Barrier(4)

        def _grab():
            barrier.wait()
            results.append(id(EventBus.instance()))

        threads = [threading.Thread(target=_grab) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(results)) == 1, "All threads should get the same instance"


# ------------------------------------------------------------------
# Signal tests
# ------------------------------------------------------------------


class TestSignals:
    def test_hero_selected_signal(self, _ensure_qapp):
        bus = EventBus.instance()
        receiver = MagicMock()
        bus.hero_selected.connect(receiver)
        bus.hero_selected.emit("13")
        receiver.assert_called_once_with("13")

    def test_error_occurred_signal(self, _ensure_qapp):
        bus = EventBus.instance()
        receiver = MagicMock()
        bus.error_occurred.connect(receiver)
        bus.error_occurred.emit("No heroes loaded")
        receiver.assert_called_once_with("No heroes loaded")

    def test_status_message_signal(self, _ensure_qapp):
        bus = EventBus.instance()
        receiver = MagicMock()
        bus.status_message.connect(receiver)
        bus.status_message.emit("Ready")
        receiver.assert_called_once_with("Ready")

    def test_multiple_receivers(self, _ensure_qapp):
        bus = EventBus.instance()
        r1 = MagicMock()
        r2 = MagicMock()
        bus.hero_selected.connect(r1)
        bus.hero_selected.connect(r2)
        bus.hero_selected.emit("1")
        r1.assert_called_once_with("1")
        r2.assert_called_once_with("1")
