"""
app/services/hero_search.py -- Reactive search state for the hero list.

Owns the live query and the grouped view derived from it.  Every call to
``set_query`` recomputes the view synchronously and then emits Qt
signals, so panels never see a view computed from a stale query.

The ``(query, grouped_view)`` pair is published under a lock so worker
threads reading through ``snapshot()`` never observe a mismatched pair.
Writes are expected from the GUI thread only.

Usage::

    from app.services.hero_search import HeroSearchViewModel

    vm = HeroSearchViewModel(repository)
    vm.grouped_view_changed.connect(panel.rebuild)
    vm.set_query("ga")
    vm.current_grouped_view()
"""

from __future__ import annotations

import logging
import threading

from PySide6.QtCore import QObject, Signal

from engine.hero_repository import HeroRepository
from engine.models.hero import HeroGroup
from engine.search_group import flatten, group_heroes

logger = logging.getLogger(__name__)


class HeroSearchViewModel(QObject):
    """Query state plus the filtered, alphabetically grouped hero view.

    Signals
    -------
    query_changed(str)
        Emitted after every ``set_query`` call with the new query.
    grouped_view_changed()
        Emitted after every recomputation.  Read the new view with
        ``current_grouped_view()``.
    """

    query_changed = Signal(str)
    grouped_view_changed = Signal()

    def __init__(self, repository: HeroRepository, parent: QObject | None = None):
        super().__init__(parent)
        self._repository = repository
        self._lock = threading.RLock()
        self._query = ""
        self._grouped_view: tuple[HeroGroup, ...] = group_heroes(
            repository.list_all(), self._query
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def current_query(self) -> str:
        with self._lock:
            return self._query

    def current_grouped_view(self) -> tuple[HeroGroup, ...]:
        with self._lock:
            return self._grouped_view

    def snapshot(self) -> tuple[str, tuple[HeroGroup, ...]]:
        """Return ``(query, grouped_view)`` read together."""
        with self._lock:
            return self._query, self._grouped_view

    @property
    def repository(self) -> HeroRepository:
        return self._repository

    @property
    def total_count(self) -> int:
        return len(self._repository)

    @property
    def match_count(self) -> int:
        with self._lock:
            return len(flatten(self._grouped_view))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_query(self, new_query: str) -> None:
        """Replace the query and recompute the grouped view.

        Any string is accepted, including the empty string and the
        current query.  The text is not trimmed.
        """
        view = group_heroes(self._repository.list_all(), new_query)
        with self._lock:
            self._query = new_query
            self._grouped_view = view
        logger.debug(
            "Query %r -> %d groups, %d heroes",
            new_query,
            len(view),
            sum(len(group.heroes) for group in view),
        )

        self.query_changed.emit(new_query)
        self.grouped_view_changed.emit()
