"""
engine/hero_repository.py -- Read-only store of the hero table.

The repository is handed a fully materialized list of heroes once and
never changes afterwards.  It owns no filtering logic; see
``engine.search_group`` for that.

Usage::

    from engine.hero_repository import HeroRepository

    repo = HeroRepository.from_json_file("app/data/heroes.json")
    heroes = repo.list_all()
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from typing import Any

from engine.models.hero import Hero
from engine.utils import safe_read_json

logger = logging.getLogger(__name__)


class HeroRepository:
    """Immutable, ordered collection of heroes.

    Parameters
    ----------
    heroes : iterable of Hero or mapping
        Records in stored (insertion) order.  Mappings are validated into
        ``Hero`` instances.

    Raises
    ------
    ValueError
        If two records share the same ``id``.
    pydantic.ValidationError
        If a mapping is not a valid hero record.
    """

    def __init__(self, heroes: Iterable[Hero | Mapping[str, Any]] = ()):
        records: list[Hero] = []
        seen: set[str] = set()
        for item in heroes:
            hero = item if isinstance(item, Hero) else Hero.model_validate(item)
            if hero.id in seen:
                raise ValueError(
                    f"Duplicate hero id '{hero.id}' ({hero.name!r}). "
                    f"Hero ids must be unique."
                )
            seen.add(hero.id)
            records.append(hero)

        self._heroes: tuple[Hero, ...] = tuple(records)
        self._by_id: dict[str, Hero] = {h.id: h for h in records}

    @classmethod
    def from_json_file(cls, path) -> HeroRepository:
        """Load the hero table from a JSON list of ``{id, name, photoUrl}`` records.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        ValueError
            If the file is unreadable or does not contain a JSON list.
        """
        path = str(path)
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Hero data file not found: {path}")

        data = safe_read_json(path)
        if not isinstance(data, list):
            raise ValueError(
                f"Hero data file {path} must contain a JSON list of hero records."
            )

        repo = cls(data)
        logger.info("Loaded %d heroes from %s", len(repo), path)
        return repo

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def list_all(self) -> list[Hero]:
        """Return every hero in stored order."""
        return list(self._heroes)

    def get(self, hero_id: str) -> Hero | None:
        """Return the hero with *hero_id*, or ``None``."""
        return self._by_id.get(hero_id)

    def __len__(self) -> int:
        return len(self._heroes)

    def __contains__(self, hero_id: object) -> bool:
        return hero_id in self._by_id
