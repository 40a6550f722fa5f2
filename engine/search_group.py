"""
engine/search_group.py -- Filter heroes by a query and group them by initial.

Pure functions with no Qt dependency.  The pipeline always runs in the
same order: filter, group, sort group keys, sort within each group.
Grouping after filtering means a key with no matches never produces an
empty header.

Usage::

    from engine.search_group import group_heroes

    view = group_heroes(repository.list_all(), "ga")
    for group in view:
        print(group.key, [h.name for h in group.heroes])
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from engine.models.hero import Hero, HeroGroup

logger = logging.getLogger(__name__)


def group_key(name: str) -> str | None:
    """Return the header key for *name*: its upper-cased first character.

    Returns ``None`` for an empty name.  Digits and symbols are their own
    keys.  Characters whose upper-case form expands (``"ß"`` -> ``"SS"``)
    keep only the first character so a key is always one character long.
    """
    if not name:
        return None
    return name[0].upper()[0]


def matches_query(name: str, query: str) -> bool:
    """Case-insensitive substring containment.  Empty *query* matches everything."""
    return query.casefold() in name.casefold()


def filter_heroes(heroes: Iterable[Hero], query: str) -> list[Hero]:
    """Return the heroes whose name contains *query*, in input order."""
    return [hero for hero in heroes if matches_query(hero.name, query)]


def group_heroes(heroes: Iterable[Hero], query: str = "") -> tuple[HeroGroup, ...]:
    """Build the grouped view for *query* over *heroes*.

    Parameters
    ----------
    heroes : iterable of Hero
        Candidates in stored order.  Stored order decides ties between
        names that compare equal case-insensitively.
    query : str
        Filter text.  Not trimmed.

    Returns
    -------
    tuple[HeroGroup, ...]
        Groups in ascending key order, each with heroes sorted by name
        (case-insensitive, stable).  Empty when nothing matches.
    """
    buckets: dict[str, list[Hero]] = {}
    for hero in filter_heroes(heroes, query):
        key = group_key(hero.name)
        if key is None:
            logger.warning("Skipping hero %r with an empty name", hero.id)
            continue
        buckets.setdefault(key, []).append(hero)

    return tuple(
        HeroGroup(
            key=key,
            heroes=tuple(sorted(buckets[key], key=lambda h: h.name.casefold())),
        )
        for key in sorted(buckets)
    )


def flatten(view: Iterable[HeroGroup]) -> list[Hero]:
    """Return every hero in *view* in display order."""
    return [hero for group in view for hero in group.heroes]
