"""
engine/models/hero.py -- Hero record and grouped-view entries.

Heroes are created once when the data table is loaded and never change
afterwards, so both models are frozen.  ``id`` is the only stable key;
rendering code must never derive identity from ``name``.

Usage::

    from engine.models.hero import Hero

    hero = Hero.model_validate({"id": 1, "name": "Gajah Mada", "photoUrl": ""})
    hero.id          # "1"
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Hero(BaseModel):
    """One displayable hero.

    The data table uses ``photoUrl``; both spellings are accepted.
    Integer ids are coerced to strings.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str = Field(min_length=1)
    photo_url: str = Field(default="", alias="photoUrl")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class HeroGroup(BaseModel):
    """A group header key and the heroes listed under it."""

    model_config = ConfigDict(frozen=True)

    key: str
    heroes: tuple[Hero, ...] = ()

    def __len__(self) -> int:
        return len(self.heroes)
