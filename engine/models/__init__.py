"""
engine/models/ -- Pydantic v2 models for JetHeroes.

Submodules:
    hero    Hero record and the HeroGroup view-model entry.
"""

from engine.models.hero import Hero, HeroGroup

__all__ = ["Hero", "HeroGroup"]
