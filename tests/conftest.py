"""
Shared pytest fixtures for the JetHeroes test suite.

Provides:
    - project_root: path to the real project root
    - scenario_heroes: the three-hero table used by the grouping scenarios
    - sample_heroes: a larger table with mixed case, digits and ties
    - heroes_json: a temporary heroes.json written from sample_heroes
"""

import json
import os
import sys
from pathlib import Path

import pytest

# Headless Qt for pytest-qt when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# ---------------------------------------------------------------------------
# Ensure app/ and engine/ are importable regardless of where pytest is invoked
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root():
    """Return the absolute path to the real project root directory."""
    return str(PROJECT_ROOT)


@pytest.fixture
def scenario_heroes():
    """Return the three heroes used by the grouping scenarios."""
    from engine.models.hero import Hero
    return [
        Hero(id="1", name="Gatot Subroto"),
        Hero(id="2", name="Cut Nyak Dien"),
        Hero(id="3", name="Gajah Mada"),
    ]


@pytest.fixture
def sample_heroes():
    """Return raw hero records (as found in heroes.json).

    Includes lower-case initials, a digit initial, and two names that are
    equal ignoring case so tie ordering can be checked.
    """
    return [
        {"id": 10, "name": "soekarno", "photoUrl": "https://example.org/soekarno.jpg"},
        {"id": 11, "name": "Mohammad Hatta", "photoUrl": ""},
        {"id": 12, "name": "Sutan Sjahrir", "photoUrl": ""},
        {"id": 13, "name": "Kartini", "photoUrl": ""},
        {"id": 14, "name": "1945 Generation", "photoUrl": ""},
        {"id": 15, "name": "KARTINI", "photoUrl": ""},
        {"id": 16, "name": "Sam Ratulangi", "photoUrl": ""},
    ]


@pytest.fixture
def heroes_json(tmp_path, sample_heroes):
    """Write *sample_heroes* to a temporary heroes.json and return its path."""
    path = tmp_path / "heroes.json"
    path.write_text(json.dumps(sample_heroes), encoding="utf-8")
    return str(path)
