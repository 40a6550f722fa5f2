"""
app/paths.py -- Path resolution for frozen and development modes.

Detects PyInstaller bundles and uses platformdirs for user data
directories.  Bundled data lives inside the ``app`` package so it ships
with both wheels and frozen builds.  The hero table is looked up in
this order:

    1. ``$JETHEROES_DATA`` if set
    2. ``heroes.json`` in the user data directory
    3. the bundled ``app/data/heroes.json`` shipped inside the package
"""

from __future__ import annotations

import os
import sys

from platformdirs import user_data_dir

_APP_NAME = "JetHeroes"
_APP_AUTHOR = "JetHeroes"

DATA_ENV_VAR = "JETHEROES_DATA"
HEROES_FILENAME = "heroes.json"


def is_frozen() -> bool:
    """Return True if running from a PyInstaller bundle."""
    return getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS")


def get_user_data_dir() -> str:
    """Return the platform-appropriate user data directory."""
    path = user_data_dir(_APP_NAME, _APP_AUTHOR)
    os.makedirs(path, exist_ok=True)
    return path


def get_package_data_dir() -> str:
    """Return the data directory shipped inside the ``app`` package."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


def get_bundled_heroes_path() -> str:
    return os.path.join(get_package_data_dir(), HEROES_FILENAME)


def get_heroes_data_path() -> str:
    """Return the hero table to load at startup."""
    override = os.environ.get(DATA_ENV_VAR, "")
    if override:
        return os.path.abspath(os.path.expanduser(override))

    user_copy = os.path.join(get_user_data_dir(), HEROES_FILENAME)
    if os.path.isfile(user_copy):
        return user_copy

    return get_bundled_heroes_path()
