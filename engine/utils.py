"""
Shared utility functions for the JetHeroes engine.

JSON reads never raise on a missing or corrupt file; callers decide what
a missing table means for them.
"""

import json
import logging

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------

def safe_read_json(path, default=None):
    """Read a JSON file, returning *default* if the file is missing or corrupt.

    Parameters
    ----------
    path : str or pathlib.Path
        Absolute path to the JSON file.
    default
        Value returned when the file cannot be read (default ``None``).

    Returns
    -------
    object
        Parsed JSON content, or *default* on failure.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError:
        return default
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        logger.warning("Could not parse JSON file %s", path, exc_info=True)
        return default
