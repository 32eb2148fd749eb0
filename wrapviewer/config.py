"""Persistent JSON config helpers.

Stores optional startup overrides: wrap width, break-words flag, initial
splitter, hyphenation languages, extra dictionary directory, and UI theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "wrapviewer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_width() -> int | None:
    """Return a non-negative integer width, or ``None`` when unset/invalid."""
    value = load_config().get("width")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def load_break_words() -> bool | None:
    value = load_config().get("break_words")
    return value if isinstance(value, bool) else None


def load_splitter_label() -> str | None:
    """Load the label of the splitter to activate at startup."""
    value = load_config().get("splitter")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_languages() -> tuple[str, ...] | None:
    """Load hyphenation language codes.

    Non-string and blank entries are dropped; a list with no valid entries
    is returned as an empty tuple so it can disable dictionary hyphenation.
    """
    value = load_config().get("languages")
    if not isinstance(value, list):
        return None
    return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())


def load_dictionary_dir() -> Path | None:
    value = load_config().get("dictionary_dir")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value).expanduser()


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
