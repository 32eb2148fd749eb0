"""Display-width measurement for wrapped text.

Wrapping and margin placement both work in terminal cells, not characters.
These helpers keep the two in agreement when wide chars are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two, everything else consumes one.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return display width of ``text``, ignoring ANSI escape sequences."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def split_at_width(text: str, max_cols: int) -> tuple[str, str]:
    """Split ``text`` so the head fits in ``max_cols`` display columns.

    The head always holds at least one character when ``text`` is non-empty,
    so repeated splitting makes progress even for zero or tiny budgets.
    """
    col = 0
    for idx, ch in enumerate(text):
        w = char_display_width(ch)
        if idx > 0 and col + w > max_cols:
            return text[:idx], text[idx:]
        col += w
    return text, ""
