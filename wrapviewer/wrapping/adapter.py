"""Turn the current text and settings into lines ready for display.

The wrap result is padded so the cursor always has a line to sit on: empty
results gain one empty line, and a result whose last line still ends in a
newline gains a fresh empty line after it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .core import wrap
from .splitters import WordSplitter

if TYPE_CHECKING:
    from ..state import WrapConfig

WrapFunction = Callable[[str, int, bool, WordSplitter], Sequence[str]]


@dataclass(frozen=True)
class WrappedFrame:
    """Display lines for one redraw."""

    lines: tuple[str, ...]
    padded: bool = False


def wrap_for_display(
    text: str,
    config: WrapConfig,
    splitter: WordSplitter,
    wrap_fn: WrapFunction = wrap,
) -> WrappedFrame:
    lines = list(wrap_fn(text, config.width, config.break_words, splitter))
    padded = False
    if not lines or lines[-1].endswith("\n"):
        lines.append("")
        padded = True
    return WrappedFrame(tuple(lines), padded)
