"""Mutable session state owned by the interactive loop.

Holds the wrap settings, the splitter cycle, and the edited text.
Every transition here is total: no key can drive state out of range.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .wrapping.splitters import WordSplitter


@dataclass
class WrapConfig:
    """Wrap width and long-word policy."""

    width: int = 20
    break_words: bool = False

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"wrap width must be >= 0, got {self.width}")

    def decrease_width(self) -> None:
        """Shrink width by one column, saturating at zero."""
        self.width = max(0, self.width - 1)

    def increase_width(self) -> None:
        self.width += 1

    def toggle_break_words(self) -> None:
        self.break_words = not self.break_words


@dataclass(frozen=True)
class SplitterEntry:
    label: str
    splitter: WordSplitter


class SplitterRegistry:
    """Ordered ring of word splitters with an explicit cursor.

    Index 0 is the splitter active at startup; ``advance`` walks the ring and
    wraps around, so the cursor is always in range.
    """

    def __init__(self, entries: Sequence[SplitterEntry]) -> None:
        if not entries:
            raise ValueError("splitter registry needs at least one entry")
        self._entries = tuple(entries)
        self._index = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(entry.label for entry in self._entries)

    def current(self) -> SplitterEntry:
        return self._entries[self._index]

    def advance(self) -> SplitterEntry:
        """Move to the next entry (wrapping around) and return it."""
        self._index = (self._index + 1) % len(self._entries)
        return self._entries[self._index]

    def select(self, label: str) -> SplitterEntry:
        """Point the cursor at the entry named ``label``.

        Raises ``KeyError`` when no entry carries that label.
        """
        for idx, entry in enumerate(self._entries):
            if entry.label == label:
                self._index = idx
                return entry
        raise KeyError(label)


class TextBuffer:
    """Append-only text with single-character backspace."""

    def __init__(self, text: str = "") -> None:
        self._chars: list[str] = list(text)

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def append(self, chars: str) -> None:
        self._chars.extend(chars)

    def delete_last(self) -> None:
        """Drop the final character; no-op on an empty buffer."""
        if self._chars:
            self._chars.pop()


@dataclass
class DemoState:
    """Everything the update loop mutates between frames."""

    config: WrapConfig
    splitters: SplitterRegistry
    buffer: TextBuffer = field(default_factory=TextBuffer)
    quit_requested: bool = False
