"""Startup defaults and initial state construction.

Kept free of terminal imports so non-interactive rendering can build the
same state without touching ``termios``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..state import DemoState, SplitterEntry, SplitterRegistry, TextBuffer, WrapConfig
from ..wrapping import default_splitter_entries

logger = logging.getLogger(__name__)

INITIAL_WIDTH = 20
INITIAL_BREAK_WORDS = False
DEFAULT_LANGUAGES = ("en_US",)
DEMO_TEXT = (
    "Welcome to the interactive word-wrapping demo! Use the arrow "
    "keys to change the line length and try typing your own text!"
)


@dataclass(frozen=True)
class DemoSettings:
    """Startup values for one demo session."""

    width: int = INITIAL_WIDTH
    break_words: bool = INITIAL_BREAK_WORDS
    splitter_label: str | None = None
    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    dictionary_dir: Path | None = None
    text: str = DEMO_TEXT
    theme: str | None = None
    no_color: bool = False


def build_splitter_registry(settings: DemoSettings) -> SplitterRegistry:
    """Build the splitter ring, activating ``settings.splitter_label`` if given.

    Raises ``KeyError`` when the requested label is not registered.
    """
    entries = [
        SplitterEntry(label, splitter)
        for label, splitter in default_splitter_entries(settings.languages, settings.dictionary_dir)
    ]
    registry = SplitterRegistry(entries)
    if settings.splitter_label is not None:
        registry.select(settings.splitter_label)
    return registry


def build_initial_state(settings: DemoSettings) -> DemoState:
    state = DemoState(
        config=WrapConfig(width=settings.width, break_words=settings.break_words),
        splitters=build_splitter_registry(settings),
        buffer=TextBuffer(settings.text),
    )
    logger.debug(
        "initial state: width=%d break_words=%s splitter=%s",
        state.config.width,
        state.config.break_words,
        state.splitters.current().label,
    )
    return state
