"""Key bindings for the wrapping demo.

Maps key tokens from ``read_key`` onto ``DemoState`` transitions.
"""

from __future__ import annotations

import logging

from ..state import DemoState
from .key_registry import KeyComboBinding, KeyComboRegistry

logger = logging.getLogger(__name__)

QUIT_KEYS = ("ESC", "CTRL_C")
NARROW_KEYS = ("LEFT",)
WIDEN_KEYS = ("RIGHT",)
TOGGLE_BREAK_WORDS_KEYS = ("CTRL_B",)
CYCLE_SPLITTER_KEYS = ("CTRL_S",)
BACKSPACE_KEYS = ("BACKSPACE",)
NEWLINE_KEYS = ("ENTER_CR", "ENTER_LF")


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single typed character."""
    return len(key) == 1 and key.isprintable()


def build_key_registry(state: DemoState) -> KeyComboRegistry:
    """Create the dispatch table bound to ``state``.

    Build it once per session; the handlers close over ``state``.
    """

    def request_quit() -> None:
        state.quit_requested = True
        logger.debug("quit requested")

    def narrow() -> None:
        state.config.decrease_width()
        logger.debug("width -> %d", state.config.width)

    def widen() -> None:
        state.config.increase_width()
        logger.debug("width -> %d", state.config.width)

    def toggle_break_words() -> None:
        state.config.toggle_break_words()
        logger.debug("break_words -> %s", state.config.break_words)

    def cycle_splitter() -> None:
        entry = state.splitters.advance()
        logger.debug("splitter -> %s", entry.label)

    def delete_last() -> None:
        state.buffer.delete_last()
        logger.debug("deleted last character, %d left", len(state.buffer))

    def append_newline() -> None:
        state.buffer.append("\n")
        logger.debug("appended newline, %d characters", len(state.buffer))

    def append_printable(key: str) -> bool:
        if not is_printable_key(key):
            return False
        state.buffer.append(key)
        logger.debug("appended %r, %d characters", key, len(state.buffer))
        return True

    registry = KeyComboRegistry(fallback=append_printable)
    return registry.register_bindings(
        KeyComboBinding(QUIT_KEYS, request_quit),
        KeyComboBinding(NARROW_KEYS, narrow),
        KeyComboBinding(WIDEN_KEYS, widen),
        KeyComboBinding(TOGGLE_BREAK_WORDS_KEYS, toggle_break_words),
        KeyComboBinding(CYCLE_SPLITTER_KEYS, cycle_splitter),
        KeyComboBinding(BACKSPACE_KEYS, delete_last),
        KeyComboBinding(NEWLINE_KEYS, append_newline),
    )
