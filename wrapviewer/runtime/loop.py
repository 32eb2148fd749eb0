"""Main interactive event loop for the wrapping demo.

Blocks on one key, applies one state transition, redraws the whole frame,
and repeats until a quit key or end of input. The terminal is restored on
every exit path, including I/O errors, which propagate to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import AbstractContextManager
from typing import Protocol

from ..input import build_key_registry
from ..render import Surface, build_frame, commit_frame
from ..state import DemoState
from ..ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


class RawModeTerminal(Protocol):
    def raw_mode(self) -> AbstractContextManager[None]:
        ...


def render_state(state: DemoState, surface: Surface, theme: UITheme = DEFAULT_THEME) -> None:
    """Draw one full frame for ``state``."""
    entry = state.splitters.current()
    frame = build_frame(state.buffer.text, state.config, entry.label, entry.splitter, theme)
    commit_frame(surface, frame)


def run_main_loop(
    state: DemoState,
    terminal: RawModeTerminal,
    surface: Surface,
    keys: Iterable[str],
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Run the demo until a quit key arrives or ``keys`` is exhausted.

    Every consumed key triggers a redraw, recognized or not.
    """
    registry = build_key_registry(state)
    with terminal.raw_mode():
        render_state(state, surface, theme)
        for key in keys:
            registry.dispatch(key)
            if state.quit_requested:
                logger.debug("quit requested via %s", key)
                break
            render_state(state, surface, theme)
