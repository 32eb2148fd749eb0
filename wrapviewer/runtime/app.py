"""Runtime composition layer for the wrapping demo.

Opens the process terminal, wires the key source and drawing surface, and
hands control to the event loop.
"""

from __future__ import annotations

import sys

from ..input import iter_keys
from ..state import DemoState
from ..ui_theme import resolve_theme
from .bootstrap import DemoSettings, build_initial_state
from .loop import run_main_loop
from .terminal import TerminalController, TerminalSurface


def run_demo(settings: DemoSettings, state: DemoState | None = None) -> None:
    """Run the interactive demo on the process's terminal."""
    if state is None:
        state = build_initial_state(settings)
    theme = resolve_theme(settings.theme, no_color=settings.no_color)
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    surface = TerminalSurface(stdout_fd, reset=theme.reset)
    run_main_loop(state, terminal, surface, iter_keys(stdin_fd), theme)
