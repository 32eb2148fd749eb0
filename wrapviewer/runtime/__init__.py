"""Public runtime orchestration entry points.

This package groups the interactive demo bootstrap (`run_demo`) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations


def run_demo(*args, **kwargs):
    """Lazily import demo entrypoint so ``termios`` loads only when needed."""
    from .app import run_demo as _run_demo

    return _run_demo(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_demo",
    "run_main_loop",
]
