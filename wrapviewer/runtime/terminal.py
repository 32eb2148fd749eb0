"""Terminal control helpers for the demo session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor shape.
Also provides the buffered drawing surface the frame renderer writes to.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

logger = logging.getLogger(__name__)

ENTER_SEQUENCE = b"\x1b[?1049h\x1b[3 q"
EXIT_SEQUENCE = b"\x1b[0 q\x1b[?1049l"


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


class TerminalController:
    """Manage terminal mode transitions around the interactive loop."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with a blinking underline cursor."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        _write_all(self.stdout_fd, ENTER_SEQUENCE)
        logger.debug("entered raw alternate-screen mode")

    def disable_tui_mode(self) -> None:
        """Restore cursor shape, main screen, and saved tty attributes."""
        try:
            _write_all(self.stdout_fd, EXIT_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            logger.debug("restored terminal mode")

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


class TerminalSurface:
    """Collect positioned, styled writes and emit them in one flush."""

    def __init__(self, stdout_fd: int, reset: str = "\033[0m") -> None:
        self.stdout_fd = stdout_fd
        self.reset = reset
        self._out: list[str] = []

    def clear_all(self) -> None:
        self._out.append("\033[2J")

    def write_styled(self, row: int, col: int, text: str, style: str = "") -> None:
        self._out.append(f"\033[{max(1, row)};{max(1, col)}H")
        if style:
            self._out.append(f"{style}{text}{self.reset}")
        else:
            self._out.append(text)

    def move_cursor(self, row: int, col: int) -> None:
        self._out.append(f"\033[{max(1, row)};{max(1, col)}H")

    def flush(self) -> None:
        data = "".join(self._out)
        self._out.clear()
        _write_all(self.stdout_fd, data.encode("utf-8", errors="replace"))
