"""Frame renderer for the wrapping demo.

Builds the full list of draw instructions for one redraw (settings banner,
margin frame, wrapped text, cursor) and commits them to a terminal surface.
Layout is computed without touching the terminal; only ``commit_frame``
performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..ansi import display_width
from ..state import WrapConfig
from ..ui_theme import DEFAULT_THEME, UITheme
from ..wrapping import WordSplitter, WrapFunction, WrappedFrame, wrap, wrap_for_display

TEXT_COL = 3
HEADER_ROW = 1

UPPER_MARGIN = ("┌", "┐")
SIDE_MARGIN = ("│", "│")
LOWER_MARGIN = ("└", "┘")


class Surface(Protocol):
    def clear_all(self) -> None:
        ...

    def write_styled(self, row: int, col: int, text: str, style: str = "") -> None:
        ...

    def move_cursor(self, row: int, col: int) -> None:
        ...

    def flush(self) -> None:
        ...


@dataclass(frozen=True)
class DrawInstruction:
    """Place ``text`` with ``style`` at 1-based ``(row, col)``."""

    row: int
    col: int
    text: str
    style: str = ""


@dataclass(frozen=True)
class Frame:
    instructions: tuple[DrawInstruction, ...]
    cursor_row: int
    cursor_col: int
    wrapped: WrappedFrame


def _settings_line(
    row: int,
    parts: list[tuple[str, str]],
) -> list[DrawInstruction]:
    """Lay out consecutive styled segments on one row starting at the text column."""
    out: list[DrawInstruction] = []
    col = TEXT_COL
    for text, style in parts:
        out.append(DrawInstruction(row, col, text, style))
        col += display_width(text)
    return out


def _margins(row: int, width: int, glyphs: tuple[str, str], theme: UITheme) -> list[DrawInstruction]:
    left, right = glyphs
    return [
        DrawInstruction(row, TEXT_COL - 1, left, theme.margin),
        DrawInstruction(row, TEXT_COL + width, right, theme.margin),
    ]


def build_frame(
    text: str,
    config: WrapConfig,
    splitter_label: str,
    splitter: WordSplitter,
    theme: UITheme = DEFAULT_THEME,
    wrap_fn: WrapFunction = wrap,
) -> Frame:
    """Compute every draw instruction for the current state.

    Margin columns always mark the configured width, not the width of the
    rendered lines, so overflowing words stay visibly outside the frame.
    """
    row = HEADER_ROW
    instructions: list[DrawInstruction] = [DrawInstruction(row, TEXT_COL, "Settings:", theme.heading)]
    row += 1

    instructions += _settings_line(
        row,
        [("- width: ", ""), (str(config.width), theme.value), (" (use ← and → to change)", theme.hint)],
    )
    row += 1
    instructions += _settings_line(
        row,
        [("- break_words: ", ""), (str(config.break_words), theme.value), (" (toggle with Ctrl-b)", theme.hint)],
    )
    row += 1
    instructions += _settings_line(
        row,
        [("- splitter: ", ""), (splitter_label, theme.value), (" (cycle with Ctrl-s)", theme.hint)],
    )
    row += 2

    wrapped = wrap_for_display(text, config, splitter, wrap_fn)

    # The frame extends one row above and below the text so the margins
    # stay visible even when every line is narrower than the width.
    instructions += _margins(row, config.width, UPPER_MARGIN, theme)
    row += 1

    content = ""
    for line in wrapped.lines:
        content = line.removesuffix("\n")
        instructions += _margins(row, config.width, SIDE_MARGIN, theme)
        instructions.append(DrawInstruction(row, TEXT_COL, content))
        row += 1

    instructions += _margins(row, config.width, LOWER_MARGIN, theme)

    return Frame(
        instructions=tuple(instructions),
        cursor_row=row - 1,
        cursor_col=TEXT_COL + display_width(content),
        wrapped=wrapped,
    )


def commit_frame(surface: Surface, frame: Frame) -> None:
    """Issue ``frame`` against ``surface`` as one redraw."""
    surface.clear_all()
    for instruction in frame.instructions:
        surface.write_styled(instruction.row, instruction.col, instruction.text, instruction.style)
    surface.move_cursor(frame.cursor_row, frame.cursor_col)
    surface.flush()


def rasterize_frame(frame: Frame) -> str:
    """Render ``frame`` into plain text rows, dropping styles.

    Used for non-interactive output. Later instructions overwrite earlier
    ones cell by cell, the same way a terminal would.
    """
    grid: dict[int, dict[int, str]] = {}
    for instruction in frame.instructions:
        cells = grid.setdefault(instruction.row, {})
        col = instruction.col
        for ch in instruction.text:
            cells[col] = ch
            col += max(1, display_width(ch))

    if not grid:
        return ""
    out: list[str] = []
    for row in range(1, max(grid) + 1):
        cells = grid.get(row, {})
        if not cells:
            out.append("")
            continue
        line: list[str] = []
        col = 1
        while col <= max(cells):
            ch = cells.get(col, " ")
            line.append(ch)
            col += max(1, display_width(ch))
        out.append("".join(line).rstrip())
    return "\n".join(out) + "\n"


__all__ = [
    "DrawInstruction",
    "Frame",
    "HEADER_ROW",
    "Surface",
    "TEXT_COL",
    "build_frame",
    "commit_frame",
    "rasterize_frame",
]
