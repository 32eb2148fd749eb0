"""Command-line front door for wrapviewer.

Merges persisted config with CLI options into startup settings, then either
prints one rendered frame (``--render``) or launches the interactive demo.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .render import build_frame, rasterize_frame
from .runtime import run_demo
from .runtime.bootstrap import (
    DEFAULT_LANGUAGES,
    DEMO_TEXT,
    INITIAL_BREAK_WORDS,
    INITIAL_WIDTH,
    DemoSettings,
    build_initial_state,
)
from .state import DemoState
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactively wrap text in the terminal and watch the margins move."
    )
    parser.add_argument("--width", type=_nonnegative_int, default=None, help="Initial wrap width (default: 20).")
    parser.add_argument(
        "--break-words",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Split words longer than the width.",
    )
    parser.add_argument("--splitter", default=None, help="Label of the splitter active at startup.")
    parser.add_argument(
        "--lang",
        dest="languages",
        action="append",
        default=None,
        help="Hyphenation dictionary language (repeatable, default: en_US).",
    )
    parser.add_argument("--dict-dir", type=Path, default=None, help="Directory holding extra hyph_<lang>.dic files.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--text", default=None, help="Initial text instead of the demo sentence.")
    parser.add_argument("--render", action="store_true", help="Print one frame for the initial state and exit.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    return parser


def _first_set(*values):
    for value in values:
        if value is not None:
            return value
    return None


def resolve_settings(args: argparse.Namespace) -> DemoSettings:
    """Combine CLI arguments, persisted config, and built-in defaults."""
    languages = tuple(args.languages) if args.languages is not None else config.load_languages()
    return DemoSettings(
        width=_first_set(args.width, config.load_width(), INITIAL_WIDTH),
        break_words=_first_set(args.break_words, config.load_break_words(), INITIAL_BREAK_WORDS),
        splitter_label=_first_set(args.splitter, config.load_splitter_label()),
        languages=languages if languages is not None else DEFAULT_LANGUAGES,
        dictionary_dir=_first_set(args.dict_dir, config.load_dictionary_dir()),
        text=_first_set(args.text, DEMO_TEXT),
        theme=_first_set(args.theme, config.load_theme_name()),
        no_color=args.no_color,
    )


def _configure_logging(log_file: Path | None) -> None:
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger("wrapviewer")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def render_initial_frame(state: DemoState) -> str:
    """Render the first frame of ``state`` as plain text."""
    entry = state.splitters.current()
    frame = build_frame(state.buffer.text, state.config, entry.label, entry.splitter)
    return rasterize_frame(frame)


def main() -> None:
    """Parse CLI arguments and run the demo or print a single frame."""
    args = _build_parser().parse_args()
    _configure_logging(args.log_file)
    settings = resolve_settings(args)

    try:
        state = build_initial_state(settings)
    except KeyError:
        raise SystemExit(f"Unknown splitter: {settings.splitter_label}") from None

    if args.render:
        sys.stdout.write(render_initial_frame(state))
        return

    if os.name != "posix":
        raise SystemExit("Sorry, the interactive demo only works on Unix terminals.")
    if not sys.stdin.isatty():
        raise SystemExit("The interactive demo needs a terminal on stdin; try --render.")

    run_demo(settings, state)
