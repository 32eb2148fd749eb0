"""Greedy first-fit line wrapping with pluggable word splitting.

Paragraphs (``\\n``-separated) wrap independently. Words are split into
fragments at the points a ``WordSplitter`` suggests, then packed onto lines
left to right. With ``break_words`` enabled, fragments that cannot fit on an
empty line are cut at the width boundary.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..ansi import display_width, split_at_width
from .splitters import HYPHEN, HyphenSplitter, WordSplitter

_WORD_RE = re.compile(r"([^ ]*)( *)")
_DEFAULT_SPLITTER = HyphenSplitter()


@dataclass(frozen=True)
class Fragment:
    """Unbreakable piece of a word plus what follows it on the line."""

    word: str
    whitespace: str = ""
    penalty: str = ""

    @property
    def width(self) -> int:
        return display_width(self.word)

    @property
    def whitespace_width(self) -> int:
        return display_width(self.whitespace)

    @property
    def penalty_width(self) -> int:
        return display_width(self.penalty)


def find_words(line: str) -> list[Fragment]:
    """Split one paragraph into words carrying their trailing spaces."""
    words: list[Fragment] = []
    for match in _WORD_RE.finditer(line):
        if not match.group(0):
            continue
        words.append(Fragment(match.group(1), match.group(2)))
    return words


def split_words(words: list[Fragment], splitter: WordSplitter) -> list[Fragment]:
    """Cut each word at the splitter's suggested points."""
    fragments: list[Fragment] = []
    for word in words:
        prev = 0
        for idx, needs_hyphen in splitter.split_points(word.word):
            if idx <= prev or idx >= len(word.word):
                continue
            fragments.append(Fragment(word.word[prev:idx], "", HYPHEN if needs_hyphen else ""))
            prev = idx
        fragments.append(Fragment(word.word[prev:], word.whitespace, word.penalty))
    return fragments


def break_long_fragments(fragments: list[Fragment], width: int) -> list[Fragment]:
    """Cut fragments wider than ``width`` into chunks that fit.

    Chunks hold at least one character, so a zero width still terminates.
    """
    budget = max(width, 1)
    out: list[Fragment] = []
    for fragment in fragments:
        if fragment.width + fragment.penalty_width <= budget:
            out.append(fragment)
            continue
        chunks: list[str] = []
        rest = fragment.word
        while rest:
            head, rest = split_at_width(rest, budget)
            chunks.append(head)
        penalty = fragment.penalty
        if penalty and chunks and display_width(chunks[-1]) + fragment.penalty_width > budget:
            if len(chunks[-1]) > 1:
                last = chunks.pop()
                chunks.extend([last[:-1], last[-1:]])
            # No room for the hyphen next to even a single character.
            if display_width(chunks[-1]) + fragment.penalty_width > budget:
                penalty = ""
        for chunk in chunks[:-1]:
            out.append(Fragment(chunk))
        out.append(Fragment(chunks[-1] if chunks else "", fragment.whitespace, penalty))
    return out


def _join(line: list[Fragment]) -> str:
    if not line:
        return ""
    body = "".join(fragment.word + fragment.whitespace for fragment in line[:-1])
    return (body + line[-1].word + line[-1].penalty).rstrip(" ")


def wrap_first_fit(fragments: list[Fragment], width: int) -> list[str]:
    """Pack fragments onto lines, starting a new line only when needed."""
    lines: list[str] = []
    current: list[Fragment] = []
    current_width = 0
    for fragment in fragments:
        if current and current_width + fragment.width + fragment.penalty_width > width:
            lines.append(_join(current))
            current = []
            current_width = 0
        current.append(fragment)
        current_width += fragment.width + fragment.whitespace_width
    lines.append(_join(current))
    return lines


def wrap(
    text: str,
    width: int,
    break_words: bool = True,
    splitter: WordSplitter | None = None,
) -> list[str]:
    """Wrap ``text`` into lines of at most ``width`` display columns.

    Lines can exceed ``width`` only when ``break_words`` is false and a single
    fragment is wider than the line. Every paragraph yields at least one line,
    so empty input produces ``[""]``.
    """
    if splitter is None:
        splitter = _DEFAULT_SPLITTER
    lines: list[str] = []
    for paragraph in text.split("\n"):
        fragments = split_words(find_words(paragraph), splitter)
        if break_words:
            fragments = break_long_fragments(fragments, width)
        lines.extend(wrap_first_fit(fragments, width))
    return lines
