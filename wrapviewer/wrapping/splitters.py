"""Word splitters that suggest where a word may break across lines.

A splitter returns ``(index, needs_hyphen)`` pairs: ``word[:index]`` may end a
line, and ``needs_hyphen`` says whether a ``-`` must be shown when it does.
Dictionary hyphenation is backed by pyphen's bundled Hunspell patterns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

import pyphen

logger = logging.getLogger(__name__)

HYPHEN = "-"


class WordSplitter(Protocol):
    def split_points(self, word: str) -> list[tuple[int, bool]]:
        ...


def _hyphen_points(word: str) -> list[tuple[int, bool]]:
    """Return split points right after hyphens joining two alphanumerics."""
    points: list[tuple[int, bool]] = []
    for idx in range(1, len(word) - 1):
        if word[idx] != HYPHEN:
            continue
        if word[idx - 1].isalnum() and word[idx + 1].isalnum():
            points.append((idx + 1, False))
    return points


class HyphenSplitter:
    """Break only after hyphens already present in the word."""

    def split_points(self, word: str) -> list[tuple[int, bool]]:
        return _hyphen_points(word)


class NoHyphenation:
    """Never break inside a word."""

    def split_points(self, word: str) -> list[tuple[int, bool]]:
        return []


class DictionaryHyphenator:
    """Break at existing hyphens and at dictionary syllable boundaries.

    Each alphabetic run of the word is hyphenated on its own, so trailing
    punctuation and existing hyphens do not confuse the pattern lookup.
    """

    def __init__(self, dictionary: pyphen.Pyphen, language: str) -> None:
        self.dictionary = dictionary
        self.language = language

    def split_points(self, word: str) -> list[tuple[int, bool]]:
        points = dict(_hyphen_points(word))
        for start, run in _alpha_runs(word):
            for pos in self.dictionary.positions(run):
                points.setdefault(start + int(pos), True)
        return sorted(points.items())


def _alpha_runs(word: str) -> Iterable[tuple[int, str]]:
    start = None
    for idx, ch in enumerate(word):
        if ch.isalpha():
            if start is None:
                start = idx
            continue
        if start is not None:
            yield start, word[start:idx]
            start = None
    if start is not None:
        yield start, word[start:]


def load_dictionary(language: str, dictionary_dir: Path | None = None) -> pyphen.Pyphen | None:
    """Load hyphenation patterns for ``language``.

    pyphen's bundled dictionaries are tried first, then
    ``<dictionary_dir>/hyph_<language>.dic``. Returns ``None`` when neither
    source provides usable patterns.
    """
    resolved = pyphen.language_fallback(language)
    if resolved is not None:
        return pyphen.Pyphen(lang=resolved)

    if dictionary_dir is None:
        return None
    path = dictionary_dir / f"hyph_{language}.dic"
    if not path.is_file():
        return None
    try:
        return pyphen.Pyphen(filename=str(path))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read hyphenation dictionary %s: %s", path, exc)
        return None


def default_splitter_entries(
    languages: Iterable[str] = ("en_US",),
    dictionary_dir: Path | None = None,
) -> list[tuple[str, WordSplitter]]:
    """Build ``(label, splitter)`` pairs in cycling order.

    Languages whose dictionary cannot be loaded are left out entirely.
    """
    entries: list[tuple[str, WordSplitter]] = [
        ("HyphenSplitter", HyphenSplitter()),
        ("NoHyphenation", NoHyphenation()),
    ]
    for language in languages:
        dictionary = load_dictionary(language, dictionary_dir)
        if dictionary is None:
            logger.info("no hyphenation dictionary for %s; skipping", language)
            continue
        logger.debug("loaded hyphenation dictionary for %s", language)
        entries.append((f"{language} hyphenation", DictionaryHyphenator(dictionary, language)))
    return entries
