"""Line wrapping: the first-fit wrapper, word splitters, and display adapter."""

from __future__ import annotations

from .adapter import WrapFunction, WrappedFrame, wrap_for_display
from .core import Fragment, wrap
from .splitters import (
    DictionaryHyphenator,
    HyphenSplitter,
    NoHyphenation,
    WordSplitter,
    default_splitter_entries,
    load_dictionary,
)

__all__ = [
    "DictionaryHyphenator",
    "Fragment",
    "HyphenSplitter",
    "NoHyphenation",
    "WordSplitter",
    "WrapFunction",
    "WrappedFrame",
    "default_splitter_entries",
    "load_dictionary",
    "wrap",
    "wrap_for_display",
]
