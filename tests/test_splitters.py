"""Dictionary loading and splitter registry construction tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from wrapviewer.ansi import display_width
from wrapviewer.runtime.bootstrap import DEMO_TEXT, DemoSettings, build_initial_state, build_splitter_registry
from wrapviewer.wrapping import DictionaryHyphenator, default_splitter_entries, load_dictionary, wrap


class LoadDictionaryTests(unittest.TestCase):
    def test_bundled_language_loads(self) -> None:
        dictionary = load_dictionary("en_US")
        self.assertIsNotNone(dictionary)

    def test_unknown_language_without_directory_is_unavailable(self) -> None:
        self.assertIsNone(load_dictionary("zz_ZZ"))

    def test_unknown_language_falls_back_to_dictionary_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            dict_dir = Path(tmp)
            (dict_dir / "hyph_zz_ZZ.dic").write_text("UTF-8\n", encoding="utf-8")
            with mock.patch("wrapviewer.wrapping.splitters.pyphen.Pyphen") as pyphen_mock:
                dictionary = load_dictionary("zz_ZZ", dict_dir)

        self.assertIs(dictionary, pyphen_mock.return_value)
        pyphen_mock.assert_called_once_with(filename=str(dict_dir / "hyph_zz_ZZ.dic"))

    def test_missing_file_in_dictionary_directory_is_unavailable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(load_dictionary("zz_ZZ", Path(tmp)))


class DefaultSplitterEntriesTests(unittest.TestCase):
    def test_order_is_hyphen_then_none_then_dictionaries(self) -> None:
        entries = default_splitter_entries(("en_US",))
        labels = [label for label, _ in entries]
        self.assertEqual(labels, ["HyphenSplitter", "NoHyphenation", "en_US hyphenation"])
        self.assertIsInstance(entries[2][1], DictionaryHyphenator)

    def test_unavailable_dictionaries_are_omitted(self) -> None:
        labels = [label for label, _ in default_splitter_entries(("zz_ZZ",))]
        self.assertEqual(labels, ["HyphenSplitter", "NoHyphenation"])

    def test_no_languages_registers_builtin_splitters_only(self) -> None:
        self.assertEqual(len(default_splitter_entries(())), 2)

    def test_english_hyphenation_fits_narrow_widths_with_break_words(self) -> None:
        splitter = DictionaryHyphenator(load_dictionary("en_US"), "en_US")
        for width in range(1, 4):
            for line in wrap(DEMO_TEXT, width, True, splitter):
                self.assertLessEqual(display_width(line), width, msg=f"width={width} line={line!r}")


class BootstrapTests(unittest.TestCase):
    def test_initial_state_uses_demo_defaults(self) -> None:
        state = build_initial_state(DemoSettings(languages=()))
        self.assertEqual(state.config.width, 20)
        self.assertFalse(state.config.break_words)
        self.assertEqual(state.splitters.current().label, "HyphenSplitter")
        self.assertTrue(state.buffer.text.startswith("Welcome to the interactive word-wrapping demo!"))

    def test_requested_splitter_label_is_selected(self) -> None:
        registry = build_splitter_registry(DemoSettings(splitter_label="NoHyphenation", languages=()))
        self.assertEqual(registry.current().label, "NoHyphenation")

    def test_unknown_splitter_label_raises(self) -> None:
        with self.assertRaises(KeyError):
            build_splitter_registry(DemoSettings(splitter_label="Nope", languages=()))


if __name__ == "__main__":
    unittest.main()
