"""State transition tests for wrap settings, splitter ring, and text buffer."""

from __future__ import annotations

import unittest

from wrapviewer.state import DemoState, SplitterEntry, SplitterRegistry, TextBuffer, WrapConfig
from wrapviewer.wrapping import HyphenSplitter, NoHyphenation


def _registry(*labels: str) -> SplitterRegistry:
    return SplitterRegistry([SplitterEntry(label, NoHyphenation()) for label in labels])


class WrapConfigTests(unittest.TestCase):
    def test_decrease_width_saturates_at_zero(self) -> None:
        config = WrapConfig(width=1)
        config.decrease_width()
        config.decrease_width()
        config.decrease_width()
        self.assertEqual(config.width, 0)

    def test_increase_width_has_no_upper_bound(self) -> None:
        config = WrapConfig(width=10_000)
        config.increase_width()
        self.assertEqual(config.width, 10_001)

    def test_toggle_break_words_twice_restores_value(self) -> None:
        for initial in (False, True):
            config = WrapConfig(break_words=initial)
            config.toggle_break_words()
            self.assertEqual(config.break_words, not initial)
            config.toggle_break_words()
            self.assertEqual(config.break_words, initial)

    def test_negative_initial_width_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            WrapConfig(width=-1)

    def test_defaults_match_demo_startup(self) -> None:
        config = WrapConfig()
        self.assertEqual(config.width, 20)
        self.assertFalse(config.break_words)


class SplitterRegistryTests(unittest.TestCase):
    def test_empty_registry_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SplitterRegistry([])

    def test_first_entry_is_current_at_startup(self) -> None:
        registry = _registry("a", "b", "c")
        self.assertEqual(registry.current().label, "a")
        self.assertEqual(registry.index, 0)

    def test_advance_cycles_back_after_len_calls_in_same_order(self) -> None:
        registry = _registry("a", "b", "c")
        first_cycle = [registry.advance().label for _ in range(len(registry))]
        second_cycle = [registry.advance().label for _ in range(len(registry))]

        self.assertEqual(first_cycle, ["b", "c", "a"])
        self.assertEqual(second_cycle, first_cycle)
        self.assertEqual(registry.current().label, "a")

    def test_single_entry_registry_advances_to_itself(self) -> None:
        registry = _registry("only")
        self.assertEqual(registry.advance().label, "only")
        self.assertEqual(registry.index, 0)

    def test_select_moves_cursor_and_unknown_label_raises(self) -> None:
        registry = _registry("a", "b", "c")
        self.assertEqual(registry.select("c").label, "c")
        self.assertEqual(registry.advance().label, "a")
        with self.assertRaises(KeyError):
            registry.select("missing")
        self.assertEqual(registry.current().label, "a")

    def test_labels_keep_registration_order(self) -> None:
        registry = SplitterRegistry(
            [SplitterEntry("HyphenSplitter", HyphenSplitter()), SplitterEntry("NoHyphenation", NoHyphenation())]
        )
        self.assertEqual(registry.labels, ("HyphenSplitter", "NoHyphenation"))


class TextBufferTests(unittest.TestCase):
    def test_backspace_on_empty_buffer_is_noop(self) -> None:
        buffer = TextBuffer()
        buffer.delete_last()
        self.assertEqual(buffer.text, "")
        self.assertEqual(len(buffer), 0)

    def test_five_appends_then_seven_backspaces_leaves_empty_buffer(self) -> None:
        buffer = TextBuffer()
        for ch in "hello":
            buffer.append(ch)
        for _ in range(7):
            buffer.delete_last()
        self.assertEqual(buffer.text, "")
        self.assertEqual(len(buffer), 0)

    def test_delete_last_removes_whole_character(self) -> None:
        buffer = TextBuffer("naïve 日本")
        buffer.delete_last()
        self.assertEqual(buffer.text, "naïve 日")


class DemoStateTests(unittest.TestCase):
    def test_new_state_is_not_quitting_and_has_empty_buffer(self) -> None:
        state = DemoState(config=WrapConfig(), splitters=_registry("a"))
        self.assertFalse(state.quit_requested)
        self.assertEqual(state.buffer.text, "")


if __name__ == "__main__":
    unittest.main()
