"""Regression tests for raw-key decoding.

Covers ESC timing, CSI sequences, control-key tokens and UTF-8 input.
"""

import os
import time
import unittest

from wrapviewer.input import build_key_registry
from wrapviewer.input import reader as reader_mod
from wrapviewer.state import DemoState, SplitterEntry, SplitterRegistry, TextBuffer, WrapConfig
from wrapviewer.wrapping import HyphenSplitter


def _read_keys(payload: bytes, count: int) -> list[str]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        return [reader_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
    finally:
        os.close(read_fd)
        os.close(write_fd)


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        reader_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        reader_mod._PENDING_BYTES.clear()

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = _read_keys(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(_read_keys(b"\x1b[D\x1b[C", 2), ["LEFT", "RIGHT"])
        self.assertEqual(_read_keys(b"\x1bOD", 1), ["LEFT"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(_read_keys(b"\x1ba", 2), ["ESC", "a"])

    def test_control_combos_map_to_ctrl_tokens(self) -> None:
        self.assertEqual(_read_keys(b"\x02\x13\x03", 3), ["CTRL_B", "CTRL_S", "CTRL_C"])

    def test_backspace_and_enter_tokens(self) -> None:
        self.assertEqual(
            _read_keys(b"\x7f\x08\r\n\t", 5),
            ["BACKSPACE", "BACKSPACE", "ENTER_CR", "ENTER_LF", "TAB"],
        )

    def test_multibyte_utf8_is_decoded_as_one_key(self) -> None:
        self.assertEqual(_read_keys("é日".encode("utf-8"), 2), ["é", "日"])

    def test_delete_sequence(self) -> None:
        self.assertEqual(_read_keys(b"\x1b[3~", 1), ["DELETE"])

    def test_parameterized_sequences_are_one_token_each(self) -> None:
        self.assertEqual(_read_keys(b"\x1b[5~", 1), ["PAGE_UP"])
        self.assertEqual(_read_keys(b"\x1b[1;5C", 1), ["CTRL_RIGHT"])
        self.assertEqual(_read_keys(b"\x1b[15~x", 2), ["UNKNOWN", "x"])

    def test_unrecognized_sequence_is_consumed_through_final_byte(self) -> None:
        self.assertEqual(_read_keys(b"\x1b[?25hz", 2), ["UNKNOWN", "z"])
        self.assertEqual(_read_keys(b"\x1bOPq", 2), ["UNKNOWN", "q"])

    def test_timeout_without_input_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertEqual(reader_mod.read_key(read_fd, timeout_ms=10), "")
        finally:
            os.close(read_fd)
            os.close(write_fd)


class IterKeysTests(unittest.TestCase):
    def setUp(self) -> None:
        reader_mod._PENDING_BYTES.clear()

    def _drain(self, payload: bytes) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            os.close(write_fd)
            write_fd = -1
            return list(reader_mod.iter_keys(read_fd))
        finally:
            os.close(read_fd)
            if write_fd >= 0:
                os.close(write_fd)

    def test_iter_keys_stops_at_end_of_input(self) -> None:
        self.assertEqual(self._drain(b"ab\x1b[D"), ["a", "b", "LEFT"])

    def test_function_key_sequences_leave_buffer_unchanged(self) -> None:
        state = DemoState(
            config=WrapConfig(),
            splitters=SplitterRegistry([SplitterEntry("HyphenSplitter", HyphenSplitter())]),
            buffer=TextBuffer(""),
        )
        registry = build_key_registry(state)

        keys = self._drain(b"\x1b[5~\x1b[1;5C\x1b[15~\x1b[6;2~")
        for key in keys:
            registry.dispatch(key)

        self.assertEqual(keys, ["PAGE_UP", "CTRL_RIGHT", "UNKNOWN", "PAGE_DOWN"])
        self.assertEqual(state.buffer.text, "")
        self.assertEqual(state.config, WrapConfig())


if __name__ == "__main__":
    unittest.main()
