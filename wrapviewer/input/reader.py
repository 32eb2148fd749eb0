"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, control combos, and multi-byte UTF-8 input.
"""

from __future__ import annotations

import os
import select
from collections.abc import Iterator

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_NAMED_BYTES = {
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

_CSI_FINAL_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_TILDE_KEYS = {
    "1": "HOME",
    "2": "INSERT",
    "3": "DELETE",
    "4": "END",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "7": "HOME",
    "8": "END",
}

_MODIFIER_PREFIXES = {
    "2": "SHIFT",
    "3": "ALT",
    "5": "CTRL",
}

MAX_SEQUENCE_BYTES = 32


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_char(fd: int, lead: bytes) -> str:
    raw = bytearray(lead)
    for _ in range(_utf8_length(lead[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        raw += part
    return raw.decode("utf-8", errors="replace")


def _read_control_sequence(fd: int) -> str:
    """Consume one CSI/SS3 sequence through its final byte and name it.

    Parameter and intermediate bytes (0x20-0x3F) are read until a final byte
    (0x40-0x7E), so no part of an unrecognized sequence leaks into the input.
    """
    params = bytearray()
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC" if not params else "UNKNOWN"
        if 0x40 <= part[0] <= 0x7E:
            final = part
            break
        if not 0x20 <= part[0] <= 0x3F or len(params) >= MAX_SEQUENCE_BYTES:
            return "UNKNOWN"
        params += part

    fields = params.decode("ascii", errors="replace").split(";")
    if final == b"~":
        return _TILDE_KEYS.get(fields[0], "UNKNOWN")
    key = _CSI_FINAL_KEYS.get(final)
    if key is None:
        return "UNKNOWN"
    if len(fields) < 2:
        return key if not params else "UNKNOWN"
    # Modified keys: ESC [ 1 ; <modifier> <final>
    prefix = _MODIFIER_PREFIXES.get(fields[1])
    return f"{prefix}_{key}" if prefix else "UNKNOWN"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` on timeout or end of input.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    named = _NAMED_BYTES.get(ch)
    if named is not None:
        return named
    if ch[0] < 0x20 and ch != b"\x1b":
        return f"CTRL_{chr(ch[0] + 0x40)}"

    if ch != b"\x1b":
        return _decode_char(fd, ch)

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    return _read_control_sequence(fd)


def iter_keys(fd: int) -> Iterator[str]:
    """Yield key tokens from ``fd`` until end of input.

    Blocks between keys. ``OSError`` from the underlying read propagates.
    """
    while True:
        key = read_key(fd)
        if not key:
            return
        yield key
