"""Input-layer public API for key decoding and key dispatch.

Exports are split between low-level terminal decoding (`read_key`,
`iter_keys`) and the demo's key bindings used by the runtime loop.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, iter_keys, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import build_key_registry, is_printable_key

__all__ = [
    "read_key",
    "iter_keys",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "build_key_registry",
    "is_printable_key",
]
