"""Key-token dispatch table used by the update loop."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyHandler = Callable[[], None]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single state transition."""

    combos: tuple[str, ...]
    handler: KeyHandler


class KeyComboRegistry:
    """Exact-match key dispatch with an optional catch-all for unbound keys."""

    def __init__(self, fallback: Callable[[str], bool] | None = None) -> None:
        self._fallback = fallback
        self._handlers: dict[str, KeyHandler] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool:
        """Run the handler for ``key``; return whether anything handled it."""
        handler = self._handlers.get(key)
        if handler is not None:
            handler()
            return True
        if self._fallback is not None:
            return self._fallback(key)
        return False
