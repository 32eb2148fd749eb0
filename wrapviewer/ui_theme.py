"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the settings banner and the margin frame.
The wrapped text itself is always drawn unstyled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reset: str
    heading: str
    value: str
    hint: str
    margin: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    heading="\033[1m",
    value="\033[1m",
    hint="",
    margin="\033[31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    heading="\033[1;38;5;45m",
    value="\033[1;38;5;153m",
    hint="\033[2;38;5;110m",
    margin="\033[38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    heading="",
    value="",
    hint="",
    margin="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
