"""UI theme definitions and selection helpers.

Themes are ANSI palettes consumed by presentation formatters and the help
renderer. Each field holds an SGR prefix; the plain theme holds empty strings
so formatted cells carry no escapes at all.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    default_text: str
    diff_highlight: str
    accent: str
    selected_range: str
    green: str
    yellow: str
    red: str
    cyan: str
    magenta: str
    blue: str
    dim: str
    help_heading: str
    help_key: str


DEFAULT_THEME = UITheme(
    name="default",
    default_text="\033[39m",
    diff_highlight="\033[35m",
    accent="\033[33m",
    selected_range="\033[7m",
    green="\033[32m",
    yellow="\033[33m",
    red="\033[31m",
    cyan="\033[36m",
    magenta="\033[35m",
    blue="\033[34m",
    dim="\033[2m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    default_text="\033[38;5;252m",
    diff_highlight="\033[38;5;177m",
    accent="\033[38;5;117m",
    selected_range="\033[48;5;24m",
    green="\033[38;5;84m",
    yellow="\033[38;5;221m",
    red="\033[38;5;203m",
    cyan="\033[38;5;45m",
    magenta="\033[38;5;170m",
    blue="\033[38;5;39m",
    dim="\033[2;38;5;110m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    default_text="",
    diff_highlight="",
    accent="",
    selected_range="",
    green="",
    yellow="",
    red="",
    cyan="",
    magenta="",
    blue="",
    dim="",
    help_heading="",
    help_key="",
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
