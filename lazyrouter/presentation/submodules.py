from __future__ import annotations

from ..ansi import colorize
from ..models import SubmoduleConfig
from ..ui_theme import DEFAULT_THEME, UITheme


def get_submodule_list_display_strings(
    submodules: list[SubmoduleConfig],
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    """``[name]``, plus the path when it differs from the name."""
    rows: list[list[str]] = []
    for submodule in submodules:
        row = [colorize(theme.default_text, submodule.name)]
        if submodule.path != submodule.name:
            row.append(colorize(theme.dim, submodule.path))
        rows.append(row)
    return rows
