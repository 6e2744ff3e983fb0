"""Display cells for working-tree files: ``[XY, name]``."""

from __future__ import annotations

from ..ansi import colorize
from ..models import File
from ..ui_theme import DEFAULT_THEME, UITheme


def get_file_list_display_strings(
    files: list[File],
    diff_name: str,
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    return [get_file_display_strings(file, file.name == diff_name, theme) for file in files]


def get_file_display_strings(file: File, diffed: bool, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """The staged half of the status is green, the unstaged half red."""
    status = file.short_status.ljust(2)[:2]
    if file.has_merge_conflicts or not file.tracked:
        status_cell = colorize(theme.red, status)
    else:
        status_cell = colorize(theme.green, status[0]) + colorize(theme.red, status[1])

    if diffed:
        name_style = theme.diff_highlight
    elif file.has_unstaged_changes or file.has_merge_conflicts:
        name_style = theme.red
    else:
        name_style = theme.green
    name = f"{file.previous_name} → {file.name}" if file.previous_name else file.name
    return [status_cell, colorize(name_style, name)]
