from __future__ import annotations

from ..ansi import colorize
from ..models import CommitFile
from ..ui_theme import DEFAULT_THEME, UITheme


def commit_file_status_style(change_status: str, theme: UITheme = DEFAULT_THEME) -> str:
    if change_status == "A":
        return theme.green
    if change_status == "D":
        return theme.red
    if change_status in ("M", "R", "C"):
        return theme.yellow
    return theme.default_text


def get_commit_file_list_display_strings(
    files: list[CommitFile],
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    return [
        [colorize(commit_file_status_style(file.change_status, theme), file.change_status), file.name]
        for file in files
    ]
