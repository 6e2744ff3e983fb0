from __future__ import annotations

from ..ansi import colorize
from ..models import RemoteBranch
from ..ui_theme import DEFAULT_THEME, UITheme
from .branches import get_branch_text_style


def get_remote_branch_list_display_strings(
    branches: list[RemoteBranch],
    diff_name: str,
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    return [get_remote_branch_display_strings(branch, diff_name, theme) for branch in branches]


def get_remote_branch_display_strings(
    branch: RemoteBranch,
    diff_name: str,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    style = get_branch_text_style(branch.name, theme)
    if branch.full_name() == diff_name:
        style = theme.diff_highlight
    return [colorize(style, branch.name)]
