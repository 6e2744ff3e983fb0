from __future__ import annotations

from ..ansi import colorize
from ..models import Remote
from ..ui_theme import DEFAULT_THEME, UITheme


def get_remote_list_display_strings(
    remotes: list[Remote],
    diff_name: str,
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    return [get_remote_display_strings(remote, remote.name == diff_name, theme) for remote in remotes]


def get_remote_display_strings(remote: Remote, diffed: bool, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """``[name, branch count]``."""
    style = theme.diff_highlight if diffed else theme.default_text
    count = len(remote.branches)
    noun = "branch" if count == 1 else "branches"
    return [colorize(style, remote.name), colorize(theme.blue, f"{count} {noun}")]
