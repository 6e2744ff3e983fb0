from __future__ import annotations

from ..ansi import colorize
from ..models import StashEntry
from ..ui_theme import DEFAULT_THEME, UITheme


def get_stash_entry_list_display_strings(
    entries: list[StashEntry],
    diff_name: str,
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    return [get_stash_entry_display_strings(entry, entry.ref_name() == diff_name, theme) for entry in entries]


def get_stash_entry_display_strings(entry: StashEntry, diffed: bool, theme: UITheme = DEFAULT_THEME) -> list[str]:
    style = theme.diff_highlight if diffed else theme.default_text
    return [colorize(style, entry.name)]
