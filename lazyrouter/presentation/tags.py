from __future__ import annotations

from ..ansi import colorize
from ..models import Tag
from ..ui_theme import DEFAULT_THEME, UITheme


def get_tag_list_display_strings(
    tags: list[Tag],
    diff_name: str,
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    return [get_tag_display_strings(tag, tag.name == diff_name, theme) for tag in tags]


def get_tag_display_strings(tag: Tag, diffed: bool, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """``[name, message]``; the message cell is empty for lightweight tags."""
    style = theme.diff_highlight if diffed else theme.default_text
    message = colorize(theme.dim, tag.message) if tag.message else ""
    return [colorize(style, tag.name), message]
