from __future__ import annotations

from ..ansi import colorize
from ..keys import key_label
from ..models import MenuItem
from ..ui_theme import DEFAULT_THEME, UITheme


def get_menu_item_list_display_strings(
    items: list[MenuItem],
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    """Rows of ``[(key), cells...]``.

    The key column is added to every row once any item has a key, so columns
    stay aligned.
    """
    show_keys = any(item.key for item in items)
    rows: list[list[str]] = []
    for item in items:
        cells = list(item.display_strings) if item.display_strings else [item.label]
        if item.opens_menu:
            cells[-1] = f"{cells[-1]}..."
        if show_keys:
            key_cell = colorize(theme.cyan, key_label(item.key)) if item.key else ""
            cells.insert(0, key_cell)
        rows.append(cells)
    return rows
