"""Keybinding cheatsheet built from the wired controller registry.

Lines are computed from what the registry would actually dispatch, so shadowed
bindings never show up. Rendering here is side-effect free.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line, colorize, display_width
from ..bindings import Binding
from ..context.base import BaseContext
from ..controllers.registry import ControllerRegistry
from ..keys import key_label, normalize_key
from ..ui_theme import DEFAULT_THEME, UITheme

MENU_SUFFIX = "..."


def keybinding_sections(
    registry: ControllerRegistry,
    context: BaseContext,
    global_context: BaseContext | None = None,
) -> list[tuple[str, list[Binding]]]:
    """Return ``(title, bindings)`` for ``context`` and, when given, the
    global bindings it does not shadow."""
    local = registry.effective_bindings(context)
    sections: list[tuple[str, list[Binding]]] = [(context.title, local)]
    if global_context is None or global_context is context:
        return sections
    local_keys = {normalize_key(binding.key) for binding in local}
    remaining = [
        binding
        for binding in registry.effective_bindings(global_context)
        if normalize_key(binding.key) not in local_keys
    ]
    if remaining:
        sections.append((global_context.title, remaining))
    return sections


def help_lines(
    registry: ControllerRegistry,
    context: BaseContext,
    global_context: BaseContext | None = None,
    theme: UITheme = DEFAULT_THEME,
    max_cols: int | None = None,
) -> list[str]:
    """Styled cheatsheet: a heading per section, then ``key  description``."""
    lines: list[str] = []
    for title, bindings in keybinding_sections(registry, context, global_context):
        if lines:
            lines.append("")
        lines.append(colorize(theme.help_heading, title.upper()))
        labels = [key_label(binding.key) for binding in bindings]
        key_width = max((display_width(label) for label in labels), default=0)
        for label, binding in zip(labels, bindings):
            pad = " " * (key_width - display_width(label))
            suffix = MENU_SUFFIX if binding.opens_menu else ""
            lines.append(f"  {colorize(theme.help_key, label)}{pad}  {binding.description}{suffix}")
    if max_cols is not None:
        lines = [clip_ansi_line(line, max_cols) for line in lines]
    return lines
