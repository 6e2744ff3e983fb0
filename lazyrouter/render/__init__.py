"""Text rendering of registry-derived views."""

from .help import help_lines, keybinding_sections

__all__ = ["help_lines", "keybinding_sections"]
