"""Cheatsheet lines derived from the controller registry."""

from __future__ import annotations

import unittest

from lazyrouter.ansi import display_width
from lazyrouter.bindings import Binding
from lazyrouter.context.base import BaseContext
from lazyrouter.controllers.base import BaseController
from lazyrouter.controllers.registry import ControllerRegistry
from lazyrouter.keys import CTRL_R, ESC
from lazyrouter.render import help_lines, keybinding_sections
from lazyrouter.ui_theme import PLAIN_THEME


class StaticController(BaseController):
    def __init__(self, name: str, bindings: list[Binding], fallback: bool = False) -> None:
        super().__init__()
        self.name = name
        self._static = bindings
        self.fallback = fallback

    def get_keybindings(self) -> list[Binding]:
        return list(self._static)


def _noop() -> None:
    pass


class KeybindingHelpTests(unittest.TestCase):
    def setUp(self) -> None:
        self.branches = BaseContext("localBranches", title="Branches")
        self.global_context = BaseContext("global", title="Global")
        self.registry = ControllerRegistry([self.branches, self.global_context])
        self.registry.attach_controllers(
            self.branches,
            StaticController("nav", [Binding("j", "Next item", _noop), Binding("d", "Nav d", _noop)], fallback=True),
            StaticController("branches", [Binding("d", "Delete", _noop, opens_menu=True), Binding(CTRL_R, "Reset", _noop)]),
        )
        self.registry.attach_controllers(
            self.global_context,
            StaticController("global", [Binding("q", "Quit", _noop), Binding("d", "Global d", _noop), Binding(ESC, "Back", _noop)]),
        )

    def test_sections_hide_shadowed_bindings(self) -> None:
        sections = keybinding_sections(self.registry, self.branches, self.global_context)

        self.assertEqual([title for title, _ in sections], ["Branches", "Global"])
        self.assertEqual([binding.description for binding in sections[0][1]], ["Delete", "Reset", "Next item"])
        self.assertEqual([binding.description for binding in sections[1][1]], ["Quit", "Back"])

    def test_global_context_alone_has_one_section(self) -> None:
        sections = keybinding_sections(self.registry, self.global_context, self.global_context)

        self.assertEqual(len(sections), 1)

    def test_plain_lines_align_keys_and_mark_menus(self) -> None:
        lines = help_lines(self.registry, self.branches, self.global_context, theme=PLAIN_THEME)

        self.assertEqual(lines, [
            "BRANCHES",
            "  d       Delete...",
            "  Ctrl+R  Reset",
            "  j       Next item",
            "",
            "GLOBAL",
            "  q    Quit",
            "  Esc  Back",
        ])

    def test_max_cols_clips_every_line(self) -> None:
        lines = help_lines(self.registry, self.branches, self.global_context, max_cols=8)

        self.assertTrue(all(display_width(line) <= 8 for line in lines))


if __name__ == "__main__":
    unittest.main()
