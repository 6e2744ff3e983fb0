"""Bindings reachable from every context."""

from __future__ import annotations

from collections.abc import Callable

from ..bindings import Binding
from ..keys import ESC
from ..models import MenuItem
from .base import BaseController
from .common import ControllerCommon


class GlobalController(BaseController):
    name = "global"

    def __init__(
        self,
        common: ControllerCommon,
        open_keybindings_menu: Callable[[], None],
        exit_submodule: Callable[[], bool] = lambda: False,
    ) -> None:
        super().__init__()
        self.common = common
        self.open_keybindings_menu = open_keybindings_menu
        self.exit_submodule = exit_submodule

    def get_keybindings(self) -> list[Binding]:
        return [
            Binding("?", "Open keybindings menu", self.open_keybindings_menu, opens_menu=True),
            Binding(":", "Execute custom command", self.custom_command),
            Binding("m", "View merge/rebase options", self.create_rebase_options_menu, opens_menu=True),
            Binding("W", "Open diff menu", self.create_diffing_menu, opens_menu=True),
            Binding("R", "Refresh", self.refresh),
            Binding(ESC, "Return to previous view", self.escape),
            Binding("q", "Quit", self.quit),
        ]

    def custom_command(self) -> None:
        def run(command: str) -> None:
            command = command.strip()
            if not command:
                return
            self.common.c.popup.toast(f"Running {command}...")
            self.common.os.run_shell(command, cwd=self.common.git.repo_path)
            self.common.c.refresh(None)

        self.common.c.popup.prompt("Custom command:", run)

    def create_rebase_options_menu(self) -> None:
        self.common.helpers.merge_and_rebase.create_rebase_options_menu()

    def create_diffing_menu(self) -> None:
        diffing = self.common.modes.diffing
        current = self.common.c.context_stack.current()
        get_selected_ref = getattr(current, "get_selected_ref", None)
        ref = get_selected_ref() if get_selected_ref is not None else None

        items: list[MenuItem] = []
        if ref is not None:
            name = ref.ref_name()

            def diff_ref() -> None:
                diffing.ref = name

            items.append(MenuItem(label=f"Diff {name}", key="d", on_press=diff_ref))

        def enter_ref(name: str) -> None:
            diffing.ref = name.strip()

        items.append(
            MenuItem(
                label="Enter ref to diff",
                key="e",
                on_press=lambda: self.common.c.popup.prompt("Enter ref to diff:", enter_ref),
            )
        )
        if diffing.active():

            def exit_diff() -> None:
                diffing.ref = ""

            items.append(MenuItem(label="Exit diff mode", key="x", on_press=exit_diff))
        self.common.c.popup.menu("Diffing", items)

    def refresh(self) -> None:
        self.common.c.refresh(None)

    def escape(self) -> None:
        if self.common.modes.diffing.active():
            self.common.modes.diffing.ref = ""
            return
        if self.common.modes.cherry_picking.active():
            self.common.helpers.cherry_pick.reset()
            return
        if not self.common.c.context_stack.pop():
            self.exit_submodule()

    def quit(self) -> None:
        self.common.c.gui_state.should_quit = True
