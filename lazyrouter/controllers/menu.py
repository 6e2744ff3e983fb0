"""Selection and dismissal of popup menu rows."""

from __future__ import annotations

from ..bindings import Binding
from ..keys import ENTER, ESC, SPACE
from .base import BaseController
from .common import ControllerCommon


class MenuController(BaseController):
    name = "menu"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    @property
    def context(self):
        return self.common.contexts.menu

    def get_keybindings(self) -> list[Binding]:
        return [
            Binding(ENTER, "Execute", self.press),
            Binding(SPACE, "Execute", self.press),
            Binding(ESC, "Close", self.close),
        ]

    def press(self) -> None:
        item = self.context.get_selected_item()
        if item is None:
            return
        # close first so an item that opens another menu keeps it focused
        self.close()
        if item.on_press is not None:
            item.on_press()

    def close(self) -> None:
        if self.common.c.context_stack.current() is self.context:
            self.common.c.context_stack.pop()

    def on_focus(self) -> None:
        self.context.set_selected_line_idx(0)
