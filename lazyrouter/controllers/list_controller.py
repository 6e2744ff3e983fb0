"""Cursor navigation shared by every list context."""

from __future__ import annotations

from ..bindings import Binding
from ..context.capabilities import ListContextTrait, RangeCursor, RangeSelectable
from ..keys import DOWN, END, HOME, PAGE_DOWN, PAGE_UP, SHIFT_DOWN, SHIFT_UP, UP
from .base import BaseController


class ListControllerFactory:
    def create(self, context: ListContextTrait) -> ListController:
        return ListController(context)


class ListController(BaseController):
    """Fallback navigation bindings; any other controller's binding for the
    same key on the same context takes precedence."""

    name = "list"
    fallback = True

    def __init__(self, context: ListContextTrait) -> None:
        super().__init__()
        self.context = context

    def get_keybindings(self) -> list[Binding]:
        return [
            Binding(UP, "Previous item", self.handle_prev_line),
            Binding("k", "Previous item", self.handle_prev_line),
            Binding(DOWN, "Next item", self.handle_next_line),
            Binding("j", "Next item", self.handle_next_line),
            Binding(",", "Previous page", self.handle_prev_page),
            Binding(PAGE_UP, "Previous page", self.handle_prev_page),
            Binding(".", "Next page", self.handle_next_page),
            Binding(PAGE_DOWN, "Next page", self.handle_next_page),
            Binding("<", "Scroll to top", self.handle_goto_top),
            Binding(HOME, "Scroll to top", self.handle_goto_top),
            Binding(">", "Scroll to bottom", self.handle_goto_bottom),
            Binding(END, "Scroll to bottom", self.handle_goto_bottom),
            Binding("v", "Toggle range select", self.handle_toggle_range_select),
            Binding(SHIFT_UP, "Range select up", self.handle_range_select_up),
            Binding(SHIFT_DOWN, "Range select down", self.handle_range_select_down),
        ]

    def _cursor(self) -> RangeCursor | None:
        if isinstance(self.context, RangeSelectable):
            return self.context.cursor
        return None

    def _move(self, delta: int) -> None:
        if self.context.get_item_count() == 0:
            return
        current = self.context.get_selected_line_idx()
        self.context.set_selected_line_idx(current + delta)

    def handle_prev_line(self) -> None:
        self._move(-1)

    def handle_next_line(self) -> None:
        self._move(1)

    def handle_prev_page(self) -> None:
        self._move(-self.context.page_size)

    def handle_next_page(self) -> None:
        self._move(self.context.page_size)

    def handle_goto_top(self) -> None:
        if self.context.get_item_count() == 0:
            return
        self.context.set_selected_line_idx(0)

    def handle_goto_bottom(self) -> None:
        count = self.context.get_item_count()
        if count == 0:
            return
        self.context.set_selected_line_idx(count - 1)

    def handle_toggle_range_select(self) -> None:
        cursor = self._cursor()
        if cursor is None or self.context.get_item_count() == 0:
            return
        cursor.toggle_range_select()

    def _expand_range(self, delta: int) -> None:
        cursor = self._cursor()
        if cursor is None or self.context.get_item_count() == 0:
            return
        cursor.expand_range(delta)

    def handle_range_select_up(self) -> None:
        self._expand_range(-1)

    def handle_range_select_down(self) -> None:
        self._expand_range(1)

    def on_focus(self) -> None:
        cursor = self._cursor()
        if cursor is not None:
            cursor.clamp_selection()
