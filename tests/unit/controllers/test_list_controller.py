"""List navigation controller tests: clamping, paging, range selection and
zero-item safety."""

from __future__ import annotations

import unittest

from lazyrouter.context.capabilities import RangeSelectable
from lazyrouter.context.list_context import ListContext
from lazyrouter.controllers.list_controller import ListControllerFactory
from lazyrouter.keys import DOWN, END, HOME, PAGE_DOWN, PAGE_UP, SHIFT_DOWN, SHIFT_UP, UP


class ListControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.items = [f"item{i}" for i in range(25)]
        self.context = ListContext("things", lambda: self.items, page_size=10)
        self.controller = ListControllerFactory().create(self.context)

    def press(self, key: str) -> None:
        self.controller.bindings.get(key).handler()

    def test_controller_is_a_fallback(self) -> None:
        self.assertTrue(self.controller.fallback)

    def test_line_movement_clamps_at_both_ends(self) -> None:
        self.press(UP)
        self.assertEqual(self.context.get_selected_line_idx(), 0)
        self.press(DOWN)
        self.press("j")
        self.assertEqual(self.context.get_selected_line_idx(), 2)
        self.press("k")
        self.assertEqual(self.context.get_selected_line_idx(), 1)

    def test_paging_moves_by_page_size(self) -> None:
        self.press(PAGE_DOWN)
        self.assertEqual(self.context.get_selected_line_idx(), 10)
        self.press(".")
        self.press(".")
        self.assertEqual(self.context.get_selected_line_idx(), 24)
        self.press(PAGE_UP)
        self.assertEqual(self.context.get_selected_line_idx(), 14)
        self.press(",")
        self.press(",")
        self.assertEqual(self.context.get_selected_line_idx(), 0)

    def test_top_and_bottom(self) -> None:
        self.press(END)
        self.assertEqual(self.context.get_selected_line_idx(), 24)
        self.press("<")
        self.assertEqual(self.context.get_selected_line_idx(), 0)
        self.press(">")
        self.press(HOME)
        self.assertEqual(self.context.get_selected_line_idx(), 0)

    def test_range_select_extends_from_anchor(self) -> None:
        self.context.set_selected_line_idx(5)
        self.press(SHIFT_DOWN)
        self.press(SHIFT_DOWN)
        self.assertEqual(self.context.get_selected_items(), ["item5", "item6", "item7"])

        self.press(SHIFT_UP)
        self.assertEqual(self.context.cursor.get_selection_range(), (5, 6))

    def test_toggle_range_select(self) -> None:
        self.context.set_selected_line_idx(3)
        self.press("v")
        self.press(DOWN)
        self.assertEqual(self.context.cursor.get_selection_range(), (3, 4))
        self.press("v")
        self.assertEqual(self.context.cursor.get_selection_range(), (4, 4))

    def test_focus_clamps_selection_after_list_shrinks(self) -> None:
        self.context.set_selected_line_idx(20)
        del self.items[5:]

        self.controller.on_focus()

        self.assertEqual(self.context.get_selected_line_idx(), 4)
        self.assertEqual(self.context.get_selected_item(), "item4")


class PlainListContext:
    """Navigable list without a range-select cursor."""

    key = "plain"
    page_size = 2

    def __init__(self, count: int) -> None:
        self.count = count
        self.idx = 0

    def get_item_count(self) -> int:
        return self.count

    def get_selected_line_idx(self) -> int:
        return self.idx

    def set_selected_line_idx(self, idx: int) -> None:
        self.idx = max(0, min(self.count - 1, idx))


class RangeSelectCapabilityTests(unittest.TestCase):
    def test_list_context_declares_range_select(self) -> None:
        self.assertIsInstance(ListContext("things", lambda: [1]), RangeSelectable)
        self.assertNotIsInstance(PlainListContext(3), RangeSelectable)

    def test_context_without_cursor_still_navigates(self) -> None:
        context = PlainListContext(5)
        controller = ListControllerFactory().create(context)

        for key in ("v", SHIFT_DOWN, SHIFT_UP):
            controller.bindings.get(key).handler()
        controller.bindings.get(PAGE_DOWN).handler()
        controller.on_focus()

        self.assertEqual(context.get_selected_line_idx(), 2)


class EmptyListControllerTests(unittest.TestCase):
    def test_every_binding_is_a_noop_on_zero_items(self) -> None:
        context = ListContext("empty", lambda: [])
        controller = ListControllerFactory().create(context)

        for binding in controller.bindings:
            binding.handler()

        self.assertEqual(context.get_selected_line_idx(), 0)
        self.assertFalse(context.cursor.is_selecting_range())
        self.assertIsNone(context.get_selected_item())
        self.assertEqual(context.get_selected_items(), [])


if __name__ == "__main__":
    unittest.main()
