"""Clamped selection cursor with optional range selection."""

from __future__ import annotations

from collections.abc import Callable


class ListCursor:
    """Selection index over a list whose length is read on demand.

    The item count comes from a callable so the cursor never holds a stale
    copy of the list. Every read clamps the index; an empty list reports
    index ``0`` and the range collapses to ``(0, 0)``.
    """

    def __init__(self, get_item_count: Callable[[], int]) -> None:
        self._get_item_count = get_item_count
        self._selected_idx = 0
        self._range_start_idx = 0
        self._range_select_mode = False

    def get_item_count(self) -> int:
        return max(0, self._get_item_count())

    def _clamp(self, idx: int) -> int:
        count = self.get_item_count()
        if count == 0:
            return 0
        return max(0, min(count - 1, idx))

    def get_selected_line_idx(self) -> int:
        return self._clamp(self._selected_idx)

    def set_selected_line_idx(self, idx: int) -> None:
        self._selected_idx = self._clamp(idx)

    def move_selected_line(self, delta: int) -> None:
        self.set_selected_line_idx(self.get_selected_line_idx() + delta)

    def clamp_selection(self) -> None:
        self._selected_idx = self._clamp(self._selected_idx)
        self._range_start_idx = self._clamp(self._range_start_idx)

    def is_selecting_range(self) -> bool:
        return self._range_select_mode and self.get_item_count() > 0

    def toggle_range_select(self) -> None:
        if self._range_select_mode:
            self._range_select_mode = False
            return
        self._range_select_mode = True
        self._range_start_idx = self.get_selected_line_idx()

    def expand_range(self, delta: int) -> None:
        """Start a range at the current line if needed, then move the cursor."""
        if not self._range_select_mode:
            self._range_select_mode = True
            self._range_start_idx = self.get_selected_line_idx()
        self.move_selected_line(delta)

    def cancel_range_select(self) -> None:
        self._range_select_mode = False

    def get_selection_range(self) -> tuple[int, int]:
        """Return inclusive ``(start, end)`` indexes of the selection."""
        selected = self.get_selected_line_idx()
        if not self.is_selecting_range():
            return selected, selected
        start = self._clamp(self._range_start_idx)
        return min(start, selected), max(start, selected)
