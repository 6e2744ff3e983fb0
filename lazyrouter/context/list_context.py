"""List-backed context: a model list plus a selection cursor."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from .base import BaseContext, Capability
from .list_cursor import ListCursor

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10


class ListContext(BaseContext, Generic[T]):
    """Context whose rows come from ``get_items``.

    ``get_items`` is read on every access so model refreshes show up without
    re-wiring the context.
    """

    capabilities = frozenset({Capability.LIST})

    def __init__(
        self,
        key: str,
        get_items: Callable[[], Sequence[T]],
        title: str = "",
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        super().__init__(key, title)
        self._get_items = get_items
        self.page_size = max(1, page_size)
        self.cursor = ListCursor(lambda: len(self._get_items()))

    def get_items(self) -> list[T]:
        return list(self._get_items())

    def get_item_count(self) -> int:
        return self.cursor.get_item_count()

    def get_selected_line_idx(self) -> int:
        return self.cursor.get_selected_line_idx()

    def set_selected_line_idx(self, idx: int) -> None:
        self.cursor.set_selected_line_idx(idx)

    def get_selected_item(self) -> T | None:
        items = self._get_items()
        if not items:
            return None
        return items[self.cursor.get_selected_line_idx()]

    def get_selected_items(self) -> list[T]:
        """Items covered by the range selection, or the single selected item."""
        items = self._get_items()
        if not items:
            return []
        start, end = self.cursor.get_selection_range()
        return list(items[start : end + 1])
