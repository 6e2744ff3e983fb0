"""Controller base class shared by generic and domain controllers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from ..bindings import Binding, BindingTable

T = TypeVar("T")


class BaseController:
    """Named bundle of key bindings plus optional focus hooks.

    Subclasses override :meth:`get_keybindings`. The table is built lazily on
    first use and cached; bindings close over state captured at construction,
    never over per-call arguments.

    ``fallback`` controllers are consulted only after every non-fallback
    controller on the same context, whatever the attachment order.
    """

    name = "base"
    fallback = False

    def __init__(self) -> None:
        self._binding_table: BindingTable | None = None

    def get_keybindings(self) -> list[Binding]:
        return []

    @property
    def bindings(self) -> BindingTable:
        if self._binding_table is None:
            self._binding_table = BindingTable(self.get_keybindings())
        return self._binding_table

    def on_focus(self) -> None:
        """Run when a context carrying this controller gains focus."""

    def on_focus_lost(self) -> None:
        """Run when a context carrying this controller loses focus."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def with_selected(get_selected: Callable[[], T | None], fn: Callable[[T], None]) -> Callable[[], None]:
    """Return a handler running ``fn`` on the current selection.

    With nothing selected the handler does nothing.
    """

    def handler() -> None:
        selected = get_selected()
        if selected is None:
            return
        fn(selected)

    return handler
