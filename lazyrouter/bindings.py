"""Key binding records and per-controller lookup tables."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .keys import normalize_key


@dataclass(frozen=True)
class Binding:
    """One ``(key, description, handler)`` triple exposed by a controller.

    Handlers take no arguments: whatever they act on was captured when the
    controller was constructed. They return normally or raise a
    ``HandlerError`` subclass.
    """

    key: str
    description: str
    handler: Callable[[], None]
    opens_menu: bool = False


class BindingTable:
    """Ordered key-dispatch table for one controller.

    Keys are normalized on insert and lookup. Within one table the first
    binding for a key wins, so a controller lists its preferred binding first.
    """

    def __init__(self, bindings: list[Binding] | tuple[Binding, ...] = ()) -> None:
        self._bindings: tuple[Binding, ...] = tuple(bindings)
        self._by_key: dict[str, Binding] = {}
        for binding in self._bindings:
            self._by_key.setdefault(normalize_key(binding.key), binding)

    def __contains__(self, key: str) -> bool:
        return normalize_key(key) in self._by_key

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def keys(self) -> tuple[str, ...]:
        return tuple(self._by_key.keys())

    def get(self, key: str) -> Binding | None:
        return self._by_key.get(normalize_key(key))
