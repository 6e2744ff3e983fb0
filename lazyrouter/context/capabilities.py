"""Structural contracts that generic controllers require of their context.

Each protocol lists only the accessors its generic controller calls. Context
classes satisfy them structurally and additionally declare the matching
:class:`~lazyrouter.context.base.Capability` so the wiring code can check its
explicit enumerations against the declarations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import Commit


class Ref(Protocol):
    def ref_name(self) -> str: ...

    def description(self) -> str: ...


class HasKey(Protocol):
    @property
    def key(self) -> str: ...


class ListContextTrait(HasKey, Protocol):
    """Enough list semantics for cursor navigation."""

    page_size: int

    def get_item_count(self) -> int: ...

    def get_selected_line_idx(self) -> int: ...

    def set_selected_line_idx(self, idx: int) -> None: ...


class RangeCursor(Protocol):
    def toggle_range_select(self) -> None: ...

    def expand_range(self, delta: int) -> None: ...

    def clamp_selection(self) -> None: ...


@runtime_checkable
class RangeSelectable(Protocol):
    """Optional: list contexts whose cursor supports range selection."""

    cursor: RangeCursor


class CanSwitchToSubCommits(HasKey, Protocol):
    def get_selected_ref(self) -> Ref | None: ...


class CanSwitchToDiffFiles(HasKey, Protocol):
    def get_selected_ref(self) -> Ref | None: ...

    def can_rebase(self) -> bool: ...


class ContainsCommits(HasKey, Protocol):
    def get_selected_commit(self) -> Commit | None: ...

    def get_commits(self) -> list[Commit]: ...

    def get_selected_line_idx(self) -> int: ...
