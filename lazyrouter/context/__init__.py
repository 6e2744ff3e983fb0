"""Contexts: logical views with identity, capabilities and controllers."""

from .base import BaseContext, Capability, ContextKey
from .capabilities import (
    CanSwitchToDiffFiles,
    CanSwitchToSubCommits,
    ContainsCommits,
    ListContextTrait,
    RangeCursor,
    RangeSelectable,
    Ref,
)
from .contexts import ContextTree, build_context_tree
from .list_context import ListContext
from .list_cursor import ListCursor
from .stack import ContextStack

__all__ = [
    "BaseContext",
    "Capability",
    "ContextKey",
    "CanSwitchToDiffFiles",
    "CanSwitchToSubCommits",
    "ContainsCommits",
    "ListContextTrait",
    "RangeCursor",
    "RangeSelectable",
    "Ref",
    "ContextTree",
    "build_context_tree",
    "ListContext",
    "ListCursor",
    "ContextStack",
]
