"""Context identity, capability declarations and attached-controller lists."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..controllers.base import BaseController


class ContextKey:
    GLOBAL = "global"
    FILES = "files"
    BRANCHES = "localBranches"
    REMOTES = "remotes"
    REMOTE_BRANCHES = "remoteBranches"
    TAGS = "tags"
    LOCAL_COMMITS = "commits"
    REFLOG_COMMITS = "reflogCommits"
    SUB_COMMITS = "subCommits"
    COMMIT_FILES = "commitFiles"
    STASH = "stash"
    SUBMODULES = "submodules"
    MENU = "menu"
    COMMIT_MESSAGE = "commitMessage"


class Capability(str, Enum):
    """Shapes of data a context can promise to generic controllers."""

    LIST = "list"
    SWITCH_TO_SUB_COMMITS = "switch_to_sub_commits"
    SWITCH_TO_DIFF_FILES = "switch_to_diff_files"
    CONTAINS_COMMITS = "contains_commits"


class BaseContext:
    """Logical view with a stable key and an ordered controller list.

    ``capabilities`` is a class-level declaration and never changes for an
    instance. The controller list only grows, and only through
    :class:`~lazyrouter.controllers.registry.ControllerRegistry`.
    """

    capabilities: frozenset[Capability] = frozenset()

    def __init__(self, key: str, title: str = "") -> None:
        self._key = key
        self.title = title or key
        self._controllers: list[BaseController] = []

    @property
    def key(self) -> str:
        return self._key

    def get_key(self) -> str:
        return self._key

    @property
    def controllers(self) -> tuple[BaseController, ...]:
        """Attached controllers in attachment order."""
        return tuple(self._controllers)

    def has_capability(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def _append_controller(self, controller: BaseController) -> None:
        self._controllers.append(controller)

    def handle_focus(self) -> None:
        for controller in self._controllers:
            controller.on_focus()

    def handle_focus_lost(self) -> None:
        for controller in self._controllers:
            controller.on_focus_lost()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._key}>"
