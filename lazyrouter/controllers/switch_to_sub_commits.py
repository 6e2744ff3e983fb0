"""Open the commit list of whatever ref the context has selected."""

from __future__ import annotations

from collections.abc import Callable

from ..bindings import Binding
from ..commands import loaders
from ..context.capabilities import CanSwitchToSubCommits
from ..keys import ENTER
from ..models import Commit
from .base import BaseController
from .common import ControllerCommon


class SwitchToSubCommitsController(BaseController):
    name = "switch_to_sub_commits"

    def __init__(
        self,
        common: ControllerCommon,
        set_sub_commits: Callable[[list[Commit]], None],
        context: CanSwitchToSubCommits,
    ) -> None:
        super().__init__()
        self.common = common
        self.set_sub_commits = set_sub_commits
        self.context = context

    def get_keybindings(self) -> list[Binding]:
        return [Binding(ENTER, "View commits", self.view_commits)]

    def view_commits(self) -> None:
        ref = self.context.get_selected_ref()
        if ref is None:
            return
        commits = loaders.load_commits(
            self.common.git,
            ref.ref_name(),
            main_branches=self.common.c.user_config.main_branches,
        )
        self.set_sub_commits(commits)

        sub_commits = self.common.contexts.sub_commits
        sub_commits.ref = ref
        sub_commits.parent_context = self.common.contexts.by_key(self.context.key)
        sub_commits.title = f"Commits of {ref.description()}"
        sub_commits.set_selected_line_idx(0)
        self.common.c.context_stack.push(sub_commits)
