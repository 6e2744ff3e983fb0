"""git-flow start/finish from the branches list."""

from __future__ import annotations

from ..bindings import Binding
from ..errors import ActionUnavailableError
from ..models import Branch, MenuItem
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon

FLOW_BRANCH_TYPES: tuple[str, ...] = ("feature", "hotfix", "bugfix", "release")


class GitFlowController(BaseController):
    name = "git_flow"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    def get_keybindings(self) -> list[Binding]:
        selected = self.common.contexts.branches.get_selected_branch
        return [
            Binding("i", "Show git-flow options", with_selected(selected, self.handle_create_git_flow_menu), opens_menu=True),
        ]

    def _git_flow_enabled(self) -> bool:
        return bool(self.common.git.config.get("gitflow.branch.master") or self.common.git.config.get("gitflow.prefix.feature"))

    def handle_create_git_flow_menu(self, branch: Branch) -> None:
        if not self._git_flow_enabled():
            raise ActionUnavailableError("You need to install git-flow and enable it in this repo to use git-flow features")

        items: list[MenuItem] = []
        branch_type, sep, _ = branch.name.partition("/")
        if sep and branch_type in FLOW_BRANCH_TYPES:
            items.append(
                MenuItem(
                    label=f"finish branch '{branch.name}'",
                    key="f",
                    on_press=lambda: self._finish(branch.name),
                )
            )
        for flow_type in FLOW_BRANCH_TYPES:
            items.append(
                MenuItem(
                    label=f"start {flow_type}",
                    key=flow_type[0],
                    on_press=lambda flow_type=flow_type: self._prompt_start(flow_type),
                )
            )
        self.common.c.popup.menu("git flow", items)

    def _finish(self, branch_name: str) -> None:
        self.common.git.flow.finish(branch_name)
        self.common.c.refresh(None)

    def _prompt_start(self, branch_type: str) -> None:
        def start(name: str) -> None:
            name = name.strip()
            if not name:
                return
            self.common.git.flow.start(branch_type, name)
            self.common.c.refresh([RefreshScope.BRANCHES, RefreshScope.COMMITS, RefreshScope.STATUS])

        self.common.c.popup.prompt(f"New {branch_type} name:", start)
