"""Actions on branches of one remote."""

from __future__ import annotations

from ..bindings import Binding
from ..keys import ESC, SPACE
from ..models import RemoteBranch
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon


class RemoteBranchesController(BaseController):
    name = "remote_branches"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    def get_keybindings(self) -> list[Binding]:
        selected = self.common.contexts.remote_branches.get_selected_remote_branch
        return [
            Binding(ESC, "Return to remotes list", self.escape),
            Binding(SPACE, "Checkout", with_selected(selected, self.checkout)),
            Binding("n", "New branch", with_selected(selected, self.new_branch)),
            Binding("M", "Merge into currently checked out branch", with_selected(selected, self.merge)),
            Binding("r", "Rebase checked-out branch onto this branch", with_selected(selected, self.rebase)),
            Binding("d", "Delete remote branch", with_selected(selected, self.delete)),
            Binding("u", "Set as upstream of checked-out branch", with_selected(selected, self.set_as_upstream)),
            Binding("g", "View reset options", with_selected(selected, self.create_reset_menu), opens_menu=True),
        ]

    def escape(self) -> None:
        self.common.c.context_stack.replace(self.common.contexts.remotes)

    def checkout(self, branch: RemoteBranch) -> None:
        self.common.helpers.refs.checkout_ref(branch.full_name())

    def new_branch(self, branch: RemoteBranch) -> None:
        self.common.helpers.refs.new_branch(branch.full_name(), branch.description(), suggested_name=branch.name)

    def merge(self, branch: RemoteBranch) -> None:
        self.common.helpers.merge_and_rebase.merge_ref_into_checked_out(branch.full_name())

    def rebase(self, branch: RemoteBranch) -> None:
        self.common.helpers.merge_and_rebase.rebase_onto_ref(branch.full_name())

    def delete(self, branch: RemoteBranch) -> None:
        def delete() -> None:
            self.common.c.popup.toast(f"Deleting {branch.full_name()}...")
            self.common.git.remote.delete_remote_branch(branch.remote_name, branch.name)
            self.common.c.refresh([RefreshScope.BRANCHES, RefreshScope.REMOTES])

        self.common.c.popup.confirm(
            "Delete remote branch",
            f"Are you sure you want to delete remote branch '{branch.full_name()}'?",
            delete,
        )

    def set_as_upstream(self, branch: RemoteBranch) -> None:
        checked_out = self.common.model.checked_out_branch

        def set_upstream() -> None:
            self.common.git.branch.set_upstream(branch.remote_name, branch.name)
            self.common.c.refresh([RefreshScope.BRANCHES, RefreshScope.REMOTES])

        self.common.c.popup.confirm(
            "Set upstream branch",
            f"Are you sure you want to set the upstream branch of '{checked_out}' to '{branch.full_name()}'?",
            set_upstream,
        )

    def create_reset_menu(self, branch: RemoteBranch) -> None:
        self.common.helpers.refs.create_git_reset_menu(branch.full_name())
