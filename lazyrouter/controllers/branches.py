"""Local branch actions."""

from __future__ import annotations

from ..bindings import Binding
from ..errors import ActionUnavailableError, GitCommandError
from ..keys import CTRL_O, SPACE
from ..models import Branch
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon


class BranchesController(BaseController):
    name = "branches"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    @property
    def context(self):
        return self.common.contexts.branches

    def get_keybindings(self) -> list[Binding]:
        selected = self.context.get_selected_branch
        return [
            Binding(SPACE, "Checkout", with_selected(selected, self.press)),
            Binding("n", "New branch", with_selected(selected, self.new_branch)),
            Binding("o", "Create pull request", with_selected(selected, self.create_pull_request)),
            Binding(CTRL_O, "Copy branch name to clipboard", with_selected(selected, self.copy_name)),
            Binding("c", "Checkout by name", self.checkout_by_name),
            Binding("d", "Delete branch", with_selected(selected, self.delete)),
            Binding("r", "Rebase checked-out branch onto this branch", with_selected(selected, self.rebase)),
            Binding("M", "Merge into currently checked out branch", with_selected(selected, self.merge)),
            Binding("f", "Fast-forward this branch from its upstream", with_selected(selected, self.fast_forward)),
            Binding("g", "View reset options", with_selected(selected, self.create_reset_menu), opens_menu=True),
            Binding("R", "Rename branch", with_selected(selected, self.rename)),
            Binding("u", "Set upstream of selected branch", with_selected(selected, self.set_upstream)),
        ]

    def press(self, branch: Branch) -> None:
        if branch.head:
            return
        self.common.helpers.refs.checkout_ref(branch.name)

    def new_branch(self, branch: Branch) -> None:
        self.common.helpers.refs.new_branch(branch.ref_name(), branch.description())

    def create_pull_request(self, branch: Branch) -> None:
        self.common.os.open_link(self.common.helpers.host.get_pull_request_url(branch.name))

    def copy_name(self, branch: Branch) -> None:
        self.common.os.copy_to_clipboard(branch.name)
        self.common.c.popup.toast(f"Copied {branch.name} to clipboard")

    def checkout_by_name(self) -> None:
        def checkout(name: str) -> None:
            name = name.strip()
            if not name:
                return
            self.common.helpers.refs.checkout_ref(name)

        self.common.c.popup.prompt("Branch name", checkout)

    def delete(self, branch: Branch) -> None:
        if branch.head or branch.name == self.common.model.checked_out_branch:
            raise ActionUnavailableError("You cannot delete the checked out branch!")
        self.common.c.popup.confirm(
            "Delete branch",
            f"Are you sure you want to delete the branch '{branch.name}'?",
            lambda: self._delete(branch, force=False),
        )

    def _delete(self, branch: Branch, force: bool) -> None:
        try:
            self.common.git.branch.delete(branch.name, force=force)
        except GitCommandError as exc:
            if force or "not fully merged" not in exc.stderr:
                raise
            self.common.c.popup.confirm(
                "Force delete branch",
                f"'{branch.name}' is not fully merged. Are you sure you want to delete it?",
                lambda: self._delete(branch, force=True),
            )
            return
        self.common.c.refresh([RefreshScope.BRANCHES])

    def rebase(self, branch: Branch) -> None:
        self.common.helpers.merge_and_rebase.rebase_onto_ref(branch.name)

    def merge(self, branch: Branch) -> None:
        self.common.helpers.merge_and_rebase.merge_ref_into_checked_out(branch.name)

    def fast_forward(self, branch: Branch) -> None:
        if not branch.is_tracking_remote():
            raise ActionUnavailableError("Cannot fast-forward a branch with no upstream")
        if branch.pullables == "0":
            return
        remote = branch.upstream_remote()
        _, _, remote_branch = branch.upstream_name.partition("/")
        self.common.c.popup.toast(f"Fast-forwarding {branch.name}...")
        if branch.head:
            self.common.git.sync.pull(fast_forward_only=True)
        else:
            self.common.git.branch.fast_forward(branch.name, remote, remote_branch)
        self.common.c.refresh(None)

    def create_reset_menu(self, branch: Branch) -> None:
        self.common.helpers.refs.create_git_reset_menu(branch.name)

    def rename(self, branch: Branch) -> None:
        def rename(new_name: str) -> None:
            new_name = new_name.strip().replace(" ", "-")
            if not new_name or new_name == branch.name:
                return
            self.common.git.branch.rename(branch.name, new_name)
            self.common.c.refresh([RefreshScope.BRANCHES])

        self.common.c.popup.prompt(f"Enter new branch name for branch {branch.name}", rename, initial=branch.name)

    def set_upstream(self, branch: Branch) -> None:
        def set_upstream(upstream: str) -> None:
            remote, sep, remote_branch = upstream.strip().partition("/")
            if not sep or not remote or not remote_branch:
                raise ActionUnavailableError(f"Invalid upstream {upstream!r}; expected <remote>/<branch>")
            if not branch.head:
                raise ActionUnavailableError("Check out the branch to set its upstream")
            self.common.git.branch.set_upstream(remote, remote_branch)
            self.common.c.refresh([RefreshScope.BRANCHES])

        suggestions = self.common.helpers.suggestions.get_remote_branch_suggestions(branch.name)
        initial = suggestions[0] if suggestions else f"origin/{branch.name}"
        self.common.c.popup.prompt("Enter upstream as '<remote>/<branchname>'", set_upstream, initial=initial)
