"""Push and pull of the checked-out branch."""

from __future__ import annotations

from collections.abc import Callable

from ..bindings import Binding
from ..errors import ActionUnavailableError, GitCommandError
from ..models import Branch
from .base import BaseController
from .common import ControllerCommon


class SyncController(BaseController):
    name = "sync"

    def __init__(self, common: ControllerCommon, get_suggested_remote: Callable[[], str]) -> None:
        super().__init__()
        self.common = common
        self.get_suggested_remote = get_suggested_remote

    def get_keybindings(self) -> list[Binding]:
        return [
            Binding("p", "Pull", self.handle_pull),
            Binding("P", "Push", self.handle_push),
        ]

    def _checked_out_branch(self) -> Branch:
        if self.common.model.working_tree_state != "normal":
            raise ActionUnavailableError("Can't push or pull while rebasing or merging")
        for branch in self.common.model.branches:
            if branch.head:
                return branch
        raise ActionUnavailableError("No branch is checked out")

    def _prompt_upstream(self, branch: Branch, on_confirm: Callable[[str, str], None]) -> None:
        def with_upstream(upstream: str) -> None:
            remote, sep, remote_branch = upstream.strip().partition(" ")
            if not sep:
                remote, sep, remote_branch = upstream.strip().partition("/")
            if not sep or not remote or not remote_branch:
                raise ActionUnavailableError(f"Invalid upstream {upstream!r}; expected '<remote> <branch>'")
            on_confirm(remote, remote_branch.strip())

        initial = f"{self.get_suggested_remote()} {branch.name}"
        self.common.c.popup.prompt("Enter upstream as '<remote> <branchname>'", with_upstream, initial=initial)

    def handle_pull(self) -> None:
        branch = self._checked_out_branch()
        if branch.is_tracking_remote():
            self._pull()
            return

        def set_upstream_and_pull(remote: str, remote_branch: str) -> None:
            self.common.git.branch.set_upstream(remote, remote_branch)
            self._pull()

        self._prompt_upstream(branch, set_upstream_and_pull)

    def _pull(self) -> None:
        self.common.c.popup.toast("Pulling...")
        self.common.helpers.merge_and_rebase.check_merge_or_rebase(self.common.git.sync.pull)

    def handle_push(self) -> None:
        branch = self._checked_out_branch()
        if not branch.is_tracking_remote():
            self._prompt_upstream(branch, lambda remote, name: self._push(upstream=(remote, name)))
            return
        if branch.pullables not in ("0", "?"):
            self.common.c.popup.confirm(
                "Force push",
                "Your branch has diverged from the remote branch. Press enter to force push.",
                lambda: self._push(force_with_lease=True),
            )
            return
        self._push()

    def _push(self, force_with_lease: bool = False, upstream: tuple[str, str] | None = None) -> None:
        self.common.c.popup.toast("Pushing...")
        try:
            self.common.git.sync.push(force_with_lease=force_with_lease, upstream=upstream)
        except GitCommandError as exc:
            if force_with_lease or "rejected" not in exc.stderr:
                raise
            self.common.c.popup.confirm(
                "Force push",
                "Updates were rejected. Press enter to force push.",
                lambda: self._push(force_with_lease=True, upstream=upstream),
            )
            return
        self.common.c.refresh(None)
