"""Actions specific to the checked-out branch's commit list."""

from __future__ import annotations

from ..bindings import Binding
from ..errors import ActionUnavailableError
from ..models import Commit
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon


class LocalCommitsController(BaseController):
    name = "local_commits"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    @property
    def context(self):
        return self.common.contexts.local_commits

    def get_keybindings(self) -> list[Binding]:
        selected = self.context.get_selected_commit
        return [
            Binding("r", "Reword commit", with_selected(selected, self.reword)),
            Binding("A", "Amend commit with staged changes", with_selected(selected, self.amend_to)),
            Binding("t", "Revert commit", with_selected(selected, self.revert)),
            Binding("T", "Tag commit", with_selected(selected, self.create_tag)),
            Binding("V", "Paste commits (cherry-pick)", self.paste),
        ]

    def _require_normal_state(self) -> None:
        if self.common.model.working_tree_state != "normal":
            raise ActionUnavailableError("Can't perform this action during a rebase or merge")

    def _require_head(self, action: str) -> None:
        if self.context.get_selected_line_idx() != 0:
            raise ActionUnavailableError(f"{action} is only supported for the HEAD commit")

    def reword(self, commit: Commit) -> None:
        self._require_normal_state()
        self._require_head("Rewording")
        message = self.common.git.commit.get_commit_message(commit.sha)

        def reword(new_message: str) -> None:
            if not new_message.strip():
                raise ActionUnavailableError("Commit message cannot be empty")
            self.common.helpers.gpg.with_gpg_handling(
                lambda: self.common.git.commit.reword_head(new_message),
                "Rewording commit...",
            )

        self.common.c.popup.prompt("Reword commit", reword, initial=message)

    def amend_to(self, commit: Commit) -> None:
        self._require_normal_state()
        self._require_head("Amending")
        if not self.common.helpers.working_tree.any_staged_files():
            raise ActionUnavailableError("There are no staged files to amend")
        self.common.c.popup.confirm(
            "Amend commit",
            f"Are you sure you want to amend commit {commit.short_sha()} with your staged files?",
            lambda: self.common.helpers.gpg.with_gpg_handling(
                self.common.git.commit.amend_head,
                "Amending commit...",
            ),
        )

    def revert(self, commit: Commit) -> None:
        def revert() -> None:
            self.common.git.commit.revert(commit.sha, is_merge=commit.is_merge())
            self.common.c.refresh([RefreshScope.COMMITS, RefreshScope.FILES])

        self.common.c.popup.confirm(
            "Revert commit",
            f"Are you sure you want to revert {commit.short_sha()}?",
            revert,
        )

    def create_tag(self, commit: Commit) -> None:
        self.common.helpers.tags.open_create_tag_prompt(commit.sha)

    def paste(self) -> None:
        self._require_normal_state()
        self.common.helpers.cherry_pick.paste()
