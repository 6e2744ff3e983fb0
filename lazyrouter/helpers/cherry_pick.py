"""Copy commits from any commit list and paste them onto the checked-out branch."""

from __future__ import annotations

from collections.abc import Callable

from ..commands.git import GitCommand
from ..context.contexts import ContextTree
from ..models import Commit
from ..state import CherryPicking
from .common import HelperCommon
from .merge_and_rebase import MergeAndRebaseHelper


class CherryPickHelper:
    def __init__(
        self,
        c: HelperCommon,
        git: GitCommand,
        contexts: ContextTree,
        get_data: Callable[[], CherryPicking],
        rebase_helper: MergeAndRebaseHelper,
    ) -> None:
        self.c = c
        self.git = git
        self.contexts = contexts
        self._get_data = get_data
        self.rebase_helper = rebase_helper

    def _data(self) -> CherryPicking:
        return self._get_data()

    def _reset_if_other_context(self, context_key: str) -> None:
        data = self._data()
        if data.context_key != context_key:
            data.cherry_picked_commits = []
            data.context_key = context_key

    def _ordered(self, shas: set[str], commits: list[Commit]) -> list[Commit]:
        """Selected commits in list order (newest first)."""
        return [commit for commit in commits if commit.sha in shas]

    def copy(self, commit: Commit, commits: list[Commit], context_key: str) -> None:
        """Toggle ``commit`` in the copied set."""
        self._reset_if_other_context(context_key)
        data = self._data()
        shas = data.selected_shas()
        if commit.sha in shas:
            shas.discard(commit.sha)
        else:
            shas.add(commit.sha)
        data.cherry_picked_commits = self._ordered(shas, commits)

    def copy_range(self, selected_idx: int, commits: list[Commit], context_key: str) -> None:
        """Copy from the nearest already-copied commit above ``selected_idx``
        down to it; with nothing copied above, copy just the selected commit."""
        if not commits:
            return
        self._reset_if_other_context(context_key)
        data = self._data()
        shas = data.selected_shas()
        start = selected_idx
        for idx in range(selected_idx, -1, -1):
            if commits[idx].sha in shas:
                start = idx
                break
        for commit in commits[start : selected_idx + 1]:
            shas.add(commit.sha)
        data.cherry_picked_commits = self._ordered(shas, commits)

    def paste(self) -> None:
        data = self._data()
        if not data.active():
            return
        count = len(data.cherry_picked_commits)

        def run() -> None:
            # oldest first so history is replayed in order
            shas = [commit.sha for commit in reversed(data.cherry_picked_commits)]
            self.rebase_helper.check_merge_or_rebase(lambda: self.git.rebase.cherry_pick(shas))

        self.c.popup.confirm("Cherry-pick", f"Paste {count} copied commit(s) onto this branch?", run)

    def reset(self) -> None:
        data = self._data()
        data.cherry_picked_commits = []
        data.context_key = ""
