"""Reload model lists from git after an operation changes the repository."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from .commands import loaders
from .commands.git import GitCommand
from .config import UserConfig
from .state import Model

logger = logging.getLogger(__name__)


class RefreshScope(str, Enum):
    FILES = "files"
    BRANCHES = "branches"
    COMMITS = "commits"
    REFLOG = "reflog"
    STASH = "stash"
    TAGS = "tags"
    REMOTES = "remotes"
    SUBMODULES = "submodules"
    STATUS = "status"


ALL_SCOPES: tuple[RefreshScope, ...] = tuple(RefreshScope)


class Refresher:
    def __init__(self, git: GitCommand, model: Model, user_config: UserConfig) -> None:
        self.git = git
        self.model = model
        self.user_config = user_config

    def refresh(self, scopes: Iterable[RefreshScope] | None = None) -> None:
        """Reload the requested scopes; ``None`` reloads everything."""
        wanted = set(ALL_SCOPES if scopes is None else scopes)
        logger.debug("refresh %s", sorted(scope.value for scope in wanted))
        if RefreshScope.STATUS in wanted:
            self._refresh_status()
        if RefreshScope.FILES in wanted:
            self.model.files = loaders.load_files(self.git)
        if RefreshScope.BRANCHES in wanted:
            self.model.branches = loaders.load_branches(self.git)
        if RefreshScope.COMMITS in wanted:
            self.model.commits = loaders.load_commits(
                self.git,
                main_branches=self._existing_main_branches(),
            )
        if RefreshScope.REFLOG in wanted:
            self.model.reflog_commits = loaders.load_reflog_commits(self.git)
        if RefreshScope.STASH in wanted:
            self.model.stash_entries = loaders.load_stash_entries(self.git)
        if RefreshScope.TAGS in wanted:
            self.model.tags = loaders.load_tags(self.git)
        if RefreshScope.REMOTES in wanted:
            self.model.remotes = loaders.load_remotes(self.git)
        if RefreshScope.SUBMODULES in wanted:
            self.model.submodules = loaders.load_submodules(self.git)

    def _existing_main_branches(self) -> tuple[str, ...]:
        names = {branch.name for branch in self.model.branches}
        return tuple(name for name in self.user_config.main_branches if name in names)

    def _refresh_status(self) -> None:
        self.model.checked_out_branch = self.git.branch.current_branch_name()
        self.model.working_tree_state = self._working_tree_state()
        self.model.bisect_in_progress = self.git.bisect.in_progress()

    def _working_tree_state(self) -> str:
        git_dir_out = self.git.try_run("rev-parse", "--absolute-git-dir")
        if not git_dir_out:
            return "normal"
        git_dir = Path(git_dir_out.strip())
        if (git_dir / "rebase-merge").exists() or (git_dir / "rebase-apply").exists():
            return "rebase"
        if (git_dir / "MERGE_HEAD").exists():
            return "merge"
        if (git_dir / "CHERRY_PICK_HEAD").exists():
            return "cherry-pick"
        return "normal"
