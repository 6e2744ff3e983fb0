from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .models import (
    Branch,
    Commit,
    CommitFile,
    File,
    MenuItem,
    Remote,
    RemoteBranch,
    StashEntry,
    SubmoduleConfig,
    Tag,
)


@dataclass
class Model:
    """Loaded repository data backing every list context."""

    files: list[File] = field(default_factory=list)
    branches: list[Branch] = field(default_factory=list)
    remotes: list[Remote] = field(default_factory=list)
    remote_branches: list[RemoteBranch] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    commits: list[Commit] = field(default_factory=list)
    reflog_commits: list[Commit] = field(default_factory=list)
    sub_commits: list[Commit] = field(default_factory=list)
    stash_entries: list[StashEntry] = field(default_factory=list)
    commit_files: list[CommitFile] = field(default_factory=list)
    submodules: list[SubmoduleConfig] = field(default_factory=list)
    menu_items: list[MenuItem] = field(default_factory=list)
    menu_title: str = ""
    checked_out_branch: str = ""
    working_tree_state: str = "normal"
    bisect_in_progress: bool = False


@dataclass
class CherryPicking:
    """Commits copied for a later paste, remembered with their source context."""

    cherry_picked_commits: list[Commit] = field(default_factory=list)
    context_key: str = ""

    def active(self) -> bool:
        return bool(self.cherry_picked_commits)

    def selected_shas(self) -> set[str]:
        return {commit.sha for commit in self.cherry_picked_commits}


@dataclass
class Diffing:
    ref: str = ""

    def active(self) -> bool:
        return self.ref != ""


@dataclass
class Modes:
    cherry_picking: CherryPicking = field(default_factory=CherryPicking)
    diffing: Diffing = field(default_factory=Diffing)


@dataclass
class Popup:
    """Pending confirmation or prompt waiting for the user's answer."""

    kind: str
    title: str
    body: str = ""
    initial: str = ""
    on_confirm: Callable[..., None] | None = None


@dataclass
class GuiState:
    status_message: str = ""
    error_log: list[str] = field(default_factory=list)
    pending_popup: Popup | None = None
    saved_commit_message: str = ""
    commit_message_text: str = ""
    show_remote_tracker: bool = False
    full_description: bool = False
    repo_path_stack: list[str] = field(default_factory=list)
    merge_conflict_path: str = ""
    should_quit: bool = False
