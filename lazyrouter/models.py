"""Domain entities consumed by controllers and presentation formatters.

These are plain records filled in by the git loaders. Controllers read them to
decide what to act on; formatters read them to build display cells. Nothing in
this module talks to git.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

RECENCY_HEAD = "  *"
UNKNOWN_TRACK_COUNT = "?"


@dataclass(frozen=True)
class PullRequest:
    number: int
    state: str
    url: str = ""


@dataclass
class Branch:
    """Local branch with upstream tracking information.

    ``pushables``/``pullables`` are strings so the loader can report ``"?"``
    when the ahead/behind counts are unknown. ``in_sync`` overrides the
    count-derived comparison when the loader knows the answer directly.
    """

    name: str
    display_name: str = ""
    recency: str = ""
    pushables: str = UNKNOWN_TRACK_COUNT
    pullables: str = UNKNOWN_TRACK_COUNT
    upstream_name: str = ""
    head: bool = False
    pr: PullRequest | None = None
    in_sync: bool | None = None

    def ref_name(self) -> str:
        return self.name

    def description(self) -> str:
        return self.ref_name()

    def is_tracking_remote(self) -> bool:
        return self.upstream_name != ""

    def matches_upstream(self) -> bool:
        if self.in_sync is not None:
            return self.in_sync
        return self.pushables == "0" and self.pullables == "0"

    def upstream_remote(self) -> str:
        """Return the remote part of ``upstream_name`` (``origin/x`` -> ``origin``)."""
        remote, _, _ = self.upstream_name.partition("/")
        return remote


@dataclass(frozen=True)
class RemoteBranch:
    name: str
    remote_name: str

    def full_name(self) -> str:
        return f"{self.remote_name}/{self.name}"

    def ref_name(self) -> str:
        return self.full_name()

    def description(self) -> str:
        return self.ref_name()


@dataclass
class Remote:
    name: str
    urls: list[str] = field(default_factory=list)
    branches: list[RemoteBranch] = field(default_factory=list)

    def ref_name(self) -> str:
        return self.name

    def description(self) -> str:
        return self.name


@dataclass(frozen=True)
class Tag:
    name: str
    message: str = ""

    def ref_name(self) -> str:
        return self.name

    def description(self) -> str:
        return self.message or self.name


@dataclass(frozen=True)
class Commit:
    """One commit row; ``status`` is ``unpushed``, ``pushed``, ``merged``,
    ``rebasing`` or ``reflog``."""

    sha: str
    name: str
    status: str = "unpushed"
    action: str = ""
    tags: tuple[str, ...] = ()
    extra_info: str = ""
    author_name: str = ""
    unix_timestamp: int = 0
    parents: tuple[str, ...] = ()

    def short_sha(self) -> str:
        return self.sha[:8]

    def ref_name(self) -> str:
        return self.sha

    def description(self) -> str:
        return f"{self.short_sha()} {self.name}"

    def is_merge(self) -> bool:
        return len(self.parents) > 1


@dataclass(frozen=True)
class StashEntry:
    index: int
    name: str

    def ref_name(self) -> str:
        return f"stash@{{{self.index}}}"

    def description(self) -> str:
        return f"{self.ref_name()}: {self.name}"


@dataclass(frozen=True)
class File:
    """Working-tree file with porcelain status ``short_status`` (``XY``)."""

    name: str
    short_status: str = "  "
    previous_name: str = ""
    is_submodule: bool = False

    @property
    def has_staged_changes(self) -> bool:
        return self.short_status[:1] not in (" ", "?", "")

    @property
    def has_unstaged_changes(self) -> bool:
        return self.short_status[1:2] not in (" ", "")

    @property
    def tracked(self) -> bool:
        return self.short_status != "??"

    @property
    def added(self) -> bool:
        return not self.tracked or self.short_status[:1] == "A"

    @property
    def has_merge_conflicts(self) -> bool:
        return self.short_status in ("DD", "AA", "UU", "AU", "UA", "UD", "DU")


@dataclass(frozen=True)
class CommitFile:
    name: str
    change_status: str

    def description(self) -> str:
        return self.name


@dataclass(frozen=True)
class SubmoduleConfig:
    name: str
    path: str
    url: str = ""

    def ref_name(self) -> str:
        return self.name

    def description(self) -> str:
        return self.path


@dataclass
class MenuItem:
    """Row of a popup menu; ``display_strings`` wins over ``label`` when set."""

    label: str = ""
    on_press: Callable[[], None] | None = None
    display_strings: list[str] = field(default_factory=list)
    key: str = ""
    opens_menu: bool = False


__all__ = [
    "RECENCY_HEAD",
    "UNKNOWN_TRACK_COUNT",
    "PullRequest",
    "Branch",
    "RemoteBranch",
    "Remote",
    "Tag",
    "Commit",
    "StashEntry",
    "File",
    "CommitFile",
    "SubmoduleConfig",
    "MenuItem",
]
