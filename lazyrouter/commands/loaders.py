"""Parse git plumbing output into model entities.

Each loader issues one or two read-only git calls. A probe that fails (no
repository, no upstream, no stash) yields an empty list rather than an error,
because an empty panel is the right thing to show in that case.
"""

from __future__ import annotations

import re
import time

from ..models import (
    RECENCY_HEAD,
    UNKNOWN_TRACK_COUNT,
    Branch,
    Commit,
    CommitFile,
    File,
    Remote,
    RemoteBranch,
    StashEntry,
    SubmoduleConfig,
    Tag,
)
from ..presentation.utils import unix_to_time_ago
from .git import GitCommand

_TRACK_AHEAD_RE = re.compile(r"ahead (\d+)")
_TRACK_BEHIND_RE = re.compile(r"behind (\d+)")
_BRANCH_FORMAT = "%(HEAD)%00%(refname:short)%00%(upstream:short)%00%(upstream:track)%00%(committerdate:unix)"
_COMMIT_FORMAT = "%H%x00%an%x00%at%x00%D%x00%P%x00%s"
DEFAULT_COMMIT_LIMIT = 300


def parse_upstream_track(upstream: str, track: str) -> tuple[str, str]:
    """Return ``(pushables, pullables)`` from ``%(upstream:track)`` text.

    No upstream or a ``[gone]`` upstream means the counts are unknown.
    """
    if not upstream or "gone" in track:
        return UNKNOWN_TRACK_COUNT, UNKNOWN_TRACK_COUNT
    ahead = _TRACK_AHEAD_RE.search(track)
    behind = _TRACK_BEHIND_RE.search(track)
    return (ahead.group(1) if ahead else "0", behind.group(1) if behind else "0")


def load_branches(git: GitCommand, now: int | None = None) -> list[Branch]:
    out = git.try_run("for-each-ref", "--sort=-committerdate", f"--format={_BRANCH_FORMAT}", "refs/heads")
    if not out:
        return []
    now = int(time.time()) if now is None else now
    branches: list[Branch] = []
    for line in out.splitlines():
        parts = line.split("\x00")
        if len(parts) < 5:
            continue
        head_marker, name, upstream, track, committed = parts[:5]
        pushables, pullables = parse_upstream_track(upstream, track)
        head = head_marker.strip() == "*"
        if head:
            recency = RECENCY_HEAD
        elif committed.strip().isdigit():
            recency = unix_to_time_ago(int(committed), now)
        else:
            recency = ""
        branches.append(
            Branch(
                name=name,
                recency=recency,
                pushables=pushables,
                pullables=pullables,
                upstream_name=upstream,
                head=head,
            )
        )
    # checked-out branch first, the rest keep committer-date order
    branches.sort(key=lambda branch: not branch.head)
    return branches


def _rev_list_set(git: GitCommand, *args: str) -> set[str]:
    out = git.try_run("rev-list", *args)
    if not out:
        return set()
    return {line.strip() for line in out.splitlines() if line.strip()}


def _decoration_tags(decorations: str) -> tuple[str, ...]:
    tags: list[str] = []
    for part in decorations.split(","):
        part = part.strip()
        if part.startswith("tag: "):
            tags.append(part[len("tag: ") :])
    return tuple(tags)


def load_commits(
    git: GitCommand,
    ref: str = "HEAD",
    limit: int = DEFAULT_COMMIT_LIMIT,
    main_branches: tuple[str, ...] = (),
) -> list[Commit]:
    """Load up to ``limit`` commits reachable from ``ref``.

    Status is ``unpushed`` for commits on no remote, ``merged`` for commits
    reachable from an existing main branch and ``pushed`` otherwise.
    """
    out = git.try_run("log", ref, f"--max-count={limit}", f"--format={_COMMIT_FORMAT}")
    if not out:
        return []
    unpushed = _rev_list_set(git, ref, f"--max-count={limit}", "--not", "--remotes")
    merged: set[str] = set()
    for main in main_branches:
        merged |= _rev_list_set(git, main, f"--max-count={limit}")

    commits: list[Commit] = []
    for line in out.splitlines():
        parts = line.split("\x00")
        if len(parts) < 6:
            continue
        sha, author, timestamp, decorations, parents, subject = parts[:6]
        if sha in unpushed:
            status = "unpushed"
        elif sha in merged:
            status = "merged"
        else:
            status = "pushed"
        commits.append(
            Commit(
                sha=sha,
                name=subject,
                status=status,
                tags=_decoration_tags(decorations),
                author_name=author,
                unix_timestamp=int(timestamp) if timestamp.isdigit() else 0,
                parents=tuple(parents.split()),
            )
        )
    return commits


def load_reflog_commits(git: GitCommand, limit: int = 100) -> list[Commit]:
    out = git.try_run("log", "-g", "--abbrev=40", f"--max-count={limit}", "--format=%H%x00%at%x00%gs")
    if not out:
        return []
    commits: list[Commit] = []
    for line in out.splitlines():
        parts = line.split("\x00")
        if len(parts) < 3:
            continue
        sha, timestamp, subject = parts[:3]
        commits.append(
            Commit(
                sha=sha,
                name=subject,
                status="reflog",
                unix_timestamp=int(timestamp) if timestamp.isdigit() else 0,
            )
        )
    return commits


def parse_porcelain_status(out: str) -> list[File]:
    """Parse ``git status --porcelain -z`` output.

    Rename and copy entries are followed by an extra NUL-separated field with
    the original path.
    """
    files: list[File] = []
    entries = out.split("\x00")
    idx = 0
    while idx < len(entries):
        entry = entries[idx]
        idx += 1
        if len(entry) < 4:
            continue
        status, path = entry[:2], entry[3:]
        previous = ""
        if status[0] in ("R", "C") and idx < len(entries):
            previous = entries[idx]
            idx += 1
        files.append(File(name=path, short_status=status, previous_name=previous))
    return files


def load_files(git: GitCommand) -> list[File]:
    out = git.try_run("status", "--porcelain=v1", "-z", "--untracked-files=all")
    if not out:
        return []
    submodule_paths = {submodule.path for submodule in load_submodules(git)}
    files = parse_porcelain_status(out)
    if not submodule_paths:
        return files
    return [
        File(
            name=file.name,
            short_status=file.short_status,
            previous_name=file.previous_name,
            is_submodule=file.name in submodule_paths,
        )
        for file in files
    ]


def load_stash_entries(git: GitCommand) -> list[StashEntry]:
    out = git.try_run("stash", "list", "--format=%gs")
    if not out:
        return []
    return [StashEntry(index=idx, name=line) for idx, line in enumerate(out.splitlines())]


def load_tags(git: GitCommand) -> list[Tag]:
    out = git.try_run("for-each-ref", "--sort=-creatordate", "--format=%(refname:short)%00%(contents:subject)", "refs/tags")
    if not out:
        return []
    tags: list[Tag] = []
    for line in out.splitlines():
        name, _, message = line.partition("\x00")
        if name:
            tags.append(Tag(name=name, message=message))
    return tags


def load_remotes(git: GitCommand) -> list[Remote]:
    names_out = git.try_run("remote")
    if not names_out:
        return []
    remotes = {name: Remote(name=name) for name in names_out.split() if name}

    urls_out = git.try_run("config", "--get-regexp", r"^remote\..*\.url$") or ""
    for line in urls_out.splitlines():
        key, _, url = line.partition(" ")
        remote_name = key[len("remote.") : -len(".url")]
        if remote_name in remotes and url:
            remotes[remote_name].urls.append(url)

    branches_out = git.try_run("for-each-ref", "--sort=refname", "--format=%(refname:short)", "refs/remotes") or ""
    for line in branches_out.splitlines():
        remote_name, sep, branch_name = line.strip().partition("/")
        if not sep or branch_name in ("", "HEAD") or remote_name not in remotes:
            continue
        remotes[remote_name].branches.append(RemoteBranch(name=branch_name, remote_name=remote_name))

    return sorted(remotes.values(), key=lambda remote: (remote.name != "origin", remote.name))


def parse_name_status(out: str) -> list[CommitFile]:
    """Parse NUL-separated ``--name-status -z`` output."""
    entries = [entry for entry in out.split("\x00") if entry != ""]
    files: list[CommitFile] = []
    idx = 0
    while idx < len(entries):
        status = entries[idx].strip()
        idx += 1
        if not status:
            continue
        if status[0] in ("R", "C"):
            idx += 1  # source path
        if idx >= len(entries):
            break
        path = entries[idx]
        idx += 1
        files.append(CommitFile(name=path, change_status=status[0]))
    return files


def load_commit_files(git: GitCommand, ref_name: str) -> list[CommitFile]:
    if ref_name.startswith("stash@"):
        out = git.try_run("stash", "show", "--include-untracked", "--name-status", "-z", ref_name)
    else:
        out = git.try_run("diff-tree", "--no-commit-id", "--name-status", "-r", "-z", "--root", ref_name)
    if not out:
        return []
    return parse_name_status(out)


def load_submodules(git: GitCommand) -> list[SubmoduleConfig]:
    out = git.try_run("config", "--file", ".gitmodules", "--get-regexp", r"^submodule\.")
    if not out:
        return []
    by_name: dict[str, dict[str, str]] = {}
    for line in out.splitlines():
        key, _, value = line.partition(" ")
        section, _, attribute = key.rpartition(".")
        name = section[len("submodule.") :]
        if name:
            by_name.setdefault(name, {})[attribute] = value
    return [
        SubmoduleConfig(name=name, path=values.get("path", name), url=values.get("url", ""))
        for name, values in by_name.items()
    ]
