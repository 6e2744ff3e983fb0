from __future__ import annotations

import time
from collections.abc import Collection

from ..ansi import colorize
from ..models import Commit
from ..ui_theme import DEFAULT_THEME, UITheme
from .utils import short_sha, unix_to_time_ago


def get_reflog_commit_list_display_strings(
    commits: list[Commit],
    full_description: bool,
    cherry_picked_shas: Collection[str],
    diff_name: str,
    now: int | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    """``now`` defaults to the current time; pass it for reproducible rows."""
    now = int(time.time()) if now is None else now
    return [
        get_reflog_commit_display_strings(
            commit,
            full_description,
            commit.sha in cherry_picked_shas,
            commit.sha == diff_name,
            now,
            theme,
        )
        for commit in commits
    ]


def get_reflog_commit_display_strings(
    commit: Commit,
    full_description: bool,
    cherry_picked: bool,
    diffed: bool,
    now: int,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    sha_style = theme.blue
    if cherry_picked:
        sha_style = theme.cyan
    if diffed:
        sha_style = theme.diff_highlight

    cells = [colorize(sha_style, short_sha(commit.sha))]
    if full_description:
        cells.append(colorize(theme.dim, unix_to_time_ago(commit.unix_timestamp, now)))
    cells.append(commit.name)
    return cells
