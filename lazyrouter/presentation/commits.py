"""Display cells for commit rows.

The sha cell carries most of the state: push status colour, overridden by
cherry-pick selection and then by diff mode.
"""

from __future__ import annotations

from collections.abc import Collection

from ..ansi import colorize
from ..models import Commit
from ..ui_theme import DEFAULT_THEME, UITheme
from .utils import short_sha


def commit_status_style(status: str, theme: UITheme = DEFAULT_THEME) -> str:
    if status == "unpushed":
        return theme.red
    if status == "pushed":
        return theme.yellow
    if status == "merged":
        return theme.green
    if status in ("rebasing", "reflog"):
        return theme.blue
    return theme.default_text


def get_commit_list_display_strings(
    commits: list[Commit],
    full_description: bool,
    cherry_picked_shas: Collection[str],
    diff_name: str,
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    return [
        get_commit_display_strings(
            commit,
            full_description,
            commit.sha in cherry_picked_shas,
            commit.sha == diff_name,
            theme,
        )
        for commit in commits
    ]


def get_commit_display_strings(
    commit: Commit,
    full_description: bool,
    cherry_picked: bool,
    diffed: bool,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    """Return ``[sha, (author), (action), message]`` cells.

    The author column appears only with ``full_description``; the action
    column only for commits carrying a rebase action.
    """
    sha_style = commit_status_style(commit.status, theme)
    if cherry_picked:
        sha_style = theme.cyan
    if diffed:
        sha_style = theme.diff_highlight

    cells = [colorize(sha_style, short_sha(commit.sha))]
    if full_description:
        cells.append(colorize(theme.magenta, commit.author_name))
    if commit.action:
        cells.append(colorize(theme.blue, commit.action))

    message = commit.name
    if commit.tags:
        message = f"{colorize(theme.yellow, ' '.join(commit.tags))} {message}"
    if commit.extra_info:
        message = f"{colorize(theme.dim, commit.extra_info)} {message}"
    cells.append(message)
    return cells
