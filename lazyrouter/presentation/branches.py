"""Display cells for local branch rows."""

from __future__ import annotations

from ..ansi import colorize
from ..models import RECENCY_HEAD, Branch
from ..ui_theme import DEFAULT_THEME, UITheme

PR_STATE_OPEN = "OPEN"
PR_STATE_CLOSED = "CLOSED"


def get_branch_list_display_strings(
    branches: list[Branch],
    full_description: bool,
    diff_name: str,
    show_remote_tracker: bool,
    theme: UITheme = DEFAULT_THEME,
) -> list[list[str]]:
    return [
        get_branch_display_strings(branch, full_description, diff_name, show_remote_tracker, theme)
        for branch in branches
    ]


def get_branch_display_strings(
    branch: Branch,
    full_description: bool,
    diff_name: str,
    show_remote_tracker: bool,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    """Return ``[recency, (pr), name, (upstream)]`` cells for one branch.

    The PR column is present only with ``show_remote_tracker`` and the
    upstream column only with ``full_description``.
    """
    display_name = branch.display_name or branch.name
    name_style = get_branch_text_style(branch.name, theme)
    if branch.name == diff_name:
        name_style = theme.diff_highlight
    colored_name = colorize(name_style, display_name)
    if branch.is_tracking_remote():
        colored_name = f"{colored_name} {colored_branch_status(branch, theme)}"

    recency_style = theme.green if branch.recency == RECENCY_HEAD else theme.cyan
    cells = [colorize(recency_style, branch.recency)]
    if show_remote_tracker:
        cells.append(_pull_request_cell(branch, theme))
    cells.append(colored_name)
    if full_description:
        cells.append(colorize(theme.accent, branch.upstream_name))
    return cells


def _pull_request_cell(branch: Branch, theme: UITheme) -> str:
    if branch.pr is None:
        return ""
    if branch.pr.state == PR_STATE_OPEN:
        style = theme.green
    elif branch.pr.state == PR_STATE_CLOSED:
        style = theme.red
    else:
        style = theme.magenta
    return colorize(style, f"#{branch.pr.number}")


def get_branch_text_style(name: str, theme: UITheme = DEFAULT_THEME) -> str:
    """Colour for a branch name, chosen by its first path segment."""
    branch_type = name.split("/", 1)[0]
    if branch_type == "feature":
        return theme.green
    if branch_type == "bugfix":
        return theme.yellow
    if branch_type == "hotfix":
        return theme.red
    return theme.default_text


def colored_branch_status(branch: Branch, theme: UITheme = DEFAULT_THEME) -> str:
    if branch.matches_upstream():
        style = theme.green
    elif not branch.is_tracking_remote():
        style = theme.red
    else:
        style = theme.yellow
    return colorize(style, branch_status(branch))


def branch_status(branch: Branch) -> str:
    return f"↑{branch.pushables}↓{branch.pullables}"
