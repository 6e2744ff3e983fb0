"""Branch row colouring: name types, diff highlight, PR state and tracking status."""

from __future__ import annotations

import unittest

from lazyrouter.ansi import RESET, strip_ansi
from lazyrouter.models import RECENCY_HEAD, Branch, PullRequest, RemoteBranch
from lazyrouter.presentation import (
    branch_status,
    colored_branch_status,
    get_branch_display_strings,
    get_branch_list_display_strings,
    get_branch_text_style,
    get_remote_branch_list_display_strings,
)
from lazyrouter.ui_theme import DEFAULT_THEME, PLAIN_THEME

GREEN = DEFAULT_THEME.green
YELLOW = DEFAULT_THEME.yellow
RED = DEFAULT_THEME.red
CYAN = DEFAULT_THEME.cyan


def painted(style: str, text: str) -> str:
    return f"{style}{text}{RESET}"


class BranchTextStyleTests(unittest.TestCase):
    def test_prefix_picks_colour(self) -> None:
        self.assertEqual(get_branch_text_style("feature/login"), GREEN)
        self.assertEqual(get_branch_text_style("bugfix/crash"), YELLOW)
        self.assertEqual(get_branch_text_style("hotfix/urgent"), RED)
        self.assertEqual(get_branch_text_style("main"), DEFAULT_THEME.default_text)

    def test_only_first_segment_counts(self) -> None:
        self.assertEqual(get_branch_text_style("features/x"), DEFAULT_THEME.default_text)
        self.assertEqual(get_branch_text_style("team/feature/x"), DEFAULT_THEME.default_text)
        self.assertEqual(get_branch_text_style("feature"), GREEN)


class BranchDisplayStringsTests(unittest.TestCase):
    def test_untracked_feature_branch(self) -> None:
        branch = Branch(name="feature/login", recency="3d")

        cells = get_branch_display_strings(branch, False, "", False)

        self.assertEqual(cells, [painted(CYAN, "3d"), painted(GREEN, "feature/login")])

    def test_checked_out_branch_recency_is_green(self) -> None:
        branch = Branch(name="main", recency=RECENCY_HEAD, head=True)

        cells = get_branch_display_strings(branch, False, "", False)

        self.assertEqual(cells[0], painted(GREEN, RECENCY_HEAD))

    def test_diffed_branch_uses_diff_highlight(self) -> None:
        branch = Branch(name="hotfix/urgent", recency="1h")

        cells = get_branch_display_strings(branch, False, "hotfix/urgent", False)

        self.assertEqual(cells[1], painted(DEFAULT_THEME.diff_highlight, "hotfix/urgent"))

    def test_in_sync_tracking_branch_shows_green_status(self) -> None:
        branch = Branch(
            name="main",
            recency="2d",
            pushables="3",
            pullables="0",
            upstream_name="origin/main",
            in_sync=True,
        )

        cells = get_branch_display_strings(branch, False, "", False)

        self.assertEqual(cells[1], f"{painted(DEFAULT_THEME.default_text, 'main')} {painted(GREEN, '↑3↓0')}")

    def test_diverged_tracking_branch_shows_yellow_status(self) -> None:
        branch = Branch(name="main", pushables="3", pullables="1", upstream_name="origin/main")

        cells = get_branch_display_strings(branch, False, "", False)

        self.assertTrue(cells[1].endswith(painted(YELLOW, "↑3↓1")))

    def test_unknown_counts_are_shown_as_question_marks(self) -> None:
        branch = Branch(name="main", upstream_name="origin/main")

        cells = get_branch_display_strings(branch, False, "", False)

        self.assertTrue(cells[1].endswith(painted(YELLOW, "↑?↓?")))

    def test_display_name_replaces_name_but_style_follows_name(self) -> None:
        branch = Branch(name="feature/login", display_name="login (detached)")

        cells = get_branch_display_strings(branch, False, "", False)

        self.assertEqual(cells[1], painted(GREEN, "login (detached)"))

    def test_full_description_appends_upstream(self) -> None:
        branch = Branch(name="main", pushables="0", pullables="0", upstream_name="origin/main")

        cells = get_branch_display_strings(branch, True, "", False)

        self.assertEqual(len(cells), 3)
        self.assertEqual(cells[2], painted(DEFAULT_THEME.accent, "origin/main"))

    def test_remote_tracker_column_shows_pull_request_state(self) -> None:
        open_pr = Branch(name="a", pr=PullRequest(42, "OPEN"))
        closed_pr = Branch(name="b", pr=PullRequest(42, "CLOSED"))
        merged_pr = Branch(name="c", pr=PullRequest(7, "MERGED"))
        no_pr = Branch(name="d")

        rows = get_branch_list_display_strings([open_pr, closed_pr, merged_pr, no_pr], False, "", True)

        self.assertEqual([row[1] for row in rows], [
            painted(GREEN, "#42"),
            painted(RED, "#42"),
            painted(DEFAULT_THEME.magenta, "#7"),
            "",
        ])
        self.assertTrue(all(len(row) == 3 for row in rows))

    def test_formatting_does_not_modify_branch(self) -> None:
        branch = Branch(name="feature/x", recency="1d", pushables="1", pullables="2", upstream_name="origin/x")
        before = Branch(**vars(branch))

        get_branch_display_strings(branch, True, "feature/x", True)

        self.assertEqual(branch, before)

    def test_repeated_calls_give_identical_rows(self) -> None:
        branches = [
            Branch(
                name="feature/x",
                display_name="feature/x (wip)",
                recency=RECENCY_HEAD,
                pushables="3",
                pullables="1",
                upstream_name="origin/feature/x",
                head=True,
                pr=PullRequest(42, "OPEN"),
            ),
            Branch(name="hotfix/y", recency="2w", upstream_name="origin/hotfix/y", pr=PullRequest(7, "CLOSED")),
            Branch(name="main", recency="1d", pushables="0", pullables="0", upstream_name="origin/main"),
        ]

        first = get_branch_display_strings(branches[0], True, "feature/x", True)
        second = get_branch_display_strings(branches[0], True, "feature/x", True)
        self.assertEqual(first, second)
        self.assertEqual(len(first), 4)

        first_rows = get_branch_list_display_strings(branches, True, "feature/x", True)
        second_rows = get_branch_list_display_strings(branches, True, "feature/x", True)
        self.assertEqual(first_rows, second_rows)
        self.assertEqual(first_rows[0], first)

    def test_plain_theme_emits_no_escapes(self) -> None:
        branch = Branch(name="feature/x", recency="1d", pushables="1", pullables="2", upstream_name="origin/x")

        cells = get_branch_display_strings(branch, True, "", True, PLAIN_THEME)

        self.assertEqual(cells, ["1d", "", "feature/x ↑1↓2", "origin/x"])
        self.assertEqual([strip_ansi(cell) for cell in cells], cells)


class BranchStatusTests(unittest.TestCase):
    def test_status_text(self) -> None:
        self.assertEqual(branch_status(Branch(name="x", pushables="2", pullables="5")), "↑2↓5")

    def test_untracked_branch_status_is_red(self) -> None:
        branch = Branch(name="x", pushables="?", pullables="?")

        self.assertEqual(colored_branch_status(branch), painted(RED, "↑?↓?"))

    def test_in_sync_flag_overrides_counts(self) -> None:
        branch = Branch(name="x", pushables="0", pullables="0", upstream_name="origin/x", in_sync=False)

        self.assertEqual(colored_branch_status(branch), painted(YELLOW, "↑0↓0"))


class RemoteBranchPresentationTests(unittest.TestCase):
    def test_name_coloured_by_type_and_diff(self) -> None:
        branches = [
            RemoteBranch(name="feature/x", remote_name="origin"),
            RemoteBranch(name="main", remote_name="origin"),
        ]

        rows = get_remote_branch_list_display_strings(branches, "origin/main")

        self.assertEqual(rows, [
            [painted(GREEN, "feature/x")],
            [painted(DEFAULT_THEME.diff_highlight, "main")],
        ])


if __name__ == "__main__":
    unittest.main()
