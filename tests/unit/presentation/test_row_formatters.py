"""Commit, reflog, file, tag, remote, stash and menu row formatting."""

from __future__ import annotations

import unittest

from lazyrouter.ansi import RESET
from lazyrouter.models import Commit, CommitFile, File, MenuItem, Remote, RemoteBranch, StashEntry, SubmoduleConfig, Tag
from lazyrouter.presentation import (
    get_commit_file_list_display_strings,
    get_commit_list_display_strings,
    get_file_display_strings,
    get_menu_item_list_display_strings,
    get_reflog_commit_list_display_strings,
    get_remote_list_display_strings,
    get_stash_entry_list_display_strings,
    get_submodule_list_display_strings,
    get_tag_list_display_strings,
    unix_to_time_ago,
)
from lazyrouter.ui_theme import DEFAULT_THEME as T
from lazyrouter.ui_theme import PLAIN_THEME

SHA = "0123456789abcdef0123456789abcdef01234567"


def painted(style: str, text: str) -> str:
    return f"{style}{text}{RESET}"


class CommitFormatterTests(unittest.TestCase):
    def test_status_colours_the_sha(self) -> None:
        commits = [
            Commit(sha=SHA, name="a", status="unpushed"),
            Commit(sha=SHA, name="b", status="pushed"),
            Commit(sha=SHA, name="c", status="merged"),
            Commit(sha=SHA, name="d", status="rebasing"),
        ]

        rows = get_commit_list_display_strings(commits, False, set(), "")

        self.assertEqual([row[0] for row in rows], [
            painted(T.red, "01234567"),
            painted(T.yellow, "01234567"),
            painted(T.green, "01234567"),
            painted(T.blue, "01234567"),
        ])

    def test_diff_highlight_beats_cherry_pick(self) -> None:
        commit = Commit(sha=SHA, name="msg", status="pushed")

        picked = get_commit_list_display_strings([commit], False, {SHA}, "")[0]
        diffed = get_commit_list_display_strings([commit], False, {SHA}, SHA)[0]

        self.assertEqual(picked[0], painted(T.cyan, "01234567"))
        self.assertEqual(diffed[0], painted(T.diff_highlight, "01234567"))

    def test_full_description_action_and_tags(self) -> None:
        commit = Commit(sha=SHA, name="Fix bug", action="pick", tags=("v1.0", "stable"), author_name="Sam")

        row = get_commit_list_display_strings([commit], True, set(), "")[0]

        self.assertEqual(row[1:], [
            painted(T.magenta, "Sam"),
            painted(T.blue, "pick"),
            f"{painted(T.yellow, 'v1.0 stable')} Fix bug",
        ])

    def test_plain_commit_row(self) -> None:
        row = get_commit_list_display_strings([Commit(sha=SHA, name="msg")], False, set(), "", PLAIN_THEME)[0]

        self.assertEqual(row, ["01234567", "msg"])


class ReflogFormatterTests(unittest.TestCase):
    def test_reflog_rows_use_given_clock(self) -> None:
        commit = Commit(sha=SHA, name="checkout: moving from a to b", status="reflog", unix_timestamp=1000)

        row = get_reflog_commit_list_display_strings([commit], True, set(), "", now=1000 + 2 * 3600)[0]

        self.assertEqual(row, [painted(T.blue, "01234567"), painted(T.dim, "2h"), "checkout: moving from a to b"])

    def test_reflog_without_full_description(self) -> None:
        commit = Commit(sha=SHA, name="commit: x", status="reflog")

        rows = get_reflog_commit_list_display_strings([commit], False, set(), SHA, now=0)

        self.assertEqual(rows, [[painted(T.diff_highlight, "01234567"), "commit: x"]])


class FileFormatterTests(unittest.TestCase):
    def test_staged_and_unstaged_halves(self) -> None:
        cells = get_file_display_strings(File(name="a.py", short_status="MM"), False)

        self.assertEqual(cells, [painted(T.green, "M") + painted(T.red, "M"), painted(T.red, "a.py")])

    def test_fully_staged_file_is_green(self) -> None:
        cells = get_file_display_strings(File(name="a.py", short_status="A "), False)

        self.assertEqual(cells[1], painted(T.green, "a.py"))

    def test_untracked_and_conflicted_status_is_red(self) -> None:
        untracked = get_file_display_strings(File(name="new.txt", short_status="??"), False)
        conflicted = get_file_display_strings(File(name="both.txt", short_status="UU"), False)

        self.assertEqual(untracked[0], painted(T.red, "??"))
        self.assertEqual(conflicted, [painted(T.red, "UU"), painted(T.red, "both.txt")])

    def test_rename_shows_previous_name(self) -> None:
        cells = get_file_display_strings(File(name="new.py", short_status="R ", previous_name="old.py"), True, PLAIN_THEME)

        self.assertEqual(cells, ["R ", "old.py → new.py"])


class SmallFormatterTests(unittest.TestCase):
    def test_tags(self) -> None:
        rows = get_tag_list_display_strings([Tag("v1", "release one"), Tag("v2")], "v2")

        self.assertEqual(rows, [
            [painted(T.default_text, "v1"), painted(T.dim, "release one")],
            [painted(T.diff_highlight, "v2"), ""],
        ])

    def test_remotes_count_branches(self) -> None:
        origin = Remote("origin", branches=[RemoteBranch("main", "origin")])
        fork = Remote("fork", branches=[RemoteBranch("a", "fork"), RemoteBranch("b", "fork")])

        rows = get_remote_list_display_strings([origin, fork], "", PLAIN_THEME)

        self.assertEqual(rows, [["origin", "1 branch"], ["fork", "2 branches"]])

    def test_stash_entries(self) -> None:
        rows = get_stash_entry_list_display_strings([StashEntry(0, "WIP on main"), StashEntry(1, "old")], "stash@{1}")

        self.assertEqual(rows, [
            [painted(T.default_text, "WIP on main")],
            [painted(T.diff_highlight, "old")],
        ])

    def test_commit_files(self) -> None:
        rows = get_commit_file_list_display_strings([CommitFile("a", "A"), CommitFile("b", "D"), CommitFile("c", "M")])

        self.assertEqual([row[0] for row in rows], [painted(T.green, "A"), painted(T.red, "D"), painted(T.yellow, "M")])

    def test_submodule_path_shown_when_different(self) -> None:
        rows = get_submodule_list_display_strings(
            [SubmoduleConfig("lib", "lib"), SubmoduleConfig("ui", "vendor/ui")],
            PLAIN_THEME,
        )

        self.assertEqual(rows, [["lib"], ["ui", "vendor/ui"]])

    def test_menu_key_column_only_when_some_item_has_key(self) -> None:
        keyed = get_menu_item_list_display_strings(
            [MenuItem(label="Soft reset", key="s"), MenuItem(label="Options", opens_menu=True)],
            PLAIN_THEME,
        )
        unkeyed = get_menu_item_list_display_strings([MenuItem(label="Only")], PLAIN_THEME)

        self.assertEqual(keyed, [["s", "Soft reset"], ["", "Options..."]])
        self.assertEqual(unkeyed, [["Only"]])


class TimeAgoTests(unittest.TestCase):
    def test_largest_whole_unit(self) -> None:
        self.assertEqual(unix_to_time_ago(0, 30), "30s")
        self.assertEqual(unix_to_time_ago(0, 90), "1m")
        self.assertEqual(unix_to_time_ago(0, 3 * 86400), "3d")
        self.assertEqual(unix_to_time_ago(0, 15 * 86400), "2w")
        self.assertEqual(unix_to_time_ago(0, 400 * 86400), "1y")

    def test_future_timestamp_counts_as_now(self) -> None:
        self.assertEqual(unix_to_time_ago(100, 50), "0s")


if __name__ == "__main__":
    unittest.main()
