"""Git facade error handling and plumbing-output parsers."""

from __future__ import annotations

import subprocess
import unittest
from pathlib import Path

from lazyrouter.commands import loaders
from lazyrouter.commands.git import GitCommand
from lazyrouter.errors import GitCommandError, HandlerError
from lazyrouter.models import RECENCY_HEAD


class ScriptedRunner:
    """Answer git invocations by argument prefix; unknown calls fail."""

    def __init__(self, responses: dict[tuple[str, ...], tuple[int, str]] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[list[str]] = []

    def __call__(self, cmd, **kwargs) -> subprocess.CompletedProcess:
        args = list(cmd[3:])
        self.calls.append(args)
        for prefix, (returncode, out) in self.responses.items():
            if tuple(args[: len(prefix)]) == prefix:
                stderr = out if returncode else ""
                return subprocess.CompletedProcess(cmd, returncode, out if not returncode else "", stderr)
        return subprocess.CompletedProcess(cmd, 128, "", "fatal: unexpected call")


def make_git(responses: dict[tuple[str, ...], tuple[int, str]]) -> tuple[GitCommand, ScriptedRunner]:
    runner = ScriptedRunner(responses)
    return GitCommand(Path("/repo"), runner=runner), runner


class GitCommandTests(unittest.TestCase):
    def test_run_passes_repo_path_and_returns_stdout(self) -> None:
        seen: list[list[str]] = []

        def runner(cmd, **kwargs):
            seen.append(cmd)
            return subprocess.CompletedProcess(cmd, 0, "ok\n", "")

        git = GitCommand(Path("/repo"), runner=runner)

        self.assertEqual(git.run("status"), "ok\n")
        self.assertEqual(seen, [["git", "-C", "/repo", "status"]])

    def test_reflog_action_is_passed_through_environment(self) -> None:
        envs: list[dict[str, str] | None] = []

        def runner(cmd, **kwargs):
            envs.append(kwargs.get("env"))
            return subprocess.CompletedProcess(cmd, 0, "", "")

        git = GitCommand(Path("/repo"), runner=runner)
        git.commit.reset_to_ref("abc", "hard", reflog_action="[lazyrouter undo]")
        git.branch.checkout("main")

        self.assertEqual(envs[0]["GIT_REFLOG_ACTION"], "[lazyrouter undo]")
        self.assertIsNone(envs[1])

    def test_run_raises_handler_error_with_stderr(self) -> None:
        git, _ = make_git({("checkout",): (1, "error: pathspec 'x' did not match\n")})

        with self.assertRaises(GitCommandError) as ctx:
            git.run("checkout", "x")

        self.assertIsInstance(ctx.exception, HandlerError)
        self.assertEqual(str(ctx.exception), "error: pathspec 'x' did not match")
        self.assertEqual(ctx.exception.git_args, ["checkout", "x"])
        self.assertEqual(ctx.exception.returncode, 1)

    def test_empty_stderr_falls_back_to_command_text(self) -> None:
        git, _ = make_git({("push",): (1, "")})

        with self.assertRaises(GitCommandError) as ctx:
            git.run("push")

        self.assertEqual(str(ctx.exception), "git push exited with 1")

    def test_missing_executable_becomes_git_error(self) -> None:
        def runner(cmd, **kwargs):
            raise FileNotFoundError("git")

        git = GitCommand(Path("/repo"), runner=runner)

        with self.assertRaises(GitCommandError):
            git.run("status")
        self.assertIsNone(git.try_run("status"))

    def test_try_run_returns_none_on_failure(self) -> None:
        git, _ = make_git({})

        self.assertIsNone(git.try_run("symbolic-ref", "--short", "HEAD"))
        self.assertEqual(git.branch.current_branch_name(), "")

    def test_flow_finish_rejects_non_flow_branch(self) -> None:
        git, runner = make_git({})

        with self.assertRaises(GitCommandError):
            git.flow.finish("main")
        self.assertEqual(runner.calls, [])

    def test_stash_rename_stores_under_new_message(self) -> None:
        git, runner = make_git({("rev-parse",): (0, "abc123\n"), ("stash",): (0, "")})

        git.stash.rename(2, "better name")

        self.assertEqual(runner.calls, [
            ["rev-parse", "stash@{2}"],
            ["stash", "drop", "stash@{2}"],
            ["stash", "store", "-m", "better name", "abc123"],
        ])


class BranchLoaderTests(unittest.TestCase):
    def test_head_branch_is_listed_first(self) -> None:
        out = "\n".join([
            "\x00feature/a\x00origin/feature/a\x00[ahead 2, behind 1]\x001000",
            "*\x00main\x00origin/main\x00\x00900",
            " \x00old\x00origin/old\x00[gone]\x00100",
            " \x00local\x00\x00\x00",
        ])
        git, _ = make_git({("for-each-ref",): (0, out + "\n")})

        branches = loaders.load_branches(git, now=1000 + 3 * 86400)

        self.assertEqual([branch.name for branch in branches], ["main", "feature/a", "old", "local"])
        main, feature, old, local = branches
        self.assertTrue(main.head)
        self.assertEqual(main.recency, RECENCY_HEAD)
        self.assertEqual((main.pushables, main.pullables), ("0", "0"))
        self.assertEqual((feature.pushables, feature.pullables), ("2", "1"))
        self.assertEqual(feature.recency, "3d")
        self.assertEqual((old.pushables, old.pullables), ("?", "?"))
        self.assertFalse(local.is_tracking_remote())
        self.assertEqual(local.recency, "")

    def test_failed_git_query_yields_empty_list(self) -> None:
        git, _ = make_git({})

        self.assertEqual(loaders.load_branches(git), [])
        self.assertEqual(loaders.load_commits(git), [])
        self.assertEqual(loaders.load_files(git), [])


class CommitLoaderTests(unittest.TestCase):
    def test_status_from_remotes_and_main_branches(self) -> None:
        log = "\n".join([
            "aaa\x00Ann\x00100\x00HEAD -> main, tag: v2\x00bbb\x00Third",
            "bbb\x00Bob\x0090\x00tag: v1, origin/main\x00ccc\x00Second",
            "ccc\x00Cy\x0080\x00\x00\x00First",
        ])
        git, runner = make_git({
            ("log",): (0, log),
            ("rev-list", "HEAD"): (0, "aaa\n"),
            ("rev-list", "main"): (0, "ccc\n"),
        })

        commits = loaders.load_commits(git, main_branches=("main",))

        self.assertEqual([commit.status for commit in commits], ["unpushed", "pushed", "merged"])
        self.assertEqual(commits[0].tags, ("v2",))
        self.assertEqual(commits[1].tags, ("v1",))
        self.assertEqual(commits[2].parents, ())
        self.assertEqual(commits[0].unix_timestamp, 100)

    def test_reflog_entries(self) -> None:
        git, _ = make_git({("log", "-g"): (0, "aaa\x00100\x00checkout: moving from a to b\n")})

        commits = loaders.load_reflog_commits(git)

        self.assertEqual(len(commits), 1)
        self.assertEqual(commits[0].status, "reflog")
        self.assertEqual(commits[0].name, "checkout: moving from a to b")


class StatusParserTests(unittest.TestCase):
    def test_porcelain_with_rename_and_untracked(self) -> None:
        out = " M src/a.py\x00R  new.py\x00old.py\x00?? notes.txt\x00UU both.txt\x00"

        files = loaders.parse_porcelain_status(out)

        self.assertEqual([file.name for file in files], ["src/a.py", "new.py", "notes.txt", "both.txt"])
        self.assertEqual(files[1].previous_name, "old.py")
        self.assertTrue(files[0].has_unstaged_changes)
        self.assertFalse(files[0].has_staged_changes)
        self.assertFalse(files[2].tracked)
        self.assertTrue(files[3].has_merge_conflicts)

    def test_files_are_marked_as_submodules(self) -> None:
        git, _ = make_git({
            ("status",): (0, " M vendor/lib\x00 M app.py\x00"),
            ("config", "--file"): (0, "submodule.lib.path vendor/lib\nsubmodule.lib.url https://x/lib.git\n"),
        })

        files = loaders.load_files(git)

        self.assertEqual([(file.name, file.is_submodule) for file in files], [("vendor/lib", True), ("app.py", False)])

    def test_name_status_skips_rename_source(self) -> None:
        out = "M\x00a.py\x00R100\x00old.py\x00new.py\x00D\x00gone.py\x00"

        files = loaders.parse_name_status(out)

        self.assertEqual([(file.change_status, file.name) for file in files], [("M", "a.py"), ("R", "new.py"), ("D", "gone.py")])


class MiscLoaderTests(unittest.TestCase):
    def test_stash_entries_are_indexed(self) -> None:
        git, _ = make_git({("stash", "list"): (0, "WIP on main\nOn dev: idea\n")})

        entries = loaders.load_stash_entries(git)

        self.assertEqual([entry.ref_name() for entry in entries], ["stash@{0}", "stash@{1}"])
        self.assertEqual(entries[1].name, "On dev: idea")

    def test_remotes_collect_urls_and_branches_origin_first(self) -> None:
        git, _ = make_git({
            ("remote",): (0, "fork\norigin\n"),
            ("config", "--get-regexp"): (0, "remote.origin.url git@x:o.git\nremote.fork.url git@x:f.git\n"),
            ("for-each-ref",): (0, "fork/topic\norigin/HEAD\norigin/main\norigin/feature/x\n"),
        })

        remotes = loaders.load_remotes(git)

        self.assertEqual([remote.name for remote in remotes], ["origin", "fork"])
        self.assertEqual(remotes[0].urls, ["git@x:o.git"])
        self.assertEqual([branch.name for branch in remotes[0].branches], ["main", "feature/x"])
        self.assertEqual(remotes[1].branches[0].full_name(), "fork/topic")

    def test_tags_with_and_without_message(self) -> None:
        git, _ = make_git({("for-each-ref",): (0, "v2\x00Second release\nv1\x00\n")})

        tags = loaders.load_tags(git)

        self.assertEqual([(tag.name, tag.message) for tag in tags], [("v2", "Second release"), ("v1", "")])

    def test_stash_commit_files_use_stash_show(self) -> None:
        git, runner = make_git({("stash", "show"): (0, "A\x00new.txt\x00")})

        files = loaders.load_commit_files(git, "stash@{0}")

        self.assertEqual([file.name for file in files], ["new.txt"])
        self.assertEqual(runner.calls[0][:2], ["stash", "show"])

    def test_upstream_track_parsing(self) -> None:
        self.assertEqual(loaders.parse_upstream_track("origin/x", "[ahead 3]"), ("3", "0"))
        self.assertEqual(loaders.parse_upstream_track("origin/x", "[behind 4]"), ("0", "4"))
        self.assertEqual(loaders.parse_upstream_track("", ""), ("?", "?"))
        self.assertEqual(loaders.parse_upstream_track("origin/x", "[gone]"), ("?", "?"))


if __name__ == "__main__":
    unittest.main()
