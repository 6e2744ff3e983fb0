"""Thin facade over the ``git`` executable.

Every mutating call goes through :meth:`GitCommand.run`, which raises
:class:`~lazyrouter.errors.GitCommandError` on a non-zero exit so handlers can
let it propagate to the dispatcher. Read-only probes that may legitimately
fail (no upstream, not a repo) use :meth:`GitCommand.try_run` instead.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Callable
from pathlib import Path

from ..errors import GitCommandError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60.0

Runner = Callable[..., subprocess.CompletedProcess]


class GitCommand:
    def __init__(
        self,
        repo_path: Path,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        runner: Runner = subprocess.run,
    ) -> None:
        self.repo_path = repo_path
        self.timeout_seconds = timeout_seconds
        self._runner = runner
        self.branch = BranchCommands(self)
        self.commit = CommitCommands(self)
        self.rebase = RebaseCommands(self)
        self.stash = StashCommands(self)
        self.tag = TagCommands(self)
        self.remote = RemoteCommands(self)
        self.sync = SyncCommands(self)
        self.working_tree = WorkingTreeCommands(self)
        self.bisect = BisectCommands(self)
        self.submodule = SubmoduleCommands(self)
        self.flow = FlowCommands(self)
        self.config = ConfigCommands(self)

    def _exec(self, args: list[str], env: dict[str, str] | None = None) -> subprocess.CompletedProcess:
        try:
            return self._runner(
                ["git", "-C", str(self.repo_path), *args],
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=self.timeout_seconds,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise GitCommandError(args, -1, str(exc)) from exc

    def run(self, *args: str, reflog_action: str | None = None) -> str:
        """Run ``git args`` and return stdout; raise on failure.

        ``reflog_action`` replaces the command name at the start of any reflog
        entry the call writes (``GIT_REFLOG_ACTION``).
        """
        arg_list = list(args)
        logger.info("git %s", " ".join(arg_list))
        env = None
        if reflog_action is not None:
            env = {**os.environ, "GIT_REFLOG_ACTION": reflog_action}
        proc = self._exec(arg_list, env)
        if proc.returncode != 0:
            raise GitCommandError(arg_list, proc.returncode, proc.stderr or "")
        return proc.stdout or ""

    def try_run(self, *args: str) -> str | None:
        """Run a read-only probe; ``None`` when git reports failure."""
        try:
            proc = self._exec(list(args))
        except GitCommandError:
            return None
        if proc.returncode != 0:
            return None
        return proc.stdout or ""


class _Commands:
    def __init__(self, git: GitCommand) -> None:
        self.git = git


class BranchCommands(_Commands):
    def current_branch_name(self) -> str:
        out = self.git.try_run("symbolic-ref", "--short", "HEAD")
        return out.strip() if out else ""

    def checkout(self, ref: str, force: bool = False, reflog_action: str | None = None) -> None:
        args = ["checkout", ref]
        if force:
            args.insert(1, "--force")
        self.git.run(*args, reflog_action=reflog_action)

    def new(self, name: str, base: str) -> None:
        self.git.run("checkout", "-b", name, base)

    def delete(self, name: str, force: bool = False) -> None:
        self.git.run("branch", "-D" if force else "-d", name)

    def rename(self, old_name: str, new_name: str) -> None:
        self.git.run("branch", "--move", old_name, new_name)

    def merge(self, ref: str) -> None:
        self.git.run("merge", "--no-edit", ref)

    def set_upstream(self, remote: str, branch: str) -> None:
        self.git.run("branch", f"--set-upstream-to={remote}/{branch}")

    def fast_forward(self, branch: str, remote: str, remote_branch: str) -> None:
        self.git.run("fetch", remote, f"{remote_branch}:{branch}")


class CommitCommands(_Commands):
    def commit(self, message: str, *, no_verify: bool = False) -> None:
        args = ["commit", "-m", message]
        if no_verify:
            args.append("--no-verify")
        self.git.run(*args)

    def amend_head(self) -> None:
        self.git.run("commit", "--amend", "--no-edit", "--allow-empty")

    def reword_head(self, message: str) -> None:
        self.git.run("commit", "--amend", "--only", "--allow-empty", "-m", message)

    def reset_to_ref(self, ref: str, strength: str, reflog_action: str | None = None) -> None:
        self.git.run("reset", f"--{strength}", ref, reflog_action=reflog_action)

    def revert(self, sha: str, *, is_merge: bool = False) -> None:
        args = ["revert", "--no-edit", sha]
        if is_merge:
            args[1:1] = ["-m", "1"]
        self.git.run(*args)

    def get_commit_message(self, sha: str) -> str:
        return self.git.run("log", "-1", "--format=%B", sha).strip()


class RebaseCommands(_Commands):
    def rebase_branch(self, ref: str) -> None:
        self.git.run("rebase", ref)

    def cherry_pick(self, shas: list[str]) -> None:
        self.git.run("cherry-pick", *shas)

    def continue_(self, working_tree_state: str) -> None:
        self.git.run("-c", "core.editor=true", working_tree_state, "--continue")

    def abort(self, working_tree_state: str) -> None:
        self.git.run(working_tree_state, "--abort")

    def skip(self, working_tree_state: str) -> None:
        self.git.run(working_tree_state, "--skip")


class StashCommands(_Commands):
    def save(self, message: str) -> None:
        args = ["stash", "push"]
        if message:
            args += ["-m", message]
        self.git.run(*args)

    def apply(self, index: int) -> None:
        self.git.run("stash", "apply", f"stash@{{{index}}}")

    def pop(self, index: int) -> None:
        self.git.run("stash", "pop", f"stash@{{{index}}}")

    def drop(self, index: int) -> None:
        self.git.run("stash", "drop", f"stash@{{{index}}}")

    def rename(self, index: int, message: str) -> None:
        sha = self.git.run("rev-parse", f"stash@{{{index}}}").strip()
        self.drop(index)
        self.git.run("stash", "store", "-m", message, sha)


class TagCommands(_Commands):
    def create(self, name: str, ref: str, message: str = "") -> None:
        if message:
            self.git.run("tag", name, ref, "-m", message)
        else:
            self.git.run("tag", name, ref)

    def delete(self, name: str) -> None:
        self.git.run("tag", "-d", name)

    def push(self, remote: str, name: str) -> None:
        self.git.run("push", remote, "tag", name)


class RemoteCommands(_Commands):
    def add(self, name: str, url: str) -> None:
        self.git.run("remote", "add", name, url)

    def remove(self, name: str) -> None:
        self.git.run("remote", "remove", name)

    def rename(self, old_name: str, new_name: str) -> None:
        self.git.run("remote", "rename", old_name, new_name)

    def update_url(self, name: str, url: str) -> None:
        self.git.run("remote", "set-url", name, url)

    def delete_remote_branch(self, remote: str, branch: str) -> None:
        self.git.run("push", remote, "--delete", branch)

    def fetch(self, remote: str) -> None:
        self.git.run("fetch", remote)


class SyncCommands(_Commands):
    def push(self, *, force_with_lease: bool = False, upstream: tuple[str, str] | None = None) -> None:
        args = ["push"]
        if force_with_lease:
            args.append("--force-with-lease")
        if upstream is not None:
            args += ["--set-upstream", upstream[0], upstream[1]]
        self.git.run(*args)

    def pull(self, *, fast_forward_only: bool = False) -> None:
        args = ["pull", "--no-edit"]
        if fast_forward_only:
            args.append("--ff-only")
        self.git.run(*args)

    def fetch_all(self) -> None:
        self.git.run("fetch", "--all")


class WorkingTreeCommands(_Commands):
    def stage_file(self, path: str) -> None:
        self.git.run("add", "--", path)

    def unstage_file(self, path: str, *, tracked: bool) -> None:
        if tracked:
            self.git.run("reset", "HEAD", "--", path)
        else:
            self.git.run("rm", "--cached", "--force", "--", path)

    def stage_all(self) -> None:
        self.git.run("add", "-A")

    def unstage_all(self) -> None:
        self.git.run("reset")

    def discard_all_file_changes(self, path: str, *, tracked: bool) -> None:
        if tracked:
            self.git.run("checkout", "HEAD", "--", path)
        else:
            self.git.run("clean", "--force", "--", path)

    def discard_unstaged_file_changes(self, path: str) -> None:
        self.git.run("checkout", "--", path)

    def ignore(self, path: str) -> None:
        gitignore = self.git.repo_path / ".gitignore"
        with gitignore.open("a", encoding="utf-8") as handle:
            handle.write(f"\n{path}\n")

    def reset_hard(self, ref: str = "HEAD") -> None:
        self.git.run("reset", "--hard", ref)

    def checkout_commit_file(self, sha: str, path: str) -> None:
        self.git.run("checkout", sha, "--", path)


class BisectCommands(_Commands):
    def start(self) -> None:
        self.git.run("bisect", "start")

    def mark(self, ref: str, term: str) -> None:
        self.git.run("bisect", term, ref)

    def skip(self, ref: str) -> None:
        self.git.run("bisect", "skip", ref)

    def reset(self) -> None:
        self.git.run("bisect", "reset")

    def in_progress(self) -> bool:
        return self.git.try_run("bisect", "log") is not None


class SubmoduleCommands(_Commands):
    def init(self, path: str) -> None:
        self.git.run("submodule", "init", "--", path)

    def update(self, path: str) -> None:
        self.git.run("submodule", "update", "--init", "--", path)

    def update_all(self) -> None:
        self.git.run("submodule", "update", "--init", "--recursive")


class FlowCommands(_Commands):
    def finish(self, branch_name: str) -> None:
        branch_type, sep, suffix = branch_name.partition("/")
        if not sep or not suffix:
            raise GitCommandError(["flow"], -1, f"{branch_name} is not a git-flow branch")
        self.git.run("flow", branch_type, "finish", suffix)

    def start(self, branch_type: str, name: str) -> None:
        self.git.run("flow", branch_type, "start", name)


class ConfigCommands(_Commands):
    def get(self, key: str) -> str:
        out = self.git.try_run("config", "--get", key)
        return out.strip() if out else ""

    def get_bool(self, key: str) -> bool:
        return self.get(key).lower() in ("true", "yes", "on", "1")
