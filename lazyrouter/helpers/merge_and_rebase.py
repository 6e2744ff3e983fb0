"""Merge, rebase and continue/abort flows with conflict reporting."""

from __future__ import annotations

from collections.abc import Callable

from ..commands.git import GitCommand
from ..context.contexts import ContextTree
from ..errors import ActionUnavailableError, GitCommandError
from ..models import MenuItem
from ..state import Model
from .common import HelperCommon
from .refs import RefsHelper

_CONFLICT_MARKERS = ("CONFLICT", "conflict", "could not apply", "fix conflicts")


class MergeAndRebaseHelper:
    def __init__(
        self,
        c: HelperCommon,
        contexts: ContextTree,
        git: GitCommand,
        model: Model,
        refs_helper: RefsHelper,
    ) -> None:
        self.c = c
        self.contexts = contexts
        self.git = git
        self.model = model
        self.refs_helper = refs_helper

    def check_merge_or_rebase(self, run: Callable[[], None]) -> None:
        """Run a merging operation; conflicts become a toast, not a failure."""
        try:
            run()
        except GitCommandError as exc:
            if not any(marker in exc.stderr for marker in _CONFLICT_MARKERS):
                raise
            self.c.refresh(None)
            self.c.popup.toast("Conflicts! Resolve them in the files panel, then continue.")
            self.c.context_stack.push(self.contexts.files)
            return
        self.c.refresh(None)

    def merge_ref_into_checked_out(self, ref: str) -> None:
        checked_out = self.model.checked_out_branch
        if ref == checked_out:
            raise ActionUnavailableError("You cannot merge a branch into itself")
        self.c.popup.confirm(
            "Merge",
            f"Are you sure you want to merge {ref} into {checked_out}?",
            lambda: self.check_merge_or_rebase(lambda: self.git.branch.merge(ref)),
        )

    def rebase_onto_ref(self, ref: str) -> None:
        checked_out = self.model.checked_out_branch
        if ref == checked_out:
            raise ActionUnavailableError("You cannot rebase a branch onto itself")
        self.c.popup.confirm(
            "Rebase",
            f"Are you sure you want to rebase {checked_out} onto {ref}?",
            lambda: self.check_merge_or_rebase(lambda: self.git.rebase.rebase_branch(ref)),
        )

    def create_rebase_options_menu(self) -> None:
        state = self.model.working_tree_state
        if state == "normal":
            raise ActionUnavailableError("Not merging or rebasing")
        actions: list[tuple[str, Callable[[str], None]]] = [
            ("continue", self.git.rebase.continue_),
            ("abort", self.git.rebase.abort),
        ]
        if state in ("rebase", "cherry-pick"):
            actions.append(("skip", self.git.rebase.skip))
        items = [
            MenuItem(
                label=name,
                key=name[0],
                on_press=lambda action=action: self.check_merge_or_rebase(lambda: action(state)),
            )
            for name, action in actions
        ]
        self.c.popup.menu(f"{state.capitalize()} options", items)
