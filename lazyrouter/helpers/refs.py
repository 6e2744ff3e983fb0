"""Checkout, reset and branch-creation flows shared by several controllers."""

from __future__ import annotations

from ..commands.git import GitCommand
from ..context.contexts import ContextTree
from ..errors import GitCommandError
from ..models import MenuItem
from ..state import Model
from .common import HelperCommon

RESET_STRENGTHS: tuple[str, ...] = ("soft", "mixed", "hard")
_LOCAL_CHANGES_MARKERS = (
    "Please commit your changes or stash them",
    "Please move or remove them before you switch branches",
)


class RefsHelper:
    def __init__(self, c: HelperCommon, git: GitCommand, contexts: ContextTree, model: Model) -> None:
        self.c = c
        self.git = git
        self.contexts = contexts
        self.model = model

    def checkout_ref(self, ref: str, reflog_action: str | None = None) -> None:
        """Check out ``ref``; offer an auto-stash when local changes block it."""
        try:
            self.git.branch.checkout(ref, reflog_action=reflog_action)
        except GitCommandError as exc:
            if not any(marker in exc.stderr for marker in _LOCAL_CHANGES_MARKERS):
                raise
            self.c.popup.confirm(
                "Auto-stash changes",
                f"You have local changes that block checking out {ref}. Stash them, check out and re-apply?",
                lambda: self._checkout_with_autostash(ref, reflog_action),
            )
            return
        self._after_checkout()

    def _checkout_with_autostash(self, ref: str, reflog_action: str | None = None) -> None:
        self.git.stash.save(f"Auto-stashing changes for checking out {ref}")
        self.git.branch.checkout(ref, reflog_action=reflog_action)
        self._after_checkout()
        self.git.stash.pop(0)
        self.c.refresh(None)

    def _after_checkout(self) -> None:
        self.contexts.branches.set_selected_line_idx(0)
        self.contexts.local_commits.set_selected_line_idx(0)
        self.contexts.reflog_commits.set_selected_line_idx(0)
        self.c.refresh(None)

    def reset_to_ref(self, ref: str, strength: str, reflog_action: str | None = None) -> None:
        self.git.commit.reset_to_ref(ref, strength, reflog_action)
        self.contexts.local_commits.set_selected_line_idx(0)
        self.contexts.reflog_commits.set_selected_line_idx(0)
        self.c.refresh(None)

    def create_git_reset_menu(self, ref: str) -> None:
        items = [
            MenuItem(
                label=f"{strength} reset",
                display_strings=[f"{strength} reset", f"reset --{strength} {ref}"],
                on_press=lambda strength=strength: self.reset_to_ref(ref, strength),
                key=strength[0],
            )
            for strength in RESET_STRENGTHS
        ]
        self.c.popup.menu(f"Reset to {ref}", items)

    def new_branch(self, from_ref: str, from_description: str, suggested_name: str = "") -> None:
        def create(name: str) -> None:
            sanitized = name.strip().replace(" ", "-")
            if not sanitized:
                return
            self.git.branch.new(sanitized, from_ref)
            self.contexts.branches.set_selected_line_idx(0)
            self.c.context_stack.push(self.contexts.branches)
            self.c.refresh(None)

        self.c.popup.prompt(f"New branch name (branch is off of {from_description})", create, initial=suggested_name)
