"""Actions available on any list of commits: copy, browse, checkout, reset,
cherry-pick selection."""

from __future__ import annotations

from ..bindings import Binding
from ..context.capabilities import ContainsCommits
from ..keys import CTRL_R, SPACE
from ..models import Commit, MenuItem
from .base import BaseController, with_selected
from .common import ControllerCommon


class BasicCommitsController(BaseController):
    name = "basic_commits"

    def __init__(self, common: ControllerCommon, context: ContainsCommits) -> None:
        super().__init__()
        self.common = common
        self.context = context

    def get_keybindings(self) -> list[Binding]:
        selected = self.context.get_selected_commit
        return [
            Binding("y", "Copy commit attribute to clipboard", with_selected(selected, self.copy_commit_attribute), opens_menu=True),
            Binding("o", "Open commit in browser", with_selected(selected, self.open_in_browser)),
            Binding(SPACE, "Checkout commit", with_selected(selected, self.checkout)),
            Binding("g", "View reset options", with_selected(selected, self.create_reset_menu), opens_menu=True),
            Binding("c", "Copy commit (cherry-pick)", with_selected(selected, self.copy)),
            Binding("C", "Copy commit range (cherry-pick)", with_selected(selected, self.copy_range)),
            Binding(CTRL_R, "Reset cherry-picked (copied) commits selection", self.reset_cherry_pick),
        ]

    def copy_commit_attribute(self, commit: Commit) -> None:
        os = self.common.os
        host = self.common.helpers.host
        items = [
            MenuItem(label="Commit SHA", key="s", on_press=lambda: os.copy_to_clipboard(commit.sha)),
            MenuItem(label="Commit subject", key="m", on_press=lambda: os.copy_to_clipboard(commit.name)),
            MenuItem(label="Commit URL", key="u", on_press=lambda: os.copy_to_clipboard(host.get_commit_url(commit.sha))),
            MenuItem(label="Commit author", key="a", on_press=lambda: os.copy_to_clipboard(commit.author_name)),
        ]
        self.common.c.popup.menu("Copy to clipboard", items)

    def open_in_browser(self, commit: Commit) -> None:
        self.common.os.open_link(self.common.helpers.host.get_commit_url(commit.sha))

    def checkout(self, commit: Commit) -> None:
        self.common.c.popup.confirm(
            "Checkout commit",
            "Are you sure you want to checkout this commit? (detaches HEAD)",
            lambda: self.common.helpers.refs.checkout_ref(commit.sha),
        )

    def create_reset_menu(self, commit: Commit) -> None:
        self.common.helpers.refs.create_git_reset_menu(commit.sha)

    def copy(self, commit: Commit) -> None:
        self.common.helpers.cherry_pick.copy(commit, self.context.get_commits(), self.context.key)

    def copy_range(self, _commit: Commit) -> None:
        self.common.helpers.cherry_pick.copy_range(
            self.context.get_selected_line_idx(),
            self.context.get_commits(),
            self.context.key,
        )

    def reset_cherry_pick(self) -> None:
        self.common.helpers.cherry_pick.reset()
