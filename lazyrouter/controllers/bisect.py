"""git bisect marking from the local commits list."""

from __future__ import annotations

from ..bindings import Binding
from ..models import Commit, MenuItem
from .base import BaseController, with_selected
from .common import ControllerCommon


class BisectController(BaseController):
    name = "bisect"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    def get_keybindings(self) -> list[Binding]:
        selected = self.common.contexts.local_commits.get_selected_commit
        return [
            Binding("b", "View bisect options", with_selected(selected, self.open_menu), opens_menu=True),
        ]

    def open_menu(self, commit: Commit) -> None:
        if self.common.model.bisect_in_progress:
            self._open_mid_bisect_menu(commit)
        else:
            self._open_start_bisect_menu(commit)

    def _mark(self, commit: Commit, term: str, start: bool) -> None:
        bisect = self.common.git.bisect
        if start:
            bisect.start()
        bisect.mark(commit.sha, term)
        self.common.helpers.bisect.post_bisect_command_refresh()

    def _open_start_bisect_menu(self, commit: Commit) -> None:
        sha = commit.short_sha()
        items = [
            MenuItem(label=f"Mark {sha} as bad", key="b", on_press=lambda: self._mark(commit, "bad", True)),
            MenuItem(label=f"Mark {sha} as good", key="g", on_press=lambda: self._mark(commit, "good", True)),
        ]
        self.common.c.popup.menu("Start bisect", items)

    def _open_mid_bisect_menu(self, commit: Commit) -> None:
        sha = commit.short_sha()

        def skip() -> None:
            self.common.git.bisect.skip(commit.sha)
            self.common.helpers.bisect.post_bisect_command_refresh()

        items = [
            MenuItem(label=f"Mark {sha} as bad", key="b", on_press=lambda: self._mark(commit, "bad", False)),
            MenuItem(label=f"Mark {sha} as good", key="g", on_press=lambda: self._mark(commit, "good", False)),
            MenuItem(label=f"Skip {sha}", key="s", on_press=skip),
            MenuItem(label="Reset bisect", key="r", on_press=self.common.helpers.bisect.reset),
        ]
        self.common.c.popup.menu("Bisect", items)
