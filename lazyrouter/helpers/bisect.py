from __future__ import annotations

from ..commands.git import GitCommand
from .common import HelperCommon


class BisectHelper:
    def __init__(self, c: HelperCommon, git: GitCommand) -> None:
        self.c = c
        self.git = git

    def reset(self) -> None:
        self.c.popup.confirm(
            "Reset bisect",
            "Are you sure you want to reset 'git bisect'?",
            self._reset,
        )

    def _reset(self) -> None:
        self.git.bisect.reset()
        self.post_bisect_command_refresh()

    def post_bisect_command_refresh(self) -> None:
        self.c.refresh(None)
