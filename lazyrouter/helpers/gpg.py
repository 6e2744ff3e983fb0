from __future__ import annotations

from collections.abc import Callable

from ..commands.git import GitCommand
from ..commands.oscommands import OSCommand
from .common import HelperCommon


class GpgHelper:
    """Run commit-producing commands, flagging when gpg may prompt."""

    def __init__(self, c: HelperCommon, os: OSCommand, git: GitCommand) -> None:
        self.c = c
        self.os = os
        self.git = git

    def requires_subprocess(self) -> bool:
        return self.git.config.get_bool("commit.gpgsign")

    def with_gpg_handling(
        self,
        run: Callable[[], None],
        waiting_status: str,
        on_success: Callable[[], None] | None = None,
    ) -> None:
        if self.requires_subprocess():
            self.c.popup.toast(waiting_status)
        run()
        if on_success is not None:
            on_success()
        self.c.refresh(None)
