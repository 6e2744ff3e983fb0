"""Confirm or abandon the commit message being edited."""

from __future__ import annotations

from collections.abc import Callable

from ..bindings import Binding
from ..errors import ActionUnavailableError
from ..keys import ENTER, ESC
from .base import BaseController
from .common import ControllerCommon


class CommitMessageController(BaseController):
    name = "commit_message"

    def __init__(
        self,
        common: ControllerCommon,
        get_commit_message: Callable[[], str],
        on_commit_attempt: Callable[[str], None],
        on_commit_success: Callable[[], None],
    ) -> None:
        super().__init__()
        self.common = common
        self.get_commit_message = get_commit_message
        self.on_commit_attempt = on_commit_attempt
        self.on_commit_success = on_commit_success

    def get_keybindings(self) -> list[Binding]:
        return [
            Binding(ENTER, "Confirm", self.confirm),
            Binding(ESC, "Close", self.close),
        ]

    def confirm(self) -> None:
        message = self.get_commit_message().strip()
        if not message:
            raise ActionUnavailableError("Commit message cannot be empty")
        self.on_commit_attempt(message)
        self.common.helpers.gpg.with_gpg_handling(
            lambda: self.common.git.commit.commit(message),
            "Committing...",
            self.on_commit_success,
        )

    def close(self) -> None:
        self.common.c.gui_state.saved_commit_message = self.get_commit_message()
        self.common.c.context_stack.pop()
