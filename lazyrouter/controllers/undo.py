"""Undo repository changes by walking back through the reflog.

Undo runs its own checkouts and resets with ``UNDO_REFLOG_ACTION`` as the
reflog action. Each such entry cancels the next ordinary entry below it, so
repeated presses keep stepping further back instead of undoing the undo.
"""

from __future__ import annotations

import re

from ..bindings import Binding
from ..errors import ActionUnavailableError
from ..models import Commit
from .base import BaseController
from .common import ControllerCommon

UNDO_REFLOG_ACTION = "[lazyrouter undo]"
_CHECKOUT_RE = re.compile(r"^checkout: moving from ([^\s]+) to ([^\s]+)$")


def find_undo_target(entries: list[Commit]) -> int | None:
    """Index of the newest reflog entry not already undone, or ``None``."""
    pending_undos = 0
    for idx, entry in enumerate(entries):
        if entry.name.startswith(UNDO_REFLOG_ACTION):
            pending_undos += 1
        elif pending_undos:
            pending_undos -= 1
        else:
            return idx
    return None


class UndoController(BaseController):
    name = "undo"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    def get_keybindings(self) -> list[Binding]:
        return [Binding("z", "Undo (via reflog)", self.reflog_undo)]

    def reflog_undo(self) -> None:
        if self.common.model.working_tree_state != "normal":
            raise ActionUnavailableError("Can't undo while rebasing or merging")
        entries = self.common.model.reflog_commits
        idx = find_undo_target(entries)
        if idx is None:
            raise ActionUnavailableError("Nothing to undo")

        latest = entries[idx]
        refs = self.common.helpers.refs
        checkout = _CHECKOUT_RE.match(latest.name)
        if checkout is not None:
            previous_ref = checkout.group(1)
            self.common.c.popup.confirm(
                "Undo",
                f"Are you sure you want to checkout {previous_ref}?",
                lambda: refs.checkout_ref(previous_ref, UNDO_REFLOG_ACTION),
            )
            return

        if idx + 1 >= len(entries):
            raise ActionUnavailableError("Nothing to undo")
        target = entries[idx + 1]
        self.common.c.popup.confirm(
            "Undo",
            f"Are you sure you want to hard reset to {target.short_sha()}? "
            f"This undoes: {latest.name}",
            lambda: refs.reset_to_ref(target.sha, "hard", UNDO_REFLOG_ACTION),
        )
