"""Stash entry actions."""

from __future__ import annotations

from ..bindings import Binding
from ..keys import SPACE
from ..models import StashEntry
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon

_STASH_SCOPES = (RefreshScope.STASH, RefreshScope.FILES)


class StashController(BaseController):
    name = "stash"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    def get_keybindings(self) -> list[Binding]:
        selected = self.common.contexts.stash.get_selected_stash_entry
        return [
            Binding(SPACE, "Apply", with_selected(selected, self.apply)),
            Binding("g", "Pop", with_selected(selected, self.pop)),
            Binding("d", "Drop", with_selected(selected, self.drop)),
            Binding("r", "Rename stash", with_selected(selected, self.rename)),
        ]

    def apply(self, entry: StashEntry) -> None:
        def apply() -> None:
            self.common.git.stash.apply(entry.index)
            self.common.c.refresh(_STASH_SCOPES)

        self.common.c.popup.confirm("Stash apply", "Are you sure you want to apply this stash entry?", apply)

    def pop(self, entry: StashEntry) -> None:
        def pop() -> None:
            self.common.git.stash.pop(entry.index)
            self.common.c.refresh(_STASH_SCOPES)

        self.common.c.popup.confirm("Stash pop", "Are you sure you want to pop this stash entry?", pop)

    def drop(self, entry: StashEntry) -> None:
        def drop() -> None:
            self.common.git.stash.drop(entry.index)
            self.common.c.refresh([RefreshScope.STASH])

        self.common.c.popup.confirm("Stash drop", "Are you sure you want to drop this stash entry?", drop)

    def rename(self, entry: StashEntry) -> None:
        def rename(message: str) -> None:
            self.common.git.stash.rename(entry.index, message.strip())
            self.common.c.refresh([RefreshScope.STASH])

        self.common.c.popup.prompt(f"Rename stash: {entry.ref_name()}", rename, initial=entry.name)
