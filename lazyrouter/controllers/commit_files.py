"""Actions on the files changed by one commit or stash entry."""

from __future__ import annotations

from ..bindings import Binding
from ..keys import ESC
from ..models import CommitFile
from .base import BaseController, with_selected
from .common import ControllerCommon


class CommitFilesController(BaseController):
    name = "commit_files"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    @property
    def context(self):
        return self.common.contexts.commit_files

    def get_keybindings(self) -> list[Binding]:
        selected = self.context.get_selected_file
        return [
            Binding("c", "Checkout file", with_selected(selected, self.checkout)),
            Binding("e", "Edit file", with_selected(selected, self.edit)),
            Binding("o", "Open file", with_selected(selected, self.open)),
            Binding(ESC, "Return to previous list", self.escape),
        ]

    def checkout(self, file: CommitFile) -> None:
        self.common.helpers.patch_building.checkout_file_from_commit(self.context.ref_name, file.name)

    def edit(self, file: CommitFile) -> None:
        self.common.helpers.files.edit_file(file.name)

    def open(self, file: CommitFile) -> None:
        self.common.helpers.files.open_file(file.name)

    def escape(self) -> None:
        parent = self.context.parent_context
        if parent is None:
            self.common.c.context_stack.pop()
            return
        self.common.c.context_stack.replace(parent)
