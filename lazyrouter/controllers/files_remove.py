"""Discard changes to the selected working-tree file."""

from __future__ import annotations

from ..bindings import Binding
from ..models import File, MenuItem
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon


class FilesRemoveController(BaseController):
    name = "files_remove"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    def get_keybindings(self) -> list[Binding]:
        selected = self.common.contexts.files.get_selected_file
        return [
            Binding("d", "View discard options", with_selected(selected, self.remove), opens_menu=True),
        ]

    def remove(self, file: File) -> None:
        working_tree = self.common.git.working_tree
        refresh = self.common.c.refresh

        if file.is_submodule:

            def reset_submodule() -> None:
                self.common.git.submodule.update(file.name)
                refresh([RefreshScope.FILES, RefreshScope.SUBMODULES])

            items = [MenuItem(label="Discard submodule changes", key="x", on_press=reset_submodule)]
            self.common.c.popup.menu(file.name, items)
            return

        def discard_all() -> None:
            working_tree.discard_all_file_changes(file.name, tracked=file.tracked and not file.added)
            refresh([RefreshScope.FILES])

        items = [MenuItem(label="Discard all changes", key="x", on_press=discard_all)]
        if file.has_staged_changes and file.has_unstaged_changes:

            def discard_unstaged() -> None:
                working_tree.discard_unstaged_file_changes(file.name)
                refresh([RefreshScope.FILES])

            items.append(MenuItem(label="Discard unstaged changes", key="u", on_press=discard_unstaged))
        self.common.c.popup.menu(file.name, items)
