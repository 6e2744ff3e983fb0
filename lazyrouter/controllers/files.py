"""Working-tree file actions: staging, committing, editing, ignoring."""

from __future__ import annotations

from collections.abc import Callable

from ..bindings import Binding
from ..errors import ActionUnavailableError
from ..keys import ENTER, SPACE
from ..models import File, MenuItem
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon


class FilesController(BaseController):
    name = "files"

    def __init__(
        self,
        common: ControllerCommon,
        set_commit_message: Callable[[str], None],
        get_saved_commit_message: Callable[[], str],
        enter_submodule: Callable[[str], None],
        switch_to_merge: Callable[[str], None],
    ) -> None:
        super().__init__()
        self.common = common
        self.set_commit_message = set_commit_message
        self.get_saved_commit_message = get_saved_commit_message
        self.enter_submodule = enter_submodule
        self.switch_to_merge = switch_to_merge

    @property
    def context(self):
        return self.common.contexts.files

    def get_keybindings(self) -> list[Binding]:
        selected = self.context.get_selected_file
        return [
            Binding(SPACE, "Toggle staged", with_selected(selected, self.toggle_staged)),
            Binding("a", "Stage/unstage all", self.toggle_staged_all),
            Binding("c", "Commit changes", self.commit),
            Binding("A", "Amend last commit", self.amend),
            Binding(ENTER, "Stage lines / resolve conflicts / enter submodule", with_selected(selected, self.enter)),
            Binding("e", "Edit file", with_selected(selected, self.edit)),
            Binding("o", "Open file", with_selected(selected, self.open)),
            Binding("i", "Add to .gitignore", with_selected(selected, self.ignore)),
            Binding("S", "Stash all changes", self.stash),
            Binding("f", "Fetch", self.fetch),
            Binding("D", "View reset options", self.create_reset_menu, opens_menu=True),
        ]

    def toggle_staged(self, file: File) -> None:
        if file.has_merge_conflicts:
            raise ActionUnavailableError("Resolve merge conflicts first (press enter)")
        working_tree = self.common.git.working_tree
        if file.has_unstaged_changes:
            working_tree.stage_file(file.name)
        else:
            working_tree.unstage_file(file.name, tracked=file.tracked and not file.added)
        self.common.c.refresh([RefreshScope.FILES])

    def toggle_staged_all(self) -> None:
        if not self.common.model.files:
            return
        working_tree = self.common.git.working_tree
        if any(file.has_unstaged_changes for file in self.common.model.files):
            working_tree.stage_all()
        else:
            working_tree.unstage_all()
        self.common.c.refresh([RefreshScope.FILES])

    def commit(self) -> None:
        if self.common.helpers.working_tree.files_with_merge_conflicts():
            raise ActionUnavailableError("Resolve merge conflicts before committing")
        if not self.common.helpers.working_tree.any_staged_files():
            raise ActionUnavailableError("There are no staged files to commit")
        self.set_commit_message(self.get_saved_commit_message())
        self.common.c.context_stack.push(self.common.contexts.commit_message)

    def amend(self) -> None:
        if not self.common.model.commits:
            raise ActionUnavailableError("There are no commits to amend")
        if not self.common.helpers.working_tree.any_staged_files():
            raise ActionUnavailableError("There are no staged files to amend")
        self.common.c.popup.confirm(
            "Amend last commit",
            "Are you sure you want to amend last commit? Afterwards, you can change the commit message from the commits panel.",
            lambda: self.common.helpers.gpg.with_gpg_handling(
                self.common.git.commit.amend_head,
                "Amending commit...",
            ),
        )

    def enter(self, file: File) -> None:
        if file.is_submodule:
            self.enter_submodule(file.name)
        elif file.has_merge_conflicts:
            self.switch_to_merge(file.name)

    def edit(self, file: File) -> None:
        self.common.helpers.files.edit_file(file.name)

    def open(self, file: File) -> None:
        self.common.helpers.files.open_file(file.name)

    def ignore(self, file: File) -> None:
        if file.name == ".gitignore":
            raise ActionUnavailableError("Cannot ignore .gitignore")
        if file.tracked and not file.added:
            raise ActionUnavailableError("Cannot ignore tracked files")
        self.common.git.working_tree.ignore(file.name)
        self.common.c.refresh([RefreshScope.FILES])

    def stash(self) -> None:
        if not self.common.helpers.working_tree.is_working_tree_dirty():
            raise ActionUnavailableError("You have no changes to stash")

        def save(message: str) -> None:
            self.common.git.stash.save(message)
            self.common.c.refresh([RefreshScope.FILES, RefreshScope.STASH])

        self.common.c.popup.prompt("Stash changes", save)

    def fetch(self) -> None:
        self.common.c.popup.toast("Fetching...")
        self.common.git.sync.fetch_all()
        self.common.c.refresh(None)

    def create_reset_menu(self) -> None:
        working_tree = self.common.git.working_tree

        def discard_all() -> None:
            working_tree.reset_hard()
            self.common.c.refresh([RefreshScope.FILES])

        def discard_unstaged() -> None:
            working_tree.discard_unstaged_file_changes(".")
            self.common.c.refresh([RefreshScope.FILES])

        items = [
            MenuItem(label="Discard all changes", display_strings=["Discard all changes", "git reset --hard HEAD"], key="x", on_press=discard_all),
            MenuItem(label="Discard unstaged changes", display_strings=["Discard unstaged changes", "git checkout -- ."], key="u", on_press=discard_unstaged),
        ]
        self.common.c.popup.menu("Reset working tree", items)
