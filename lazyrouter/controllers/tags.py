"""Tag actions."""

from __future__ import annotations

from ..bindings import Binding
from ..keys import SPACE
from ..models import Tag
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon


class TagsController(BaseController):
    name = "tags"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    @property
    def context(self):
        return self.common.contexts.tags

    def get_keybindings(self) -> list[Binding]:
        selected = self.context.get_selected_tag
        return [
            Binding(SPACE, "Checkout", with_selected(selected, self.checkout)),
            Binding("d", "Delete tag", with_selected(selected, self.delete)),
            Binding("P", "Push tag", with_selected(selected, self.push)),
            Binding("n", "Create tag", self.create),
            Binding("g", "View reset options", with_selected(selected, self.create_reset_menu), opens_menu=True),
        ]

    def checkout(self, tag: Tag) -> None:
        self.common.helpers.refs.checkout_ref(tag.name)
        self.common.c.context_stack.push(self.common.contexts.branches)

    def delete(self, tag: Tag) -> None:
        def delete() -> None:
            self.common.git.tag.delete(tag.name)
            self.common.c.refresh([RefreshScope.COMMITS, RefreshScope.TAGS])

        self.common.c.popup.confirm(
            "Delete tag",
            f"Are you sure you want to delete tag '{tag.name}'?",
            delete,
        )

    def push(self, tag: Tag) -> None:
        def push(remote: str) -> None:
            remote = remote.strip()
            if not remote:
                return
            self.common.c.popup.toast(f"Pushing tag {tag.name}...")
            self.common.git.tag.push(remote, tag.name)

        suggestions = self.common.helpers.suggestions.get_remote_suggestions("")
        initial = suggestions[0] if suggestions else "origin"
        self.common.c.popup.prompt(f"Remote to push tag '{tag.name}' to:", push, initial=initial)

    def create(self) -> None:
        self.common.helpers.tags.open_create_tag_prompt(
            "HEAD",
            lambda: self.context.set_selected_line_idx(0),
        )

    def create_reset_menu(self, tag: Tag) -> None:
        self.common.helpers.refs.create_git_reset_menu(tag.name)
