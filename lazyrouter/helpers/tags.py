from __future__ import annotations

from collections.abc import Callable

from ..commands.git import GitCommand
from ..refresh import RefreshScope
from .common import HelperCommon


class TagsHelper:
    def __init__(self, c: HelperCommon, git: GitCommand) -> None:
        self.c = c
        self.git = git

    def open_create_tag_prompt(self, ref: str, on_create: Callable[[], None] | None = None) -> None:
        """Prompt for ``name`` or ``name: message``; the latter makes an annotated tag."""

        def create(text: str) -> None:
            name, _, message = text.partition(":")
            name = name.strip()
            if not name:
                return
            self.git.tag.create(name, ref, message.strip())
            self.c.refresh([RefreshScope.COMMITS, RefreshScope.TAGS])
            if on_create is not None:
                on_create()

        self.c.popup.prompt(f"Tag name for {ref}", create)
