"""Remote actions and the drill-down into a remote's branches."""

from __future__ import annotations

from ..bindings import Binding
from ..keys import ENTER
from ..models import Remote
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon


class RemotesController(BaseController):
    name = "remotes"

    def __init__(self, common: ControllerCommon) -> None:
        super().__init__()
        self.common = common

    def get_keybindings(self) -> list[Binding]:
        selected = self.common.contexts.remotes.get_selected_remote
        return [
            Binding(ENTER, "View branches", with_selected(selected, self.enter)),
            Binding("f", "Fetch remote", with_selected(selected, self.fetch)),
            Binding("n", "Add new remote", self.add),
            Binding("d", "Remove remote", with_selected(selected, self.remove)),
            Binding("e", "Edit remote", with_selected(selected, self.edit)),
        ]

    def enter(self, remote: Remote) -> None:
        self.common.model.remote_branches = list(remote.branches)
        remote_branches = self.common.contexts.remote_branches
        remote_branches.title = f"Remote branches ({remote.name})"
        remote_branches.set_selected_line_idx(0)
        self.common.c.context_stack.push(remote_branches)

    def fetch(self, remote: Remote) -> None:
        self.common.c.popup.toast(f"Fetching {remote.name}...")
        self.common.git.remote.fetch(remote.name)
        self.common.c.refresh([RefreshScope.BRANCHES, RefreshScope.REMOTES])

    def add(self) -> None:
        def with_name(name: str) -> None:
            name = name.strip()
            if not name:
                return

            def with_url(url: str) -> None:
                url = url.strip()
                if not url:
                    return
                self.common.git.remote.add(name, url)
                self.common.c.refresh([RefreshScope.REMOTES])

            self.common.c.popup.prompt(f"New remote url for {name}:", with_url)

        self.common.c.popup.prompt("New remote name:", with_name)

    def remove(self, remote: Remote) -> None:
        def remove() -> None:
            self.common.git.remote.remove(remote.name)
            self.common.c.refresh([RefreshScope.BRANCHES, RefreshScope.REMOTES])

        self.common.c.popup.confirm(
            "Remove remote",
            f"Are you sure you want to remove remote '{remote.name}'?",
            remove,
        )

    def edit(self, remote: Remote) -> None:
        def with_name(new_name: str) -> None:
            new_name = new_name.strip()
            if new_name and new_name != remote.name:
                self.common.git.remote.rename(remote.name, new_name)

            def with_url(url: str) -> None:
                url = url.strip()
                if url:
                    self.common.git.remote.update_url(new_name or remote.name, url)
                self.common.c.refresh([RefreshScope.BRANCHES, RefreshScope.REMOTES])

            current_url = remote.urls[0] if remote.urls else ""
            self.common.c.popup.prompt(f"Edit url of remote {new_name or remote.name}:", with_url, initial=current_url)

        self.common.c.popup.prompt(f"Enter new name for remote {remote.name}:", with_name, initial=remote.name)
