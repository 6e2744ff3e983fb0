"""Submodule actions."""

from __future__ import annotations

from collections.abc import Callable

from ..bindings import Binding
from ..keys import ENTER
from ..models import SubmoduleConfig
from ..refresh import RefreshScope
from .base import BaseController, with_selected
from .common import ControllerCommon

_SUBMODULE_SCOPES = (RefreshScope.SUBMODULES, RefreshScope.FILES)


class SubmodulesController(BaseController):
    name = "submodules"

    def __init__(self, common: ControllerCommon, enter_submodule: Callable[[str], None]) -> None:
        super().__init__()
        self.common = common
        self.enter_submodule = enter_submodule

    def get_keybindings(self) -> list[Binding]:
        selected = self.common.contexts.submodules.get_selected_submodule
        return [
            Binding(ENTER, "Enter submodule", with_selected(selected, self.enter)),
            Binding("i", "Initialize submodule", with_selected(selected, self.init)),
            Binding("u", "Update submodule", with_selected(selected, self.update)),
            Binding("a", "Update all submodules", self.update_all),
            Binding("y", "Copy submodule name to clipboard", with_selected(selected, self.copy_name)),
        ]

    def enter(self, submodule: SubmoduleConfig) -> None:
        self.enter_submodule(submodule.path)

    def init(self, submodule: SubmoduleConfig) -> None:
        self.common.git.submodule.init(submodule.path)
        self.common.c.refresh(_SUBMODULE_SCOPES)

    def update(self, submodule: SubmoduleConfig) -> None:
        self.common.c.popup.toast(f"Updating {submodule.name}...")
        self.common.git.submodule.update(submodule.path)
        self.common.c.refresh(_SUBMODULE_SCOPES)

    def update_all(self) -> None:
        if not self.common.model.submodules:
            return
        self.common.git.submodule.update_all()
        self.common.c.refresh(_SUBMODULE_SCOPES)

    def copy_name(self, submodule: SubmoduleConfig) -> None:
        self.common.os.copy_to_clipboard(submodule.name)
