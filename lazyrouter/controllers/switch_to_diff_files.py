"""Open the changed-file list of the selected commit or stash entry."""

from __future__ import annotations

from collections.abc import Callable

from ..bindings import Binding
from ..context.capabilities import CanSwitchToDiffFiles
from ..keys import ENTER
from .base import BaseController
from .common import ControllerCommon

ViewFilesFn = Callable[[str, bool, CanSwitchToDiffFiles], None]


class SwitchToDiffFilesController(BaseController):
    name = "switch_to_diff_files"

    def __init__(
        self,
        common: ControllerCommon,
        view_files: ViewFilesFn,
        context: CanSwitchToDiffFiles,
    ) -> None:
        super().__init__()
        self.common = common
        self.view_files = view_files
        self.context = context

    def get_keybindings(self) -> list[Binding]:
        return [Binding(ENTER, "View files", self.enter)]

    def enter(self) -> None:
        ref = self.context.get_selected_ref()
        if ref is None:
            return
        self.view_files(ref.ref_name(), self.context.can_rebase(), self.context)
