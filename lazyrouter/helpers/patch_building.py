from __future__ import annotations

from ..commands.git import GitCommand
from ..errors import ActionUnavailableError
from ..state import Model
from .common import HelperCommon


class PatchBuildingHelper:
    def __init__(self, c: HelperCommon, git: GitCommand, model: Model) -> None:
        self.c = c
        self.git = git
        self.model = model

    def validate_normal_working_tree(self) -> None:
        if self.model.working_tree_state != "normal":
            raise ActionUnavailableError("You can't build a patch while rebasing or merging")

    def checkout_file_from_commit(self, ref_name: str, path: str) -> None:
        """Bring ``path`` as of ``ref_name`` into the working tree."""
        self.validate_normal_working_tree()
        self.git.working_tree.checkout_commit_file(ref_name, path)
        self.c.refresh(None)
