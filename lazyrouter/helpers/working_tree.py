from __future__ import annotations

from ..commands.git import GitCommand
from ..models import File
from ..state import Model
from .common import HelperCommon


class WorkingTreeHelper:
    def __init__(self, c: HelperCommon, git: GitCommand, model: Model) -> None:
        self.c = c
        self.git = git
        self.model = model

    def any_staged_files(self) -> bool:
        return any(file.has_staged_changes for file in self.model.files)

    def any_tracked_files(self) -> bool:
        return any(file.tracked for file in self.model.files)

    def is_working_tree_dirty(self) -> bool:
        return bool(self.model.files)

    def files_with_merge_conflicts(self) -> list[File]:
        return [file for file in self.model.files if file.has_merge_conflicts]
