from __future__ import annotations

from pathlib import Path

from ..commands.git import GitCommand
from ..commands.oscommands import OSCommand
from ..refresh import RefreshScope
from .common import HelperCommon


class FilesHelper:
    def __init__(self, c: HelperCommon, git: GitCommand, os: OSCommand) -> None:
        self.c = c
        self.git = git
        self.os = os

    def _absolute(self, path: str) -> Path:
        return self.git.repo_path / path

    def edit_file(self, path: str) -> None:
        self.os.edit_file(self._absolute(path))
        self.c.refresh([RefreshScope.FILES])

    def open_file(self, path: str) -> None:
        self.os.open_file(self._absolute(path))
