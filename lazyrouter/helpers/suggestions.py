"""Completion candidates for prompts, drawn from the loaded model."""

from __future__ import annotations

from ..state import Model
from .common import HelperCommon


def _filter(query: str, names: list[str]) -> list[str]:
    """Case-insensitive substring match; prefix matches sort first."""
    needle = query.strip().lower()
    if not needle:
        return names
    matched = [name for name in names if needle in name.lower()]
    return sorted(matched, key=lambda name: (not name.lower().startswith(needle), name))


class SuggestionsHelper:
    def __init__(self, c: HelperCommon, model: Model) -> None:
        self.c = c
        self.model = model

    def get_branch_name_suggestions(self, query: str) -> list[str]:
        return _filter(query, [branch.name for branch in self.model.branches])

    def get_remote_suggestions(self, query: str) -> list[str]:
        return _filter(query, [remote.name for remote in self.model.remotes])

    def get_remote_branch_suggestions(self, query: str, separator: str = "/") -> list[str]:
        names = [
            f"{remote.name}{separator}{branch.name}"
            for remote in self.model.remotes
            for branch in remote.branches
        ]
        return _filter(query, names)

    def get_tag_suggestions(self, query: str) -> list[str]:
        return _filter(query, [tag.name for tag in self.model.tags])

    def get_file_path_suggestions(self, query: str) -> list[str]:
        return _filter(query, [file.name for file in self.model.files])
