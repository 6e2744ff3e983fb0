"""Cross-cutting operations shared by several controllers."""

from __future__ import annotations

from dataclasses import dataclass

from .bisect import BisectHelper
from .cherry_pick import CherryPickHelper
from .common import HelperCommon, require_fields
from .files import FilesHelper
from .gpg import GpgHelper
from .host import HostHelper
from .merge_and_rebase import MergeAndRebaseHelper
from .patch_building import PatchBuildingHelper
from .refs import RefsHelper
from .suggestions import SuggestionsHelper
from .tags import TagsHelper
from .working_tree import WorkingTreeHelper


@dataclass(frozen=True)
class Helpers:
    refs: RefsHelper
    host: HostHelper
    patch_building: PatchBuildingHelper
    bisect: BisectHelper
    suggestions: SuggestionsHelper
    files: FilesHelper
    working_tree: WorkingTreeHelper
    tags: TagsHelper
    gpg: GpgHelper
    merge_and_rebase: MergeAndRebaseHelper
    cherry_pick: CherryPickHelper

    def __post_init__(self) -> None:
        require_fields(self)


__all__ = [
    "Helpers",
    "HelperCommon",
    "BisectHelper",
    "CherryPickHelper",
    "FilesHelper",
    "GpgHelper",
    "HostHelper",
    "MergeAndRebaseHelper",
    "PatchBuildingHelper",
    "RefsHelper",
    "SuggestionsHelper",
    "TagsHelper",
    "WorkingTreeHelper",
]
