"""Controllers: generic ones parametrised by a capability-typed context,
domain ones bound to a single context, and the attachment registry."""

from .base import BaseController, with_selected
from .basic_commits import BasicCommitsController
from .bisect import BisectController
from .branches import BranchesController
from .commit_files import CommitFilesController
from .commit_message import CommitMessageController
from .common import ControllerCommon
from .files import FilesController
from .files_remove import FilesRemoveController
from .git_flow import GitFlowController
from .global_controller import GlobalController
from .list_controller import ListController, ListControllerFactory
from .local_commits import LocalCommitsController
from .menu import MenuController
from .registry import ControllerRegistry
from .remote_branches import RemoteBranchesController
from .remotes import RemotesController
from .stash import StashController
from .submodules import SubmodulesController
from .switch_to_diff_files import SwitchToDiffFilesController
from .switch_to_sub_commits import SwitchToSubCommitsController
from .sync import SyncController
from .tags import TagsController
from .undo import UndoController

__all__ = [
    "BaseController",
    "with_selected",
    "BasicCommitsController",
    "BisectController",
    "BranchesController",
    "CommitFilesController",
    "CommitMessageController",
    "ControllerCommon",
    "ControllerRegistry",
    "FilesController",
    "FilesRemoveController",
    "GitFlowController",
    "GlobalController",
    "ListController",
    "ListControllerFactory",
    "LocalCommitsController",
    "MenuController",
    "RemoteBranchesController",
    "RemotesController",
    "StashController",
    "SubmodulesController",
    "SwitchToDiffFilesController",
    "SwitchToSubCommitsController",
    "SyncController",
    "TagsController",
    "UndoController",
]
