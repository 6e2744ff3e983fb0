"""Pure formatters turning domain entities into styled display cells.

Every formatter is deterministic: the same entities, flags and theme always
produce the same cells, and nothing here touches git, the model or the
terminal.
"""

from .branches import (
    branch_status,
    colored_branch_status,
    get_branch_display_strings,
    get_branch_list_display_strings,
    get_branch_text_style,
)
from .commit_files import get_commit_file_list_display_strings
from .commits import get_commit_display_strings, get_commit_list_display_strings
from .files import get_file_display_strings, get_file_list_display_strings
from .menu_items import get_menu_item_list_display_strings
from .reflog_commits import get_reflog_commit_list_display_strings
from .remote_branches import get_remote_branch_list_display_strings
from .remotes import get_remote_list_display_strings
from .stash_entries import get_stash_entry_list_display_strings
from .submodules import get_submodule_list_display_strings
from .tags import get_tag_list_display_strings
from .utils import short_sha, unix_to_time_ago

__all__ = [
    "branch_status",
    "colored_branch_status",
    "get_branch_display_strings",
    "get_branch_list_display_strings",
    "get_branch_text_style",
    "get_commit_file_list_display_strings",
    "get_commit_display_strings",
    "get_commit_list_display_strings",
    "get_file_display_strings",
    "get_file_list_display_strings",
    "get_menu_item_list_display_strings",
    "get_reflog_commit_list_display_strings",
    "get_remote_branch_list_display_strings",
    "get_remote_list_display_strings",
    "get_stash_entry_list_display_strings",
    "get_submodule_list_display_strings",
    "get_tag_list_display_strings",
    "short_sha",
    "unix_to_time_ago",
]
