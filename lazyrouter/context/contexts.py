"""Concrete contexts and the fixed tree built once at startup."""

from __future__ import annotations

from dataclasses import dataclass, fields

from ..models import (
    Branch,
    Commit,
    CommitFile,
    File,
    MenuItem,
    Remote,
    RemoteBranch,
    StashEntry,
    SubmoduleConfig,
    Tag,
)
from ..state import Model
from .base import BaseContext, Capability, ContextKey
from .capabilities import Ref
from .list_context import ListContext


class GlobalContext(BaseContext):
    def __init__(self) -> None:
        super().__init__(ContextKey.GLOBAL, "Global")


class CommitMessageContext(BaseContext):
    def __init__(self) -> None:
        super().__init__(ContextKey.COMMIT_MESSAGE, "Commit message")


class FilesContext(ListContext[File]):
    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.FILES, lambda: model.files, "Files")

    def get_selected_file(self) -> File | None:
        return self.get_selected_item()


class BranchesContext(ListContext[Branch]):
    capabilities = frozenset({Capability.LIST, Capability.SWITCH_TO_SUB_COMMITS})

    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.BRANCHES, lambda: model.branches, "Local branches")

    def get_selected_branch(self) -> Branch | None:
        return self.get_selected_item()

    def get_selected_ref(self) -> Ref | None:
        return self.get_selected_item()


class RemotesContext(ListContext[Remote]):
    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.REMOTES, lambda: model.remotes, "Remotes")

    def get_selected_remote(self) -> Remote | None:
        return self.get_selected_item()


class RemoteBranchesContext(ListContext[RemoteBranch]):
    capabilities = frozenset({Capability.LIST, Capability.SWITCH_TO_SUB_COMMITS})

    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.REMOTE_BRANCHES, lambda: model.remote_branches, "Remote branches")

    def get_selected_remote_branch(self) -> RemoteBranch | None:
        return self.get_selected_item()

    def get_selected_ref(self) -> Ref | None:
        return self.get_selected_item()


class TagsContext(ListContext[Tag]):
    capabilities = frozenset({Capability.LIST, Capability.SWITCH_TO_SUB_COMMITS})

    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.TAGS, lambda: model.tags, "Tags")

    def get_selected_tag(self) -> Tag | None:
        return self.get_selected_item()

    def get_selected_ref(self) -> Ref | None:
        return self.get_selected_item()


class _CommitListContext(ListContext[Commit]):
    def get_selected_commit(self) -> Commit | None:
        return self.get_selected_item()

    def get_commits(self) -> list[Commit]:
        return self.get_items()

    def get_selected_ref(self) -> Ref | None:
        return self.get_selected_item()


class LocalCommitsContext(_CommitListContext):
    capabilities = frozenset(
        {Capability.LIST, Capability.SWITCH_TO_DIFF_FILES, Capability.CONTAINS_COMMITS}
    )

    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.LOCAL_COMMITS, lambda: model.commits, "Commits")

    def can_rebase(self) -> bool:
        return True


class ReflogCommitsContext(_CommitListContext):
    capabilities = frozenset(
        {Capability.LIST, Capability.SWITCH_TO_SUB_COMMITS, Capability.CONTAINS_COMMITS}
    )

    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.REFLOG_COMMITS, lambda: model.reflog_commits, "Reflog")

    def can_rebase(self) -> bool:
        return False


class SubCommitsContext(_CommitListContext):
    """Commits of an arbitrary ref opened from another context."""

    capabilities = frozenset(
        {Capability.LIST, Capability.SWITCH_TO_DIFF_FILES, Capability.CONTAINS_COMMITS}
    )

    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.SUB_COMMITS, lambda: model.sub_commits, "Sub-commits")
        self.ref: Ref | None = None
        self.parent_context: BaseContext | None = None

    def can_rebase(self) -> bool:
        return False


class CommitFilesContext(ListContext[CommitFile]):
    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.COMMIT_FILES, lambda: model.commit_files, "Commit files")
        self.ref_name = ""
        self.can_rebase = False
        self.parent_context: BaseContext | None = None

    def get_selected_file(self) -> CommitFile | None:
        return self.get_selected_item()


class StashContext(ListContext[StashEntry]):
    capabilities = frozenset({Capability.LIST, Capability.SWITCH_TO_DIFF_FILES})

    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.STASH, lambda: model.stash_entries, "Stash")

    def get_selected_stash_entry(self) -> StashEntry | None:
        return self.get_selected_item()

    def get_selected_ref(self) -> Ref | None:
        return self.get_selected_item()

    def can_rebase(self) -> bool:
        return False


class SubmodulesContext(ListContext[SubmoduleConfig]):
    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.SUBMODULES, lambda: model.submodules, "Submodules")

    def get_selected_submodule(self) -> SubmoduleConfig | None:
        return self.get_selected_item()


class MenuContext(ListContext[MenuItem]):
    def __init__(self, model: Model) -> None:
        super().__init__(ContextKey.MENU, lambda: model.menu_items, "Menu")


@dataclass(frozen=True)
class ContextTree:
    """Every context of the session; fixed at startup."""

    global_context: GlobalContext
    files: FilesContext
    branches: BranchesContext
    remotes: RemotesContext
    remote_branches: RemoteBranchesContext
    tags: TagsContext
    local_commits: LocalCommitsContext
    reflog_commits: ReflogCommitsContext
    sub_commits: SubCommitsContext
    commit_files: CommitFilesContext
    stash: StashContext
    submodules: SubmodulesContext
    menu: MenuContext
    commit_message: CommitMessageContext

    def all(self) -> list[BaseContext]:
        return [getattr(self, f.name) for f in fields(self)]

    def list_contexts(self) -> list[ListContext]:
        return [context for context in self.all() if isinstance(context, ListContext)]

    def by_key(self, key: str) -> BaseContext | None:
        for context in self.all():
            if context.key == key:
                return context
        return None


def build_context_tree(model: Model) -> ContextTree:
    return ContextTree(
        global_context=GlobalContext(),
        files=FilesContext(model),
        branches=BranchesContext(model),
        remotes=RemotesContext(model),
        remote_branches=RemoteBranchesContext(model),
        tags=TagsContext(model),
        local_commits=LocalCommitsContext(model),
        reflog_commits=ReflogCommitsContext(model),
        sub_commits=SubCommitsContext(model),
        commit_files=CommitFilesContext(model),
        stash=StashContext(model),
        submodules=SubmodulesContext(model),
        menu=MenuContext(model),
        commit_message=CommitMessageContext(),
    )
