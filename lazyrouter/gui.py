"""Session wiring: model, contexts, helpers, controllers and the registry.

:class:`Gui` is the composition root. Construction builds every collaborator,
attaches controllers in a fixed order and freezes the registry, so a ``Gui``
that exists is fully wired.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .commands import loaders
from .commands.git import GitCommand
from .commands.oscommands import OSCommand
from .config import UserConfig
from .context.base import BaseContext, Capability
from .context.capabilities import CanSwitchToDiffFiles
from .context.contexts import build_context_tree
from .context.stack import ContextStack
from .controllers import (
    BisectController,
    BasicCommitsController,
    BranchesController,
    CommitFilesController,
    CommitMessageController,
    ControllerCommon,
    ControllerRegistry,
    FilesController,
    FilesRemoveController,
    GitFlowController,
    GlobalController,
    ListControllerFactory,
    LocalCommitsController,
    MenuController,
    RemoteBranchesController,
    RemotesController,
    StashController,
    SubmodulesController,
    SwitchToDiffFilesController,
    SwitchToSubCommitsController,
    SyncController,
    TagsController,
    UndoController,
)
from .dispatch import DispatchResult, dispatch_key
from .helpers import (
    BisectHelper,
    CherryPickHelper,
    FilesHelper,
    GpgHelper,
    HelperCommon,
    Helpers,
    HostHelper,
    MergeAndRebaseHelper,
    PatchBuildingHelper,
    RefsHelper,
    SuggestionsHelper,
    TagsHelper,
    WorkingTreeHelper,
)
from .keys import key_label
from .models import Commit, MenuItem
from .popup import PopupHandler
from .refresh import Refresher, RefreshScope
from .render.help import keybinding_sections
from .state import GuiState, Model, Modes

logger = logging.getLogger(__name__)


class Gui:
    def __init__(
        self,
        git: GitCommand,
        os_command: OSCommand | None = None,
        user_config: UserConfig | None = None,
    ) -> None:
        self.git = git
        self.os = os_command if os_command is not None else OSCommand()
        self.user_config = user_config if user_config is not None else UserConfig()
        self.model = Model()
        self.modes = Modes()
        self.gui_state = GuiState(
            show_remote_tracker=self.user_config.show_remote_tracker,
            full_description=self.user_config.full_description,
        )
        self.contexts = build_context_tree(self.model)
        self.context_stack = ContextStack(self.contexts.files)
        self.popup = PopupHandler(self.gui_state, self.model, self._open_menu)
        self.refresher = Refresher(git, self.model, self.user_config)
        self.registry = ControllerRegistry(self.contexts.all())
        self.common = self._build_common()
        self._attach_controllers()

    def _open_menu(self) -> None:
        self.context_stack.push(self.contexts.menu)

    def refresh(self, scopes: Iterable[RefreshScope] | None = None) -> None:
        self.refresher.refresh(scopes)

    def _build_common(self) -> ControllerCommon:
        c = HelperCommon(
            popup=self.popup,
            context_stack=self.context_stack,
            refresh=self.refresh,
            user_config=self.user_config,
            gui_state=self.gui_state,
        )
        refs = RefsHelper(c, self.git, self.contexts, self.model)
        merge_and_rebase = MergeAndRebaseHelper(c, self.contexts, self.git, self.model, refs)
        helpers = Helpers(
            refs=refs,
            host=HostHelper(c, self.git),
            patch_building=PatchBuildingHelper(c, self.git, self.model),
            bisect=BisectHelper(c, self.git),
            suggestions=SuggestionsHelper(c, self.model),
            files=FilesHelper(c, self.git, self.os),
            working_tree=WorkingTreeHelper(c, self.git, self.model),
            tags=TagsHelper(c, self.git),
            gpg=GpgHelper(c, self.os, self.git),
            merge_and_rebase=merge_and_rebase,
            cherry_pick=CherryPickHelper(
                c,
                self.git,
                self.contexts,
                lambda: self.modes.cherry_picking,
                merge_and_rebase,
            ),
        )
        return ControllerCommon(
            c=c,
            os=self.os,
            git=self.git,
            helpers=helpers,
            model=self.model,
            contexts=self.contexts,
            modes=self.modes,
        )

    def _attach_controllers(self) -> None:
        common = self.common
        contexts = self.contexts
        registry = self.registry

        registry.attach_for_capability(
            Capability.SWITCH_TO_SUB_COMMITS,
            [contexts.branches, contexts.remote_branches, contexts.tags, contexts.reflog_commits],
            lambda context: SwitchToSubCommitsController(common, self._set_sub_commits, context),
        )
        registry.attach_for_capability(
            Capability.SWITCH_TO_DIFF_FILES,
            [contexts.local_commits, contexts.sub_commits, contexts.stash],
            lambda context: SwitchToDiffFilesController(common, self.switch_to_commit_files_context, context),
        )
        registry.attach_for_capability(
            Capability.CONTAINS_COMMITS,
            [contexts.local_commits, contexts.reflog_commits, contexts.sub_commits],
            lambda context: BasicCommitsController(common, context),
        )

        local_commits_controller = LocalCommitsController(common)
        bisect_controller = BisectController(common)

        registry.attach_controllers(
            contexts.files,
            FilesController(
                common,
                self._set_commit_message,
                self._get_saved_commit_message,
                self.enter_submodule,
                self.switch_to_merge,
            ),
            FilesRemoveController(common),
        )
        registry.attach_controllers(contexts.branches, BranchesController(common), GitFlowController(common))
        registry.attach_controllers(contexts.local_commits, local_commits_controller, bisect_controller)
        registry.attach_controllers(contexts.local_commits, local_commits_controller, bisect_controller)
        registry.attach_controllers(contexts.commit_files, CommitFilesController(common))
        registry.attach_controllers(contexts.remotes, RemotesController(common))
        registry.attach_controllers(contexts.stash, StashController(common))
        registry.attach_controllers(contexts.menu, MenuController(common))
        registry.attach_controllers(
            contexts.commit_message,
            CommitMessageController(
                common,
                self._get_commit_message,
                self._on_commit_attempt,
                self._on_commit_success,
            ),
        )
        registry.attach_controllers(contexts.remote_branches, RemoteBranchesController(common))
        registry.attach_controllers(contexts.tags, TagsController(common))
        registry.attach_controllers(contexts.submodules, SubmodulesController(common, self.enter_submodule))
        registry.attach_controllers(
            contexts.global_context,
            SyncController(common, self.get_suggested_remote),
            UndoController(common),
            GlobalController(common, self.open_keybindings_menu, self.exit_submodule),
        )

        list_controller_factory = ListControllerFactory()
        for context in contexts.list_contexts():
            registry.attach_controllers(context, list_controller_factory.create(context))

        registry.freeze()

    # callbacks handed to controllers

    def _set_sub_commits(self, commits: list[Commit]) -> None:
        self.model.sub_commits = commits

    def _set_commit_message(self, message: str) -> None:
        self.gui_state.commit_message_text = message

    def _get_commit_message(self) -> str:
        return self.gui_state.commit_message_text

    def _get_saved_commit_message(self) -> str:
        return self.gui_state.saved_commit_message

    def _on_commit_attempt(self, message: str) -> None:
        self.gui_state.saved_commit_message = message

    def _on_commit_success(self) -> None:
        self.gui_state.saved_commit_message = ""
        self.gui_state.commit_message_text = ""
        if self.context_stack.current() is self.contexts.commit_message:
            self.context_stack.pop()

    def switch_to_commit_files_context(
        self,
        ref_name: str,
        can_rebase: bool,
        context: CanSwitchToDiffFiles,
    ) -> None:
        self.model.commit_files = loaders.load_commit_files(self.git, ref_name)
        commit_files = self.contexts.commit_files
        commit_files.ref_name = ref_name
        commit_files.can_rebase = can_rebase
        commit_files.parent_context = self.contexts.by_key(context.key)
        commit_files.title = f"Files of {ref_name}"
        commit_files.set_selected_line_idx(0)
        self.context_stack.push(commit_files)

    def switch_to_merge(self, path: str) -> None:
        self.gui_state.merge_conflict_path = path
        self.popup.toast(f"Resolve the conflicts in {path}, then stage it")

    def enter_submodule(self, path: str) -> None:
        self.gui_state.repo_path_stack.append(str(self.git.repo_path))
        self.git.repo_path = self.git.repo_path / path
        logger.info("entering submodule %s", self.git.repo_path)
        self._reset_focus()

    def exit_submodule(self) -> bool:
        if not self.gui_state.repo_path_stack:
            return False
        previous = self.gui_state.repo_path_stack.pop()
        self.git.repo_path = type(self.git.repo_path)(previous)
        logger.info("leaving submodule for %s", previous)
        self._reset_focus()
        return True

    def _reset_focus(self) -> None:
        self.modes.cherry_picking.cherry_picked_commits = []
        self.modes.diffing.ref = ""
        while self.context_stack.pop():
            pass
        self.context_stack.replace(self.contexts.files)
        self.refresh(None)

    def get_suggested_remote(self) -> str:
        names = [remote.name for remote in self.model.remotes]
        if not names or "origin" in names:
            return "origin"
        return names[0]

    def open_keybindings_menu(self) -> None:
        current = self.context_stack.current()
        items: list[MenuItem] = []
        for _title, bindings in keybinding_sections(self.registry, current, self.contexts.global_context):
            for binding in bindings:
                items.append(
                    MenuItem(
                        label=binding.description,
                        display_strings=[key_label(binding.key), binding.description],
                        key=binding.key,
                        on_press=binding.handler,
                        opens_menu=binding.opens_menu,
                    )
                )
        self.popup.menu(f"Keybindings: {current.title}", items)

    def current_context(self) -> BaseContext:
        return self.context_stack.current()

    def handle_key(self, key: str) -> DispatchResult:
        return dispatch_key(
            self.registry,
            self.context_stack,
            key,
            self.popup,
            self.contexts.global_context,
        )
