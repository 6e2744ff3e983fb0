"""Wiring tests for ``lazyrouter.gui.Gui``.

Checks the attachment order the composition root produces, capability
coverage of the generic controllers and key resolution on the frozen registry.
"""

from __future__ import annotations

import subprocess
import unittest
from pathlib import Path

from lazyrouter.commands.git import GitCommand
from lazyrouter.context.base import Capability
from lazyrouter.context.contexts import build_context_tree
from lazyrouter.controllers import (
    BasicCommitsController,
    ControllerRegistry,
    ListController,
    SwitchToDiffFilesController,
    SwitchToSubCommitsController,
)
from lazyrouter.errors import RegistryFrozenError
from lazyrouter.gui import Gui
from lazyrouter.keys import ENTER, SPACE
from lazyrouter.state import Model


def _quiet_runner(cmd, **_kwargs):
    return subprocess.CompletedProcess(cmd, 0, "", "")


def _controller_names(context) -> list[str]:
    return [controller.name for controller in context.controllers]


class GuiWiringTests(unittest.TestCase):
    def setUp(self) -> None:
        self.gui = Gui(GitCommand(Path("/repo"), runner=_quiet_runner))
        self.contexts = self.gui.contexts

    def test_registry_is_frozen_and_every_context_has_a_controller(self) -> None:
        self.assertTrue(self.gui.registry.frozen)
        for context in self.contexts.all():
            self.assertTrue(context.controllers, context.key)

    def test_attach_after_setup_raises(self) -> None:
        with self.assertRaises(RegistryFrozenError):
            self.gui.registry.attach_controllers(self.contexts.files, ListController(self.contexts.files))

    def test_local_commits_carry_duplicate_domain_attachment(self) -> None:
        self.assertEqual(
            _controller_names(self.contexts.local_commits),
            [
                "switch_to_diff_files",
                "basic_commits",
                "local_commits",
                "bisect",
                "local_commits",
                "bisect",
                "list",
            ],
        )

    def test_attachment_order_for_other_contexts(self) -> None:
        expected = {
            self.contexts.files: ["files", "files_remove", "list"],
            self.contexts.branches: ["switch_to_sub_commits", "branches", "git_flow", "list"],
            self.contexts.reflog_commits: ["switch_to_sub_commits", "basic_commits", "list"],
            self.contexts.sub_commits: ["switch_to_diff_files", "basic_commits", "list"],
            self.contexts.stash: ["switch_to_diff_files", "stash", "list"],
            self.contexts.remote_branches: ["switch_to_sub_commits", "remote_branches", "list"],
            self.contexts.tags: ["switch_to_sub_commits", "tags", "list"],
            self.contexts.global_context: ["sync", "undo", "global"],
            self.contexts.commit_message: ["commit_message"],
            self.contexts.menu: ["menu", "list"],
        }
        for context, names in expected.items():
            self.assertEqual(_controller_names(context), names, context.key)

    def test_generic_controllers_follow_declared_capabilities(self) -> None:
        generic_types = {
            Capability.SWITCH_TO_SUB_COMMITS: SwitchToSubCommitsController,
            Capability.SWITCH_TO_DIFF_FILES: SwitchToDiffFilesController,
            Capability.CONTAINS_COMMITS: BasicCommitsController,
        }
        for context in self.contexts.all():
            for capability, controller_type in generic_types.items():
                count = sum(isinstance(controller, controller_type) for controller in context.controllers)
                expected = 1 if context.has_capability(capability) else 0
                self.assertEqual(count, expected, f"{context.key} {capability.value}")

    def test_list_controller_attached_last_to_list_contexts_only(self) -> None:
        list_contexts = set(self.contexts.list_contexts())
        for context in self.contexts.all():
            last = context.controllers[-1]
            if context in list_contexts:
                self.assertIsInstance(last, ListController, context.key)
            else:
                self.assertFalse(any(isinstance(c, ListController) for c in context.controllers), context.key)

    def test_key_resolution_on_wired_contexts(self) -> None:
        registry = self.gui.registry
        self.assertEqual(registry.resolve(self.contexts.branches, ENTER).name, "switch_to_sub_commits")
        self.assertEqual(registry.resolve(self.contexts.branches, SPACE).name, "branches")
        self.assertEqual(registry.resolve(self.contexts.branches, "i").name, "git_flow")
        self.assertEqual(registry.resolve(self.contexts.branches, "j").name, "list")
        self.assertEqual(registry.resolve(self.contexts.local_commits, SPACE).name, "basic_commits")
        self.assertEqual(registry.resolve(self.contexts.local_commits, "b").name, "bisect")
        self.assertEqual(registry.resolve(self.contexts.local_commits, ENTER).name, "switch_to_diff_files")
        self.assertEqual(registry.resolve(self.contexts.reflog_commits, "c").name, "basic_commits")
        self.assertEqual(registry.resolve(self.contexts.files, "d").name, "files_remove")
        self.assertEqual(registry.resolve(self.contexts.files, SPACE).name, "files")
        self.assertEqual(registry.resolve(self.contexts.menu, ENTER).name, "menu")
        self.assertEqual(registry.resolve(self.contexts.menu, "k").name, "list")
        self.assertEqual(registry.resolve(self.contexts.global_context, "p").name, "sync")
        self.assertEqual(registry.resolve(self.contexts.global_context, "z").name, "undo")
        self.assertIsNone(registry.resolve(self.contexts.commit_message, "j"))

    def test_initial_focus_is_files(self) -> None:
        self.assertIs(self.gui.current_context(), self.contexts.files)


class ContainsCommitsAttachmentTests(unittest.TestCase):
    """Generic commit actions resolve on every commit list before domain wiring."""

    def setUp(self) -> None:
        common = Gui(GitCommand(Path("/repo"), runner=_quiet_runner)).common
        self.contexts = build_context_tree(Model())
        self.registry = ControllerRegistry(self.contexts.all())
        self.commit_contexts = [
            self.contexts.local_commits,
            self.contexts.reflog_commits,
            self.contexts.sub_commits,
        ]
        self.registry.attach_for_capability(
            Capability.CONTAINS_COMMITS,
            self.commit_contexts,
            lambda context: BasicCommitsController(common, context),
        )

    def test_every_basic_commits_key_resolves_on_each_commit_context(self) -> None:
        for context in self.commit_contexts:
            controllers = context.controllers
            self.assertEqual(len(controllers), 1, context.key)
            basic = controllers[0]
            self.assertIsInstance(basic, BasicCommitsController)
            self.assertIs(basic.context, context)
            self.assertTrue(basic.bindings.keys())
            for key in basic.bindings.keys():
                self.assertIs(self.registry.resolve(context, key), basic, (context.key, key))

    def test_no_other_context_received_basic_commits(self) -> None:
        for context in self.contexts.all():
            if context in self.commit_contexts:
                continue
            self.assertEqual(context.controllers, (), context.key)


if __name__ == "__main__":
    unittest.main()
