"""Persisted config loading, sanitizing and saving."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyrouter import config


class UserConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "lazyrouter.json"
        patcher = mock.patch("lazyrouter.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def write(self, text: str) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(text, encoding="utf-8")

    def test_missing_file_gives_defaults(self) -> None:
        user_config = config.load_user_config()

        self.assertEqual(user_config, config.UserConfig())
        self.assertEqual(user_config.main_branches, ("master", "main"))
        self.assertEqual(user_config.log_level, "WARNING")

    def test_malformed_or_non_object_json_is_ignored(self) -> None:
        self.write("{not json")
        self.assertEqual(config.load_config(), {})

        self.write("[1, 2, 3]")
        self.assertEqual(config.load_config(), {})

    def test_values_are_sanitized(self) -> None:
        self.write(json.dumps({
            "theme": "  ocean ",
            "show_remote_tracker": "yes",
            "full_description": True,
            "main_branches": ["trunk", "", 7, " develop "],
            "log_level": "debug",
        }))

        user_config = config.load_user_config()

        self.assertEqual(user_config.theme, "ocean")
        self.assertFalse(user_config.show_remote_tracker)
        self.assertTrue(user_config.full_description)
        self.assertEqual(user_config.main_branches, ("trunk", "develop"))
        self.assertEqual(user_config.log_level, "DEBUG")

    def test_invalid_main_branches_and_log_level_fall_back(self) -> None:
        self.write(json.dumps({"main_branches": [" ", None], "log_level": "chatty", "theme": "   "}))

        user_config = config.load_user_config()

        self.assertEqual(user_config.main_branches, config.DEFAULT_MAIN_BRANCHES)
        self.assertEqual(user_config.log_level, "WARNING")
        self.assertIsNone(user_config.theme)

    def test_save_helpers_merge_into_existing_file(self) -> None:
        self.write(json.dumps({"main_branches": ["trunk"]}))

        config.save_theme_name(" ocean ")
        config.save_show_remote_tracker(True)
        config.save_full_description(1)
        config.save_theme_name("   ")

        saved = config.load_config()
        self.assertEqual(saved, {
            "main_branches": ["trunk"],
            "theme": "ocean",
            "show_remote_tracker": True,
            "full_description": True,
        })
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertTrue(config.load_show_remote_tracker())
        self.assertTrue(config.load_full_description())

    def test_save_creates_parent_directory(self) -> None:
        config.save_config({"theme": "default"})

        self.assertTrue(self.config_path.exists())
        self.assertTrue(self.config_path.read_text(encoding="utf-8").endswith("\n"))


if __name__ == "__main__":
    unittest.main()
