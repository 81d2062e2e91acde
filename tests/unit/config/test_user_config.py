from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from ai_clipboard import config
from ai_clipboard.config import UserConfig, load_user_config, save_user_config
from ai_clipboard.ignore import DEFAULT_IGNORE_PATTERNS


class UserConfigTests(unittest.TestCase):
    def test_round_trip_preserves_all_fields(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "userconfig.json"
            original = UserConfig(
                last_folder="/proj",
                checked_files=["/proj/src/main.txt", "/proj/README.md"],
                include_binaries=True,
                ignore_patterns=[".png", "/obj"],
                previous_projects=["/old", "/proj"],
            )

            self.assertTrue(save_user_config(original, path))
            self.assertEqual(load_user_config(path), original)

    def test_persisted_field_names(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "userconfig.json"
            save_user_config(UserConfig(), path)
            data = json.loads(path.read_text(encoding="utf-8"))
            self.assertEqual(
                data,
                {
                    "LastFolder": None,
                    "CheckedFiles": [],
                    "IncludeBinaries": False,
                    "IgnorePatterns": [],
                    "PreviousProjects": [],
                },
            )

    def test_missing_or_malformed_file_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.json"
            self.assertEqual(load_user_config(missing), UserConfig())

            broken = Path(tmp) / "broken.json"
            broken.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_user_config(broken), UserConfig())

            not_object = Path(tmp) / "list.json"
            not_object.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(load_user_config(not_object), UserConfig())

    def test_wrong_value_types_are_dropped(self) -> None:
        loaded = UserConfig.from_dict(
            {
                "LastFolder": 5,
                "CheckedFiles": ["/a", 3, None],
                "IncludeBinaries": "yes",
                "IgnorePatterns": "not-a-list",
                "PreviousProjects": ["/a", "/a", "/b"],
                "Unknown": True,
            }
        )
        self.assertIsNone(loaded.last_folder)
        self.assertEqual(loaded.checked_files, ["/a"])
        self.assertFalse(loaded.include_binaries)
        self.assertEqual(loaded.ignore_patterns, [])
        self.assertEqual(loaded.previous_projects, ["/a", "/b"])

    def test_save_failure_is_reported_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("x", encoding="utf-8")
            self.assertFalse(save_user_config(UserConfig(), blocker / "userconfig.json"))

    def test_default_path_is_patchable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "userconfig.json"
            with mock.patch("ai_clipboard.config.CONFIG_PATH", config_path):
                save_user_config(UserConfig(last_folder="/proj"))
                self.assertTrue(config_path.exists())
                self.assertEqual(load_user_config().last_folder, "/proj")

    def test_effective_ignore_patterns_default_when_empty(self) -> None:
        self.assertEqual(UserConfig().effective_ignore_patterns(), list(DEFAULT_IGNORE_PATTERNS))
        self.assertEqual(UserConfig(ignore_patterns=[".log"]).effective_ignore_patterns(), [".log"])

    def test_remember_project_is_append_only_and_deduplicated(self) -> None:
        user_config = UserConfig()
        self.assertTrue(user_config.remember_project("/a"))
        self.assertTrue(user_config.remember_project("/b"))
        self.assertFalse(user_config.remember_project("/a"))
        self.assertEqual(user_config.previous_projects, ["/a", "/b"])

    def test_app_name_drives_default_location(self) -> None:
        self.assertEqual(config.DEFAULT_CONFIG_PATH.name, "userconfig.json")


if __name__ == "__main__":
    unittest.main()
