from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from keyedbrowser import config
from keyedbrowser.browser import BrowserOptions


class ConfigBehaviorTests(unittest.TestCase):
    def test_browser_options_overlay_valid_config_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "keyedbrowser" / "config.json"
            with mock.patch("keyedbrowser.config.CONFIG_PATH", config_path):
                config.save_config(
                    {
                        "show_folders_on_filter": True,
                        "nest_children": "yes",
                        "results_per_page": 50,
                        "no_files_message": "Empty bucket.",
                    }
                )
                options = config.load_browser_options()

            self.assertTrue(options.show_folders_on_filter)
            self.assertFalse(options.nest_children)
            self.assertEqual(options.results_per_page, 50)
            self.assertEqual(options.no_files_message, "Empty bucket.")

    def test_invalid_numbers_fall_back_to_base_options(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"results_per_page": True, "multiple_selection": 0}), encoding="utf-8")
            with mock.patch("keyedbrowser.config.CONFIG_PATH", config_path):
                options = config.load_browser_options(BrowserOptions(results_per_page=7))

            self.assertEqual(options.results_per_page, 7)
            self.assertTrue(options.multiple_selection)

    def test_malformed_config_is_logged_and_treated_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{oops", encoding="utf-8")
            with mock.patch("keyedbrowser.config.CONFIG_PATH", config_path):
                with self.assertLogs("keyedbrowser.config", level="WARNING"):
                    self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_browser_options(), BrowserOptions())

    def test_non_object_config_is_logged_and_treated_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1]", encoding="utf-8")
            with mock.patch("keyedbrowser.config.CONFIG_PATH", config_path):
                with self.assertLogs("keyedbrowser.config", level="WARNING") as logs:
                    self.assertEqual(config.load_config(), {})
            self.assertIn("expected a JSON object", logs.output[0])

    def test_missing_config_returns_empty_dict(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("keyedbrowser.config.CONFIG_PATH", Path(tmp) / "absent.json"):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
