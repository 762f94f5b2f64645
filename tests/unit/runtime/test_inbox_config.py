"""Tests for config persistence and input sanitization.

Malformed config data must fall back to defaults instead of failing.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pdfinbox.input.key_config import KeyConfig
from pdfinbox.runtime import config


class InboxConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("pdfinbox.runtime.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def _write(self, payload: object) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(json.dumps(payload), encoding="utf-8")

    def test_missing_file_gives_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.load_managed_dir(), config.DEFAULT_MANAGED_DIR)
        self.assertEqual(config.load_unmanaged_dir(), config.DEFAULT_UNMANAGED_DIR)
        self.assertEqual(config.load_key_config(), KeyConfig())
        self.assertIsNone(config.load_theme_name())
        self.assertEqual(config.load_tick_ms(), config.DEFAULT_TICK_MS)

    def test_malformed_json_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

        self._write(["not", "an", "object"])
        self.assertEqual(config.load_config(), {})

    def test_directories_round_trip(self) -> None:
        config.save_directories(Path("/srv/papers"), Path("/srv/incoming"))

        self.assertEqual(config.load_managed_dir(), Path("/srv/papers"))
        self.assertEqual(config.load_unmanaged_dir(), Path("/srv/incoming"))

    def test_blank_directory_falls_back(self) -> None:
        self._write({"managed_dir": "   ", "unmanaged_dir": 5})

        self.assertEqual(config.load_managed_dir(), config.DEFAULT_MANAGED_DIR)
        self.assertEqual(config.load_unmanaged_dir(), config.DEFAULT_UNMANAGED_DIR)

    def test_key_binding_overrides(self) -> None:
        self._write(
            {
                "key_bindings": {
                    "scroll_down": ["n", "DOWN"],
                    "quit": "x",
                    "enter": ["TAB"],
                    "teleport": ["t"],
                    "exit": 3,
                }
            }
        )

        key_config = config.load_key_config()

        self.assertEqual(key_config.scroll_down, ("n", "DOWN"))
        self.assertEqual(key_config.quit, ("x",))
        self.assertEqual(key_config.enter, ("ENTER",))
        self.assertEqual(key_config.exit, ("CTRL_C",))

    def test_theme_round_trip_keeps_other_keys(self) -> None:
        config.save_directories(Path("/a"), Path("/b"))
        config.save_theme_name("  ocean ")
        config.save_theme_name("   ")

        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_managed_dir(), Path("/a"))

    def test_tick_ms_is_clamped(self) -> None:
        self.assertEqual(config.coerce_tick_ms(1), config.MIN_TICK_MS)
        self.assertEqual(config.coerce_tick_ms(10**9), config.MAX_TICK_MS)
        self.assertEqual(config.coerce_tick_ms(True), config.DEFAULT_TICK_MS)
        self.assertEqual(config.coerce_tick_ms("fast"), config.DEFAULT_TICK_MS)

        self._write({"tick_ms": 120})
        self.assertEqual(config.load_tick_ms(), 120)

    def test_unwritable_config_is_logged_not_raised(self) -> None:
        with mock.patch.object(Path, "write_text", side_effect=PermissionError("read-only")):
            with self.assertLogs("pdfinbox.runtime.config", level="WARNING"):
                config.save_config({"theme": "ocean"})


if __name__ == "__main__":
    unittest.main()
