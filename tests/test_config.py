"""Tests for user settings and the command line.

Covers: cclock.core.config, cclock.__main__
"""

import contextlib
import io
import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path

# Keep logs and settings out of the real user folder
os.environ.setdefault("CCLOCK_HOME", tempfile.mkdtemp(prefix="cclock_test_"))


# ──────────────────────────────────────────────────────────────────────────
# config.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestSettings(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self._tmppath = Path(self.tmpdir)

        # Monkey-patch the settings path to use temp dir
        from cclock.core import config
        self._orig_settings_path = config.SETTINGS_PATH
        config.SETTINGS_PATH = self._tmppath / "settings.json"

    def tearDown(self):
        from cclock.core import config
        config.SETTINGS_PATH = self._orig_settings_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_fresh_start_returns_defaults(self):
        from cclock.core.config import load_settings
        settings = load_settings()
        self.assertEqual(settings["default_time"], "5m")
        self.assertTrue(settings["show_controls"])
        self.assertFalse(settings["start_fullscreen"])
        self.assertEqual(settings["frame_interval_ms"], 16)

    def test_fresh_start_writes_settings_file(self):
        from cclock.core import config
        config.load_settings()
        self.assertTrue(config.SETTINGS_PATH.exists())

    def test_save_and_load_roundtrip(self):
        from cclock.core import config
        settings = config.build_default_settings()
        settings["default_time"] = "3m"
        settings["theme"] = "Paper"
        config.save_settings(settings)

        loaded = config.load_settings()
        self.assertEqual(loaded["default_time"], "3m")
        self.assertEqual(loaded["theme"], "Paper")

    def test_missing_and_wrong_type_keys_defaulted(self):
        from cclock.core import config
        with open(config.SETTINGS_PATH, "w") as f:
            json.dump({"default_time": "10m", "show_controls": "yes", "frame_interval_ms": True}, f)

        loaded = config.load_settings()
        self.assertEqual(loaded["default_time"], "10m")
        self.assertTrue(loaded["show_controls"])
        self.assertEqual(loaded["frame_interval_ms"], 16)
        self.assertEqual(loaded["font"], "monospace")

    def test_non_positive_frame_interval_defaulted(self):
        from cclock.core import config
        with open(config.SETTINGS_PATH, "w") as f:
            json.dump({"frame_interval_ms": 0}, f)
        self.assertEqual(config.load_settings()["frame_interval_ms"], 16)

    def test_corrupted_file_falls_back_to_defaults(self):
        from cclock.core import config
        with open(config.SETTINGS_PATH, "w") as f:
            f.write("{invalid json!!")
        self.assertEqual(config.load_settings(), config.build_default_settings())

    def test_non_object_file_falls_back_to_defaults(self):
        from cclock.core import config
        with open(config.SETTINGS_PATH, "w") as f:
            json.dump(["not", "a", "dict"], f)
        self.assertEqual(config.load_settings(), config.build_default_settings())


# ──────────────────────────────────────────────────────────────────────────
# __main__.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestCommandLine(unittest.TestCase):

    def _parse(self, argv, **settings_overrides):
        from cclock.__main__ import parse_args
        from cclock.core.config import build_default_settings
        settings = build_default_settings()
        settings.update(settings_overrides)
        return parse_args(argv, settings)

    def test_defaults(self):
        _, times, settings = self._parse([])
        self.assertEqual(times, (300, 300))
        self.assertTrue(settings["show_controls"])

    def test_shared_and_per_side_times(self):
        _, times, _ = self._parse(["--t", "10m", "--t2", "1h30m"])
        self.assertEqual(times, (600, 5400))

    def test_settings_default_time_used(self):
        _, times, _ = self._parse(["--t1", "90"], default_time="2min30sec")
        self.assertEqual(times, (90, 150))

    def test_flags_override_settings_for_run_only(self):
        from cclock.core.config import build_default_settings
        from cclock.__main__ import parse_args
        saved = build_default_settings()
        _, _, run_settings = parse_args(["--fullscreen", "--no-controls"], saved)
        self.assertTrue(run_settings["start_fullscreen"])
        self.assertFalse(run_settings["show_controls"])
        self.assertTrue(saved["show_controls"])

    def test_bad_duration_exits(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                self._parse(["--t", "ten minutes"])
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("Invalid duration", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
