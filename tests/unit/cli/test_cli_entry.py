"""CLI argument, config-merge, and start-directory behavior tests."""

from __future__ import annotations

import io
import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm import cli
from lazyfm.directory_model import SortPolicy


class CliEntryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.config_patch = mock.patch("lazyfm.config.CONFIG_PATH", self.root / "missing-config.json")
        self.config_patch.start()

    def tearDown(self) -> None:
        self.config_patch.stop()
        self._tmp.cleanup()

    def _run(self, argv: list[str], **kwargs) -> mock.Mock:
        with mock.patch.object(sys, "argv", ["lazyfm", *argv]), mock.patch(
            "lazyfm.cli.run_browser", return_value=self.root
        ) as run_browser:
            cli.main(**kwargs)
        return run_browser

    def test_defaults_to_current_working_directory(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            run_browser = self._run([])
        finally:
            os.chdir(previous_cwd)

        run_browser.assert_called_once()
        path, settings, no_color = run_browser.call_args.args
        self.assertEqual(path, self.root)
        self.assertIs(settings.sort_policy, SortPolicy.DIRS_FIRST)
        self.assertTrue(settings.wrap)
        self.assertFalse(no_color)

    def test_explicit_path_wins_over_default(self) -> None:
        target = self.root / "target"
        target.mkdir()

        run_browser = self._run([str(target)], default_path=self.root / "unused")

        self.assertEqual(run_browser.call_args.args[0], target)

    def test_options_override_config_file(self) -> None:
        config_path = self.root / "config.json"
        config_path.write_text(json.dumps({"sort": "alphabetical", "tick_ms": 500, "wrap": True}), encoding="utf-8")

        with mock.patch("lazyfm.config.CONFIG_PATH", config_path):
            run_browser = self._run(
                [str(self.root), "--sort", "files-first", "--no-wrap", "--refresh-seconds", "1.5", "--no-color"]
            )

        _path, settings, no_color = run_browser.call_args.args
        self.assertIs(settings.sort_policy, SortPolicy.FILES_FIRST)
        self.assertFalse(settings.wrap)
        self.assertEqual(settings.refresh_seconds, 1.5)
        self.assertEqual(settings.tick_ms, 500)
        self.assertTrue(no_color)

    def test_missing_path_and_file_path_exit(self) -> None:
        plain = self.root / "plain.txt"
        plain.write_text("x", encoding="utf-8")

        with self.assertRaises(SystemExit) as missing:
            self._run([str(self.root / "nope")])
        self.assertIn("Path not found", str(missing.exception))

        with self.assertRaises(SystemExit) as not_dir:
            self._run([str(plain)])
        self.assertIn("Not a directory", str(not_dir.exception))

    def test_invalid_option_values_are_rejected(self) -> None:
        for argv in (["--sort", "by-size"], ["--tick-ms", "0"], ["--refresh-seconds", "-1"]):
            with self.subTest(argv=argv), mock.patch("sys.stderr", new_callable=io.StringIO):
                with self.assertRaises(SystemExit):
                    self._run(argv)

    def test_print_last_dir(self) -> None:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            self._run([str(self.root), "--print-last-dir"])

        self.assertEqual(stdout.getvalue(), f"{self.root}\n")

    def test_log_file_receives_records(self) -> None:
        log_file = self.root / "lazyfm.log"
        with mock.patch("lazyfm.cli.logging.basicConfig") as basic_config:
            self._run([str(self.root), "--log-file", str(log_file), "--log-level", "DEBUG"])

        basic_config.assert_called_once()
        self.assertEqual(basic_config.call_args.kwargs["filename"], str(log_file))


if __name__ == "__main__":
    unittest.main()
