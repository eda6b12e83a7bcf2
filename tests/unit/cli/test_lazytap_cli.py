"""CLI argument, default-path, and startup failure tests.

Verifies how ``lazytap.cli.main`` builds the controller before entering
the interactive loop.
"""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytap import cli
from lazytap.errors import InvariantViolation
from lazytap.ui_theme import OCEAN_THEME, PLAIN_THEME


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "album").mkdir()
        (self.root / "album" / "01.mp3").write_bytes(b"")
        self.config_path = self.root / "config" / "config.json"
        self._patches = [
            mock.patch("lazytap.config.CONFIG_PATH", self.config_path),
            mock.patch("lazytap.cli.setup_logging"),
        ]
        for patcher in self._patches:
            patcher.start()

    def tearDown(self) -> None:
        for patcher in reversed(self._patches):
            patcher.stop()
        self._tmp.cleanup()

    def _run(self, argv: list[str], **kwargs) -> mock.Mock:
        with mock.patch.object(sys, "argv", ["lazytap", *argv]), mock.patch(
            "lazytap.cli.run_interactive"
        ) as run_interactive:
            cli.main(**kwargs)
        return run_interactive

    def test_defaults_to_current_working_directory(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            run_interactive = self._run([])
        finally:
            os.chdir(previous_cwd)
        controller = run_interactive.call_args.args[0]
        self.assertEqual(controller.search_root, self.root)
        self.assertIsNotNone(controller.navigator)

    def test_explicit_path_and_theme(self) -> None:
        run_interactive = self._run([str(self.root), "--theme", "ocean"], default_path=Path("/unused"))
        controller = run_interactive.call_args.args[0]
        self.assertEqual(controller.search_root, self.root)
        self.assertIs(controller.theme, OCEAN_THEME)

    def test_no_color_uses_plain_theme(self) -> None:
        controller = self._run([str(self.root), "--no-color"]).call_args.args[0]
        self.assertIs(controller.theme, PLAIN_THEME)

    def test_save_theme_persists_choice(self) -> None:
        self._run([str(self.root), "--theme", "ocean", "--save-theme"])
        self.assertIn('"theme": "ocean"', self.config_path.read_text(encoding="utf-8"))

    def test_save_theme_without_theme_exits(self) -> None:
        with self.assertRaises(SystemExit):
            self._run([str(self.root), "--save-theme"])

    def test_missing_path_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(self.root / "missing")])
        self.assertIn("Not a directory", str(ctx.exception))

    def test_unplayable_root_exits_with_message(self) -> None:
        empty = self.root / "album" / "sub"
        empty.mkdir()
        (self.root / "album" / "01.mp3").unlink()
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(empty)])
        self.assertIn("Cannot play", str(ctx.exception))

    def test_debug_logs_to_default_file(self) -> None:
        log_path = self.root / "logs" / "lazytap.log"
        with mock.patch("lazytap.cli.default_log_path", return_value=log_path):
            self._run([str(self.root), "--debug"])
        cli.setup_logging.assert_called_once_with("DEBUG", log_path)

    def test_log_file_option(self) -> None:
        log_path = self.root / "custom.log"
        self._run([str(self.root), "--log-file", str(log_path)])
        cli.setup_logging.assert_called_once_with("WARNING", log_path)

    def test_invariant_violation_becomes_diagnostic_exit(self) -> None:
        with mock.patch.object(sys, "argv", ["lazytap", str(self.root)]), mock.patch(
            "lazytap.cli.run_interactive", side_effect=InvariantViolation("lost history")
        ):
            with self.assertRaises(SystemExit) as ctx:
                cli.main()
        self.assertIn("internal error", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
