"""Command-line front door for lazytap.

Parses CLI options, configures logging and the theme, and resolves the
search root. Then dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import os
import sys
from functools import partial
from pathlib import Path

from .config import load_settings, save_theme_name
from .errors import CatalogError, InvariantViolation, SessionBuildError
from .launcher import open_in_file_manager
from .logging_config import default_log_path, get_logger, setup_logging
from .player.backend import ProcessBackend, detect_player_command
from .runtime import TapController, run_main_loop
from .terminal import TerminalController
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazytap",
        description="Fuzzy-find an album directory and play it in the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Music root. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-theme", action="store_true", help="Persist --theme as the default theme.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--player", metavar="CMD", default=None, help="External player command line.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write log records to PATH.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level to the per-user log file.")
    return parser


def run_interactive(controller: TapController) -> None:
    """Drive ``controller`` from the controlling terminal."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not (os.isatty(stdin_fd) and os.isatty(stdout_fd)):
        raise SystemExit("lazytap needs an interactive terminal.")
    terminal = TerminalController(stdin_fd, stdout_fd)
    run_main_loop(controller, terminal, stdin_fd)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazytap on a music root.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    settings = load_settings()

    log_file = Path(args.log_file) if args.log_file else None
    level = settings.log_level
    if args.debug:
        level = "DEBUG"
        if log_file is None:
            log_file = default_log_path()
    setup_logging(level, log_file)

    if args.save_theme:
        if args.theme is None:
            raise SystemExit("--save-theme requires --theme.")
        save_theme_name(normalize_theme_name(args.theme))
    theme = resolve_theme(args.theme or settings.theme, no_color=args.no_color)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    player_command = args.player or settings.player_command
    controller = TapController(
        path,
        theme=theme,
        backend_factory=lambda: ProcessBackend(detect_player_command(player_command)),
        launcher=partial(open_in_file_manager, configured=settings.file_manager_command),
    )
    try:
        controller.start()
    except (CatalogError, SessionBuildError) as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(str(exc)) from exc

    try:
        run_interactive(controller)
    except InvariantViolation as exc:
        logger.exception("internal error")
        raise SystemExit(f"lazytap: internal error: {exc}") from exc
    finally:
        controller.shutdown()
