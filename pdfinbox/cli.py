"""Command-line front door for pdfinbox.

Parses CLI options, merges them over the persisted config, and launches the
interactive inbox on the controlling terminal.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .app import App
from .logging_utils import configure_logging
from .runtime import config
from .runtime.loop import RuntimeLoopTiming, run_main_loop
from .runtime.terminal import TerminalController
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_NOT_A_TTY = 2


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdfinbox",
        description="Triage PDF files between an unmanaged and a managed directory.",
    )
    parser.add_argument("--managed", type=Path, default=None, help="Managed PDF directory.")
    parser.add_argument("--unmanaged", type=Path, default=None, help="Directory to triage PDFs from.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--tick-ms",
        type=_positive_int,
        default=None,
        help=f"Input poll interval in milliseconds (default: {config.DEFAULT_TICK_MS}).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write the log to this file.")
    parser.add_argument("--debug", action="store_true", help="Log at debug level.")
    return parser


def build_app(args: argparse.Namespace) -> App:
    """Create the app from CLI arguments with config fallbacks."""
    managed_dir = args.managed if args.managed is not None else config.load_managed_dir()
    unmanaged_dir = args.unmanaged if args.unmanaged is not None else config.load_unmanaged_dir()
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    return App(
        managed_dir,
        unmanaged_dir,
        key_config=config.load_key_config(),
        theme=resolve_theme(theme_name, no_color=args.no_color),
    )


def _terminal_stdin_fd() -> int | None:
    """File descriptor of stdin when it is an interactive terminal."""
    try:
        fd = sys.stdin.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run the inbox; return the process exit status."""
    args = build_parser().parse_args(argv)

    stdin_fd = _terminal_stdin_fd()
    if stdin_fd is None:
        print("pdfinbox: stdin is not a terminal", file=sys.stderr)
        return EXIT_NOT_A_TTY

    log_path = configure_logging(args.log_file, debug=args.debug)
    logger.info("starting pdfinbox (log: %s)", log_path)

    app = build_app(args)
    timing = RuntimeLoopTiming(
        args.tick_ms if args.tick_ms is not None else config.load_tick_ms()
    )
    if args.theme is not None:
        config.save_theme_name(normalize_theme_name(args.theme))
    if args.managed is not None or args.unmanaged is not None:
        config.save_directories(app.directories["Managed"], app.directories["Unmanaged"])

    try:
        terminal = TerminalController(stdin_fd, sys.stdout.fileno())
        app.request_reload()
        status = run_main_loop(app, terminal, stdin_fd, timing)
    except Exception as exc:
        # The terminal guard has already been released at this point.
        logger.exception("pdfinbox stopped on an unhandled error")
        app.close()
        print(f"pdfinbox: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logger.info("pdfinbox exited with status %d", status)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
