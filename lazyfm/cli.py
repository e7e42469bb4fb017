"""Command-line front door for lazyfm.

Parses CLI options, merges them over the config file, resolves the start
directory, and dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_settings
from .directory_model import SortPolicy
from .runtime import run_browser

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_float(value: str) -> float:
    """argparse type for non-negative seconds."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _sort_policy(value: str) -> SortPolicy:
    try:
        return SortPolicy.from_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse directories in a three-pane terminal view.")
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument(
        "--sort",
        type=_sort_policy,
        default=None,
        help=f"Sort policy ({', '.join(policy.value for policy in SortPolicy)}).",
    )
    parser.add_argument(
        "--no-wrap",
        dest="wrap",
        action="store_const",
        const=False,
        default=None,
        help="Stop the cursor at the first/last entry instead of wrapping around.",
    )
    parser.add_argument(
        "--refresh-seconds",
        type=_nonnegative_float,
        default=None,
        help="Minimum age before a listing is re-read on a tick (0 = every tick).",
    )
    parser.add_argument("--tick-ms", type=_positive_int, default=None, help="Refresh tick interval in milliseconds.")
    parser.add_argument("--style", default=None, help="Pygments style name for file previews.")
    parser.add_argument("--editor", default=None, help="Command used to open files (default: $VISUAL/$EDITOR).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--print-last-dir",
        action="store_true",
        help="Print the last focused directory on exit (for shell cd wrappers).",
    )
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write diagnostics to PATH.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="Log level for --log-file.")
    return parser


def configure_logging(log_file: str | None, level: str) -> None:
    """Send logs to ``log_file``; without one the package stays silent."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazyfm on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    configure_logging(args.log_file, args.log_level)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    settings = load_settings().with_overrides(
        sort_policy=args.sort,
        wrap=args.wrap,
        refresh_seconds=args.refresh_seconds,
        tick_ms=args.tick_ms,
        style=args.style,
        editor=args.editor,
    )
    last_dir = run_browser(path.resolve(), settings, args.no_color)
    if args.print_last_dir:
        sys.stdout.write(f"{last_dir}\n")


if __name__ == "__main__":
    main()
