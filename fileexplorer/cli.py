"""Command-line front door for fileexplorer.

Parses CLI options, applies persisted preferences, and configures logging.
Then dispatches into the interactive explorer session or a one-shot listing.
"""

from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path

from . import config
from .console import Console
from .explorer import Explorer
from .logging_setup import configure_logging
from .render import resolve_theme


def _log_level(value: str) -> str:
    """argparse type for logging level names."""
    normalized = config.normalize_log_level(value)
    if normalized is None:
        choices = ", ".join(config.LOG_LEVEL_NAMES)
        raise argparse.ArgumentTypeError(f"invalid log level: {value!r} (choose from {choices})")
    return normalized


def _directory_or_exit(path: Path) -> Path:
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    return path.resolve()


def render_listing(path: Path, no_color: bool) -> str:
    """Render one directory listing for ``path`` through the session code path."""
    out = io.StringIO()
    explorer = Explorer(path, Console(stdin=io.StringIO(), stdout=out), theme=resolve_theme(no_color))
    explorer.list_directory_with_properties()
    return out.getvalue()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse, copy, delete, and create files from an interactive menu."
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--list", metavar="PATH", help="Print one listing of PATH and exit.")
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help=f"Diagnostic log level ({', '.join(config.LOG_LEVEL_NAMES)}).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append diagnostic logs to FILE.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Store --no-color and --log-level in the config file as future defaults.",
    )
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run the explorer.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Any ``OSError`` from the session ends the process with
    a non-zero status.
    """
    args = build_parser().parse_args()

    if args.save_defaults:
        config.save_no_color(args.no_color)
        config.save_log_level(args.log_level)

    log_level = args.log_level if args.log_level is not None else config.load_log_level()
    try:
        configure_logging(log_level, args.log_file)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Cannot configure logging: {exc}") from exc

    console = Console()
    no_color = args.no_color or config.load_no_color() or not console.is_interactive()

    if args.list is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --list.")
        target = _directory_or_exit(Path(args.list))
        try:
            sys.stdout.write(render_listing(target, no_color))
        except OSError as exc:
            raise SystemExit(f"Error listing directory: {exc}") from exc
        return

    if default_path is None:
        default_path = Path.cwd()
    path = _directory_or_exit(Path(args.path or default_path))

    explorer = Explorer(path, console, theme=resolve_theme(no_color))
    try:
        explorer.run()
    except OSError as exc:
        raise SystemExit(f"Error running file explorer: {exc}") from exc


if __name__ == "__main__":
    main()
