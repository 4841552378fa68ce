"""Entry point for the ``bm`` CLI."""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path

from . import __version__
from .environment import bookmarks_path, debug_requested, log_path
from .log import enable_file_logging, logger
from .persistence import BookmarkStore
from .preferences import DEFAULT_YAML

_POSIX_SNIPPET = (
    "bmcd() {\n"
    "    local dir\n"
    '    dir="$(bm "$@")" && [ -n "$dir" ] && cd -- "$dir"\n'
    "}\n"
)

# Wrapper functions that cd into whatever bm prints.  bm itself cannot change
# the parent shell's directory.
SHELL_SNIPPETS: dict[str, str] = {
    "bash": _POSIX_SNIPPET,
    "zsh": _POSIX_SNIPPET,
    "fish": (
        "function bmcd\n"
        "    set -l dir (bm $argv)\n"
        '    and test -n "$dir"\n'
        '    and cd -- "$dir"\n'
        "end\n"
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bm",
        description='Pick a bookmarked directory and print it, e.g. cd "$(bm)".',
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"bm-tui {__version__}",
    )
    parser.add_argument(
        "--file",
        "-f",
        type=str,
        help="Bookmarks file (default: $BM_BOOKMARKS_FILE or ~/.bm/bookmarks.toml)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write a debug log to ~/.bm/bm.log (also: BM_DEBUG=1)",
    )
    parser.add_argument(
        "--print-preferences",
        action="store_true",
        help="Print a commented preferences.yaml with the default settings and exit",
    )
    parser.add_argument(
        "--shell-init",
        choices=sorted(SHELL_SNIPPETS),
        help="Print a 'bmcd' shell function for the given shell and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the bookmark picker and print the chosen path."""
    args = _build_parser().parse_args(argv)

    # --print-preferences: starting point for ~/.bm/preferences.yaml
    if args.print_preferences:
        sys.stdout.write(DEFAULT_YAML)
        return

    # --shell-init: print the wrapper and exit without touching the terminal
    if args.shell_init:
        sys.stdout.write(SHELL_SNIPPETS[args.shell_init])
        return

    if args.debug or debug_requested():
        enable_file_logging(log_path())

    path = Path(args.file).expanduser() if args.file else bookmarks_path()
    store = BookmarkStore(path)

    try:
        from bm_tui.app import build_app

        app = build_app(store)
        selection = app.run()
    except KeyboardInterrupt:
        return
    except Exception:
        logger.debug("Fatal error in bm", exc_info=True)
        traceback.print_exc()
        sys.exit(1)

    if app.return_code:
        sys.exit(app.return_code)
    if selection is not None:
        print(selection)


if __name__ == "__main__":
    main()
