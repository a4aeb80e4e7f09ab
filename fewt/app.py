"""Command-line front end: list a folder in icon, list or column layout."""

from __future__ import annotations

import argparse
import logging
import stat
import sys
from pathlib import Path

from fewt.columns import ColumnView, preview_file
from fewt.config import AppConfig, Mode
from fewt.shell import ShellSession
from fewt.state import AppState

__all__ = ["render_listing", "main"]

_log = logging.getLogger(__name__)

_HEADERS = (("name", "Name"), ("extension", "Type"), ("modified", "Last Modified"))
_FOLDER_MARK = "→"


def _render_icons(state: AppState) -> str:
    return "\n".join(
        f"{entry.name}/" if entry.is_dir else entry.name for entry in state.entries()
    )


def _render_list(state: AppState) -> str:
    header = tuple(
        f"{state.sort_indicator(key)} {title}".strip() for key, title in _HEADERS
    )
    rows = [
        (
            f"{_FOLDER_MARK} {entry.name}" if entry.is_dir else entry.name,
            "Folder" if entry.is_dir else str(entry.extension),
            entry.modified,
        )
        for entry in state.entries()
    ]
    table = [header, *rows]
    widths = [max(map(len, column)) for column in zip(*table)]
    return "\n".join(
        "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in table
    )


def _render_columns(view: ColumnView, state: AppState) -> str:
    blocks = []
    for column in view.columns:
        path = Path(column)
        if stat.S_ISDIR(path.stat().st_mode):
            lines = [
                (f"{entry.name}/" if entry.is_dir else entry.name)
                + (f" {_FOLDER_MARK}" if view.is_expanded(entry.path_string) else "")
                for entry in state.entries(column)
            ]
        else:
            lines = [preview_file(path), f"-- {path.name} --"]
        blocks.append("\n".join([f"[{column}]", *lines]))
    return "\n\n".join(blocks)


def render_listing(state: AppState) -> str:
    """Render the current folder in the state's layout mode."""
    if state.mode is Mode.LIST:
        return _render_list(state)
    if state.mode is Mode.COLUMN:
        return _render_columns(ColumnView(state.current_dir), state)
    return _render_icons(state)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fewt", description="Browse a folder.")
    parser.add_argument("path", nargs="?", help="folder to show (default: home)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=Mode.ICON.value,
        help="layout of the listing",
    )
    parser.add_argument("--sort", help='list sort key, e.g. "name" or "-modified"')
    parser.add_argument("--config", help="configuration file to use")
    parser.add_argument(
        "--expand",
        action="append",
        default=[],
        metavar="PATH",
        help="open a path as a column (column mode)",
    )
    parser.add_argument(
        "--run",
        action="append",
        default=[],
        metavar="COMMAND",
        help="run a shell command before listing",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        config = AppConfig.load(args.config)
    except (OSError, ValueError) as error:
        print(f"fewt: cannot load configuration: {error}", file=sys.stderr)
        return 1

    home = Path(args.path).expanduser() if args.path else None
    state = AppState(config, home=home)
    state.mode = Mode(args.mode)
    if args.sort:
        state.sort = args.sort

    if args.run:
        with ShellSession() as shell:
            for command in args.run:
                output = shell.send_command(command)
                if output:
                    print(output)
                if shell.current_dir:
                    state.current_dir = shell.current_dir

    try:
        if state.mode is Mode.COLUMN:
            view = ColumnView(state.current_dir)
            for path in args.expand:
                view.click(path)
            listing = _render_columns(view, state)
        else:
            listing = render_listing(state)
    except OSError as error:
        print(f"fewt: {error}", file=sys.stderr)
        return 1
    if listing:
        print(listing)
    return 0


if __name__ == "__main__":
    sys.exit(main())