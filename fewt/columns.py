"""Miller-column browsing: a row of folders opened one after another."""

from __future__ import annotations

import logging
import os

__all__ = ["ColumnView", "parent_prefix", "preview_file"]

_log = logging.getLogger(__name__)

_LOAD_FAILED = "Failed to load file"


def parent_prefix(path: str) -> str:
    """Return everything up to and including the last "/", or "/" if there is none."""
    index = path.rfind("/")
    if index > 0:
        return path[: index + 1]
    return "/"


def preview_file(path: str | os.PathLike[str]) -> str:
    """Return a file's text, or a notice when it cannot be read as UTF-8."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError):
        return _LOAD_FAILED


class ColumnView:
    """The open columns, starting with the current folder.

    Clicking an entry opens it in a new column to the right, closing any
    columns that belonged to a sibling opened earlier.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.columns: list[str] = [str(root)]

    def sync(self, current_dir: str | os.PathLike[str]) -> None:
        """Start over from ``current_dir`` when it differs from the first column."""
        target = str(current_dir)
        if not self.columns or self.columns[0] != target:
            self.columns = [target]
        _log.info("%s", self.columns)

    def is_expanded(self, path: str | os.PathLike[str]) -> bool:
        """Whether a path is open as one of the columns."""
        return str(path) in self.columns

    def click(self, path: str | os.PathLike[str]) -> list[str]:
        """Open a path as a column, unless it is open already; return the columns."""
        target = str(path)
        if target in self.columns:
            return self.columns
        prefix = parent_prefix(target)
        match = next(
            (
                index
                for index, column in enumerate(self.columns)
                if column.startswith(prefix) and column != prefix
            ),
            None,
        )
        if match is not None:
            del self.columns[match:]
        self.columns.append(target)
        return self.columns