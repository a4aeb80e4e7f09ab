"""Navigation, clipboard and sorting state shared by the explorer views."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath

from fewt.config import AppConfig, Mode
from fewt.entries import FileEntry, get_entries

__all__ = ["AppState"]

_log = logging.getLogger(__name__)

_DEFAULT_SORT = "name"
_ARROW_DOWN = "↓"
_ARROW_UP = "↑"


class AppState:
    """What the explorer is showing: current folder, history, sort and mode.

    ``sort`` is a key such as "name" or "-extension"; a leading "-" means
    descending. ``copied_path`` is the path last picked from a context menu.
    """

    def __init__(self, config: AppConfig, home: str | os.PathLike[str] | None = None) -> None:
        start = str(home) if home is not None else str(Path.home())
        self.config = config
        self.current_dir: str = start
        self.dir_history: list[str] = [start]
        self.copied_path: str = ""
        self.sort: str = _DEFAULT_SORT
        self.sort_down: bool = False
        self.mode: Mode = Mode.ICON

    def go_back(self) -> str | None:
        """Move to the parent folder and record it; None when there is none."""
        path = PurePath(self.current_dir)
        parent = path.parent
        if not self.current_dir or parent == path:
            _log.warning("No back directories remaining in stack")
            return None
        self.current_dir = str(parent)
        self.dir_history.append(self.current_dir)
        return self.current_dir

    def go_forward(self) -> str | None:
        """Move to the folder popped from the history; None when it is empty."""
        if not self.dir_history:
            _log.warning("No forward directories left in stack")
            return None
        self.current_dir = self.dir_history.pop()
        return self.current_dir

    def open_folder(self, path: str | os.PathLike[str]) -> None:
        """Enter a folder, adding it to the history if it is not there yet."""
        target = str(path)
        self.current_dir = target
        if target not in self.dir_history:
            self.dir_history.append(target)

    def select_sidebar_item(self, path: str | os.PathLike[str]) -> None:
        """Jump to a side bar location without touching the history."""
        self.current_dir = str(path)

    def copy_path(self, path: str | os.PathLike[str]) -> None:
        """Remember the path a context menu was opened on."""
        self.copied_path = str(path)

    def entries(self, dir_path: str | os.PathLike[str] | None = None) -> list[FileEntry]:
        """List a folder (the current one by default); sorted only in list mode."""
        target = dir_path if dir_path is not None else self.current_dir
        sort = self.sort if self.mode is Mode.LIST else None
        return get_entries(target, sort)

    def click_header(self, header: str) -> None:
        """Sort by a list column, flipping the direction on every click."""
        self.sort = header if self.sort_down else f"-{header}"
        self.sort_down = not self.sort_down

    def sort_indicator(self, header: str) -> str:
        """Return the arrow shown beside a column header, or "" if unsorted."""
        if self.sort.lstrip("-") != header:
            return ""
        return _ARROW_DOWN if self.sort_down else _ARROW_UP