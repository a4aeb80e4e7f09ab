"""Directory entries and their listing and sorting."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from fewt.filetypes import FileType, detect_extension

__all__ = ["FileEntry", "format_modified", "sort_entries", "get_entries"]

_MISSING_DATE = "--"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_modified(timestamp: float | None) -> str:
    """Format a modification time as a UTC date, or "--" when it is unknown."""
    if timestamp is None:
        return _MISSING_DATE
    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return _MISSING_DATE
    return moment.strftime(_DATE_FORMAT)


def _file_type_for(path: Path) -> FileType:
    suffix = path.suffix
    if not suffix:
        return FileType.NONE
    return detect_extension(suffix[1:])


@dataclass(frozen=True)
class FileEntry:
    """A file or folder as shown in the explorer."""

    name: str
    path: Path
    is_dir: bool
    modified: str
    extension: FileType

    @property
    def path_string(self) -> str:
        return str(self.path)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> FileEntry:
        """Build an entry from a path on disk, following symbolic links."""
        path = Path(path)
        if not path.name:
            raise ValueError(f"path has no file name: {path}")
        info = path.stat()
        return cls(
            name=path.name,
            path=path,
            is_dir=path.is_dir(),
            modified=format_modified(info.st_mtime),
            extension=_file_type_for(path),
        )

    @classmethod
    def _from_dir_entry(cls, entry: os.DirEntry[str]) -> FileEntry:
        info = entry.stat(follow_symlinks=False)
        path = Path(entry.path)
        return cls(
            name=entry.name,
            path=path,
            is_dir=entry.is_dir(follow_symlinks=False),
            modified=format_modified(info.st_mtime),
            extension=_file_type_for(path),
        )


def sort_entries(entries: list[FileEntry], sort: str | None) -> list[FileEntry]:
    """Return entries ordered by a sort key such as "name" or "-extension".

    A leading "-" sorts in descending order. Recognised keys are "name",
    "extension" (folders always first) and "modified"; any other key keeps
    the given order.
    """
    items = list(entries)
    if not sort:
        return items
    descending = sort.startswith("-")
    key = sort.lstrip("-")
    if key == "name":
        return sorted(items, key=lambda e: e.name.lower(), reverse=descending)
    if key == "modified":
        return sorted(items, key=lambda e: e.modified.lower(), reverse=descending)
    if key == "extension":
        by_type = sorted(
            items,
            key=lambda e: (str(e.extension).lower(), e.name.lower()),
            reverse=descending,
        )
        return sorted(by_type, key=lambda e: not e.is_dir)
    return items


def get_entries(dir_path: str | os.PathLike[str], sort: str | None = None) -> list[FileEntry]:
    """List a directory, skipping entries whose metadata cannot be read."""
    files = []
    with os.scandir(dir_path) as scan:
        for item in scan:
            try:
                files.append(FileEntry._from_dir_entry(item))
            except OSError:
                continue
    return sort_entries(files, sort)