"""Persistent application settings: quick access, favourites and tags."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import platformdirs
import toml

__all__ = ["Genre", "Mode", "AppConfig", "default_config_path"]

_APP_NAME = "fewt"
_CONFIG_FILE = "config.toml"
_LIST_KEYS = ("quick_access", "favourites", "tags")

_log = logging.getLogger(__name__)


class Genre(Enum):
    """Which side bar list a path belongs to."""

    FAVOURITES = "favourites"
    QUICK_ACCESS = "quick_access"


class Mode(Enum):
    """How the file explorer lays out a directory."""

    ICON = "icon"
    LIST = "list"
    COLUMN = "column"


def default_config_path() -> Path:
    """Return the per-user location of the configuration file."""
    return Path(platformdirs.user_config_dir(_APP_NAME, appauthor=False)) / _CONFIG_FILE


def _parse_paths(data: dict, key: str) -> list[Path]:
    if key not in data:
        raise ValueError(f"missing field `{key}` in configuration")
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"field `{key}` must be a list of paths")
    return [Path(item) for item in value]


@dataclass
class AppConfig:
    """The user's saved locations; changes are written back to its file."""

    quick_access: list[Path] = field(default_factory=list)
    favourites: list[Path] = field(default_factory=list)
    tags: list[Path] = field(default_factory=list)
    config_path: Path | None = field(default=None, compare=False, repr=False)

    @classmethod
    def default(cls) -> AppConfig:
        """Settings with the usual user folders in quick access."""
        quick_access = [
            Path(platformdirs.user_desktop_dir()),
            Path(platformdirs.user_documents_dir()),
            Path(platformdirs.user_downloads_dir()),
            Path(platformdirs.user_videos_dir()),
        ]
        return cls(quick_access=quick_access)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> AppConfig:
        """Read the configuration, creating a default file when there is none.

        Raises ValueError when the file is not a valid configuration.
        """
        config_path = Path(path) if path is not None else default_config_path()
        _log.info("Attempting to read from path: %s", config_path)
        if not config_path.exists():
            _log.warning("Config path does not exist, creating default at: %s", config_path)
            config = cls.default()
            config.save(config_path)
            return config

        data = toml.loads(config_path.read_text(encoding="utf-8"))
        config = cls(
            quick_access=_parse_paths(data, "quick_access"),
            favourites=_parse_paths(data, "favourites"),
            tags=_parse_paths(data, "tags"),
            config_path=config_path,
        )
        _log.info("Config found and loaded")
        return config

    def save(self, path: str | os.PathLike[str] | None = None) -> None:
        """Write the configuration as TOML, creating parent folders."""
        if path is not None:
            self.config_path = Path(path)
        elif self.config_path is None:
            self.config_path = default_config_path()
        target = self.config_path
        target.parent.mkdir(parents=True, exist_ok=True)
        document = {key: [str(p) for p in getattr(self, key)] for key in _LIST_KEYS}
        _log.info("Writing to path: %s", target)
        target.write_text(toml.dumps(document), encoding="utf-8")

    def _target_list(self, category: Genre) -> list[Path]:
        if category is Genre.FAVOURITES:
            return self.favourites
        return self.quick_access

    def add_entry(self, path: str | os.PathLike[str], category: Genre) -> None:
        """Add a path to a side bar list and save, unless it is already there."""
        path = Path(path)
        target = self._target_list(category)
        if path not in target:
            target.append(path)
            self.save()

    def remove_entry(self, path: str | os.PathLike[str], category: Genre) -> None:
        """Remove every occurrence of a path from a side bar list and save."""
        path = Path(path)
        target = self._target_list(category)
        target[:] = [p for p in target if p != path]
        self.save()