"""Context menus and the actions their items trigger."""

from __future__ import annotations

import io
import logging
import os
import shutil
import subprocess
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from fewt.config import Genre, Mode
from fewt.state import AppState

__all__ = [
    "MenuItem",
    "ContextMenu",
    "ImageData",
    "SEPARATOR",
    "entry_menu",
    "side_bar_menu",
    "mode_menu",
    "copy_image",
    "handle_menu_event",
]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuItem:
    """One line of a context menu, identified by the event it sends."""

    id: str
    text: str
    enabled: bool = True
    separator: bool = False


SEPARATOR = MenuItem(id="separator", text="", enabled=False, separator=True)


@dataclass(frozen=True)
class ContextMenu:
    """An ordered set of menu items."""

    items: tuple[MenuItem, ...]

    @property
    def ids(self) -> list[str]:
        """Event ids of the selectable items, in order."""
        return [item.id for item in self.items if not item.separator]

    def text_of(self, item_id: str) -> str:
        """Return the label of the item with this id."""
        for item in self.items:
            if item.id == item_id and not item.separator:
                return item.text
        raise KeyError(item_id)


@dataclass(frozen=True)
class ImageData:
    """An image as raw RGBA pixels."""

    width: int
    height: int
    rgba: bytes


def entry_menu() -> ContextMenu:
    """The menu for a file or folder."""
    return ContextMenu(
        (
            MenuItem("copy", "Copy"),
            MenuItem("paste", "Paste"),
            SEPARATOR,
            MenuItem("add-favourite", "Add to Favourites"),
            MenuItem("add-quick-access", "Add to Quick Access"),
        )
    )


def side_bar_menu(category: Genre) -> ContextMenu:
    """The menu for a side bar location in the given list."""
    if category is Genre.FAVOURITES:
        item = MenuItem("remove-favourite", "Remove from Favourites")
    else:
        item = MenuItem("remove-quick-access", "Remove from Quick Access")
    return ContextMenu((item,))


def mode_menu() -> ContextMenu:
    """The menu that switches the explorer layout."""
    return ContextMenu(
        (
            MenuItem("icon-mode", "Icon Mode"),
            MenuItem("list-mode", "List Mode"),
            MenuItem("column-mode", "Column Mode"),
        )
    )


def _png_bytes(image: ImageData) -> bytes:
    buffer = io.BytesIO()
    Image.frombytes("RGBA", (image.width, image.height), image.rgba).save(buffer, format="PNG")
    return buffer.getvalue()


def _set_clipboard_image(image: ImageData) -> None:
    png = _png_bytes(image)
    if sys.platform == "darwin" and shutil.which("osascript"):
        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as handle:
            handle.write(png)
            name = handle.name
        try:
            script = f'set the clipboard to (read (POSIX file "{name}") as «class PNGf»)'
            subprocess.run(["osascript", "-e", script], check=True)
        finally:
            os.unlink(name)
        return
    for command in (
        ["wl-copy", "--type", "image/png"],
        ["xclip", "-selection", "clipboard", "-t", "image/png", "-i"],
    ):
        if shutil.which(command[0]):
            subprocess.run(command, input=png, check=True)
            return
    raise RuntimeError("Failed to copy image: no clipboard tool available")


def copy_image(path: str | os.PathLike[str]) -> ImageData:
    """Load an image, put it on the clipboard and return its pixels.

    Raises the image library's error when the file is not an image and
    RuntimeError when no clipboard is reachable.
    """
    with Image.open(path) as source:
        rgba = source.convert("RGBA")
    data = ImageData(width=rgba.width, height=rgba.height, rgba=rgba.tobytes())
    _set_clipboard_image(data)
    return data


_MODE_EVENTS = {
    "icon-mode": Mode.ICON,
    "list-mode": Mode.LIST,
    "column-mode": Mode.COLUMN,
}

_ADD_EVENTS = {
    "add-favourite": Genre.FAVOURITES,
    "add-quick-access": Genre.QUICK_ACCESS,
}

_REMOVE_EVENTS = {
    "remove-favourite": Genre.FAVOURITES,
    "remove-quick-access": Genre.QUICK_ACCESS,
}


def handle_menu_event(state: AppState, event_id: str) -> bool:
    """Carry out a menu choice on the copied path; False for unknown ids."""
    copied = Path(state.copied_path)
    if event_id == "copy":
        copy_image(copied)
    elif event_id in _ADD_EVENTS:
        state.config.add_entry(copied, _ADD_EVENTS[event_id])
    elif event_id in _REMOVE_EVENTS:
        state.config.remove_entry(copied, _REMOVE_EVENTS[event_id])
    elif event_id in _MODE_EVENTS:
        state.mode = _MODE_EVENTS[event_id]
    else:
        _log.debug("Ignoring menu event %s", event_id)
        return False
    return True