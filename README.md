# fewt

fewt is a small file explorer for the terminal and for use as a library.
It lists folders with human-readable file types and UTC modification
times, sorts listings by name, type or date, keeps quick-access folders and
favourites in a TOML configuration file, offers a column view for drilling
into nested folders, and can run commands in a long-lived `sh` session.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
fewt [PATH] [--mode {icon,list,column}] [--sort KEY] [--config FILE]
     [--expand PATH ...] [--run COMMAND ...]
```

With no `PATH`, `fewt` lists your home folder.

- `--mode icon` (the default) prints one name per line, folders with a
  trailing `/`.
- `--mode list` prints a table with Name, Type and Last Modified columns;
  folders are marked with `→` and have the type `Folder`. `--sort` chooses
  the order: `name` (the default), `extension` or `modified`, with a leading
  `-` for descending order, e.g. `--sort -modified`. Sorting applies in
  list mode only; the other modes show folder order as the system gives it.
- `--mode column` prints one block per open column. `--expand PATH` (may be
  repeated) opens a path as a further column; a folder column lists its
  contents, a file column shows the file's text.
- `--config FILE` uses another configuration file.
- `--run COMMAND` (may be repeated) runs a command in an `sh` session before
  listing and prints what it wrote to standard output. After a command that
  starts with `cd`, the listing is of the folder the shell moved to.

The command exits with status 1 when the configuration cannot be loaded or
the folder cannot be read.

## Using it as a library

```python
from fewt.filetypes import detect_extension
from fewt.entries import FileEntry, get_entries
from fewt.config import AppConfig, Genre

print(detect_extension("md"))            # Markdown Document

for entry in get_entries(".", "-modified"):
    print(entry.name, entry.extension, entry.modified)

config = AppConfig.load()
config.add_entry("/tmp", Genre.FAVOURITES)
```

- `fewt.filetypes`: `FileType` (its `str()` is the description, e.g.
  `"PNG Image"`; `FileType.NONE` is `"File"`, `FileType.UNKNOWN` is
  `"Unknown"`) and `detect_extension(ext)`, which ignores case.
- `fewt.entries`: `FileEntry` (`name`, `path`, `path_string`, `is_dir`,
  `modified`, `extension`; `FileEntry.from_path(path)`),
  `get_entries(dir_path, sort=None)`, `sort_entries(entries, sort)` and
  `format_modified(timestamp)`, which gives `"%Y-%m-%d %H:%M:%S"` in UTC or
  `"--"`. Sorting by `extension` always puts folders first. Entries whose
  metadata cannot be read are skipped.
- `fewt.config`: `AppConfig` with the `quick_access`, `favourites` and
  `tags` lists, `Genre`, `Mode` and `default_config_path()`. The file is
  `config.toml` in the platform's user configuration folder. If it does not
  exist, `AppConfig.load()` creates it with the desktop, documents,
  downloads and videos folders in quick access. An invalid file raises
  `ValueError`. `add_entry` and `remove_entry` save the file straight away.
- `fewt.state`: `AppState` holds the current folder, the history,
  the layout mode, the sort key and the last copied path, with
  `go_back`, `go_forward`, `open_folder`, `select_sidebar_item`,
  `copy_path`, `entries`, `click_header` and `sort_indicator`.
- `fewt.columns`: `ColumnView` (`sync`, `is_expanded`, `click`),
  `parent_prefix(path)` and `preview_file(path)`, which returns
  `"Failed to load file"` for files that are not UTF-8 text.
- `fewt.menu`: the context menus as data (`entry_menu()`,
  `side_bar_menu(category)`, `mode_menu()`, each a `ContextMenu` of
  `MenuItem`s) and `handle_menu_event(state, event_id)`, which carries out a
  choice on the state's copied path and returns `False` for ids it does not
  know. The `copy` item calls `copy_image(path)`, which puts the image on
  the clipboard with `osascript` on macOS, or `wl-copy` or `xclip`
  elsewhere, and raises `RuntimeError` if none is available.
- `fewt.app`: `render_listing(state)` and `main(argv=None)`.

### Shell sessions

```python
from fewt.shell import ShellSession

with ShellSession() as shell:
    print(shell.send_command("echo hello"))
    shell.send_command("cd /tmp")
    print(shell.current_dir)
```

`send_command` waits `delay` seconds (0.1 by default) and returns the lines
the shell printed in that time; standard error is discarded.
`terminal_output_script(text)` wraps output in a
`window.displayTerminalOutput("...")` call for an embedded terminal.

## What it does not do

fewt has no graphical window: the command prints listings and exits. The
menus, the column view and the application state are there to be driven
from your own code; the command line offers only the options above.
Pasting from the clipboard is listed in the entry menu but does nothing.