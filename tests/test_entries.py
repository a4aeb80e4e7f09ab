import os
from pathlib import Path

import pytest

from fewt.entries import FileEntry, format_modified, get_entries, sort_entries
from fewt.filetypes import FileType

EPOCH = "1970-01-01 00:00:00"


def make_entry(name, is_dir=False, modified="--", extension=FileType.NONE):
    return FileEntry(
        name=name,
        path=Path("/tmp") / name,
        is_dir=is_dir,
        modified=modified,
        extension=extension,
    )


def names(entries):
    return [e.name for e in entries]


def test_format_modified_unknown_is_dashes():
    assert format_modified(None) == "--"


def test_format_modified_epoch():
    assert format_modified(0) == EPOCH


def test_from_path_reads_file(tmp_path):
    target = tmp_path / "notes.MD"
    target.write_text("hello")
    os.utime(target, (0, 0))
    entry = FileEntry.from_path(target)
    assert entry.name == "notes.MD"
    assert entry.path == target
    assert entry.path_string == str(target)
    assert entry.is_dir is False
    assert entry.extension is FileType.MARKDOWN
    assert entry.modified == EPOCH


def test_from_path_without_extension(tmp_path):
    target = tmp_path / "Makefile"
    target.write_text("")
    assert FileEntry.from_path(target).extension is FileType.NONE


def test_from_path_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileEntry.from_path(tmp_path / "absent.txt")


def test_from_path_without_name_raises():
    with pytest.raises(ValueError):
        FileEntry.from_path("/")


def test_get_entries_lists_directory(tmp_path):
    (tmp_path / "a.py").write_text("x")
    (tmp_path / "sub").mkdir()
    entries = {e.name: e for e in get_entries(tmp_path)}
    assert set(entries) == {"a.py", "sub"}
    assert entries["sub"].is_dir is True
    assert entries["a.py"].is_dir is False
    assert entries["a.py"].extension is FileType.PYTHON
    assert entries["a.py"].path == tmp_path / "a.py"


def test_get_entries_sorted_by_name(tmp_path):
    for name in ["b.txt", "A.txt", "c.txt"]:
        (tmp_path / name).write_text("")
    assert names(get_entries(tmp_path, "name")) == ["A.txt", "b.txt", "c.txt"]
    assert names(get_entries(str(tmp_path), "-name")) == ["c.txt", "b.txt", "A.txt"]


def test_get_entries_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_entries(tmp_path / "nope")


def test_sort_by_name_ignores_case():
    entries = [make_entry("b"), make_entry("A"), make_entry("c")]
    assert names(sort_entries(entries, "name")) == ["A", "b", "c"]
    assert names(sort_entries(entries, "-name")) == ["c", "b", "A"]


def test_sort_by_modified():
    entries = [
        make_entry("x", modified="2021-01-01 00:00:00"),
        make_entry("y", modified="2020-01-01 00:00:00"),
        make_entry("z", modified="2022-01-01 00:00:00"),
    ]
    assert names(sort_entries(entries, "modified")) == ["y", "x", "z"]
    assert names(sort_entries(entries, "-modified")) == ["z", "x", "y"]


def test_sort_by_extension_keeps_folders_first():
    entries = [
        make_entry("song.mp3", extension=FileType.MP3),
        make_entry("beta", is_dir=True),
        make_entry("code.rs", extension=FileType.RUST),
        make_entry("alpha", is_dir=True),
        make_entry("clip.mp3", extension=FileType.MP3),
    ]
    ascending = sort_entries(entries, "extension")
    descending = sort_entries(entries, "-extension")
    assert names(ascending) == ["alpha", "beta", "clip.mp3", "song.mp3", "code.rs"]
    assert names(descending) == ["beta", "alpha", "code.rs", "song.mp3", "clip.mp3"]
    for ordered in (ascending, descending):
        flags = [e.is_dir for e in ordered]
        assert flags == sorted(flags, reverse=True)


def test_unknown_or_missing_sort_keeps_order():
    entries = [make_entry("b"), make_entry("a"), make_entry("c")]
    assert names(sort_entries(entries, "size")) == ["b", "a", "c"]
    assert names(sort_entries(entries, None)) == ["b", "a", "c"]


def test_sort_does_not_modify_input():
    entries = [make_entry("b"), make_entry("a")]
    sort_entries(entries, "name")
    assert names(entries) == ["b", "a"]