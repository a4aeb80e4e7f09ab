from pathlib import Path

from fewt.columns import ColumnView, parent_prefix, preview_file


def test_parent_prefix_keeps_trailing_slash():
    assert parent_prefix("/home/user/docs") == "/home/user/"


def test_parent_prefix_of_top_level_and_bare_names():
    assert parent_prefix("/docs") == "/"
    assert parent_prefix("docs") == "/"


def test_new_view_holds_only_root():
    view = ColumnView("/r")
    assert view.columns == ["/r"]
    assert view.is_expanded("/r")
    assert not view.is_expanded("/r/a")


def test_click_appends_child():
    view = ColumnView("/r")
    assert view.click("/r/a") == ["/r", "/r/a"]
    assert view.is_expanded("/r/a")


def test_click_sibling_replaces_previous_sibling():
    view = ColumnView("/r")
    view.click("/r/a")
    view.click("/r/b")
    assert view.columns == ["/r", "/r/b"]


def test_click_deeper_then_back_to_sibling():
    view = ColumnView("/r")
    view.click("/r/b")
    view.click("/r/b/c")
    assert view.columns == ["/r", "/r/b", "/r/b/c"]
    view.click("/r/a")
    assert view.columns == ["/r", "/r/a"]


def test_click_on_open_column_changes_nothing():
    view = ColumnView("/r")
    view.click("/r/a")
    view.click("/r/a/x")
    before = list(view.columns)
    assert view.click("/r/a") == before


def test_sync_with_same_root_keeps_columns():
    view = ColumnView("/r")
    view.click("/r/a")
    view.sync("/r")
    assert view.columns == ["/r", "/r/a"]


def test_sync_with_new_root_resets():
    view = ColumnView("/r")
    view.click("/r/a")
    view.sync(Path("/other"))
    assert view.columns == [str(Path("/other"))]


def test_preview_reads_text(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("line one\nline two\n", encoding="utf-8")
    assert preview_file(target) == "line one\nline two\n"


def test_preview_missing_file(tmp_path):
    assert preview_file(tmp_path / "absent.txt") == "Failed to load file"


def test_preview_binary_file(tmp_path):
    target = tmp_path / "blob.bin"
    target.write_bytes(b"\xff\xfe\x00\x80")
    assert preview_file(target) == "Failed to load file"