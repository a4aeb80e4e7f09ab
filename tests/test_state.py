from pathlib import Path

import pytest

from fewt.config import AppConfig, Mode
from fewt.state import AppState


@pytest.fixture
def config(tmp_path):
    return AppConfig(config_path=tmp_path / "cfg" / "config.toml")


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    (root / "b.txt").write_text("b")
    (root / "A.py").write_text("a")
    (root / "sub").mkdir()
    return root


def test_initial_state(config, tree):
    state = AppState(config, home=tree)
    assert state.current_dir == str(tree)
    assert state.dir_history == [str(tree)]
    assert state.copied_path == ""
    assert state.sort == "name"
    assert state.mode is Mode.ICON


def test_default_home_is_user_home(config):
    state = AppState(config)
    assert state.current_dir == str(Path.home())


def test_go_back_moves_to_parent_and_records_it(config, tree):
    sub = tree / "sub"
    state = AppState(config, home=sub)
    result = state.go_back()
    assert result == str(tree)
    assert state.current_dir == str(tree)
    assert state.dir_history == [str(sub), str(tree)]


def test_go_back_at_root_does_nothing(config):
    root = Path(Path.home().anchor)
    state = AppState(config, home=root)
    assert state.go_back() is None
    assert state.current_dir == str(root)
    assert state.dir_history == [str(root)]


def test_go_forward_pops_history(config, tree):
    state = AppState(config, home=tree)
    state.open_folder(tree / "sub")
    assert state.go_forward() == str(tree / "sub")
    assert state.go_forward() == str(tree)
    assert state.dir_history == []
    assert state.go_forward() is None
    assert state.current_dir == str(tree)


def test_open_folder_does_not_duplicate_history(config, tree):
    state = AppState(config, home=tree)
    state.open_folder(tree / "sub")
    state.open_folder(tree)
    state.open_folder(tree / "sub")
    assert state.dir_history == [str(tree), str(tree / "sub")]
    assert state.current_dir == str(tree / "sub")


def test_select_sidebar_item_leaves_history(config, tree):
    state = AppState(config, home=tree)
    state.select_sidebar_item(tree / "sub")
    assert state.current_dir == str(tree / "sub")
    assert state.dir_history == [str(tree)]


def test_copy_path(config, tree):
    state = AppState(config, home=tree)
    state.copy_path(tree / "b.txt")
    assert state.copied_path == str(tree / "b.txt")


def test_click_header_toggles_direction(config, tree):
    state = AppState(config, home=tree)
    state.click_header("extension")
    assert state.sort == "-extension"
    assert state.sort_down is True
    state.click_header("extension")
    assert state.sort == "extension"
    assert state.sort_down is False


def test_sort_indicator(config, tree):
    state = AppState(config, home=tree)
    assert state.sort_indicator("name") == "↑"
    assert state.sort_indicator("modified") == ""
    state.click_header("name")
    assert state.sort_indicator("name") == "↓"
    assert state.sort_indicator("extension") == ""


def test_entries_sorted_in_list_mode(config, tree):
    state = AppState(config, home=tree)
    state.mode = Mode.LIST
    names = [e.name for e in state.entries()]
    assert names == ["A.py", "b.txt", "sub"]
    state.click_header("name")
    names = [e.name for e in state.entries()]
    assert names == ["sub", "b.txt", "A.py"]


def test_entries_of_other_folder(config, tree):
    (tree / "sub" / "inner.md").write_text("x")
    state = AppState(config, home=tree)
    assert [e.name for e in state.entries(tree / "sub")] == ["inner.md"]


def test_entries_unsorted_in_icon_mode_lists_everything(config, tree):
    state = AppState(config, home=tree)
    assert sorted(e.name for e in state.entries()) == ["A.py", "b.txt", "sub"]


def test_entries_missing_folder_raises(config, tree):
    state = AppState(config, home=tree / "missing")
    with pytest.raises(FileNotFoundError):
        state.entries()