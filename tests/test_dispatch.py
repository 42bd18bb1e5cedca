"""Tests for the default key bindings."""

import shutil

import pytest
import readchar

from tui_file_dialog import DispatchResult, KeyBindingDispatcher, dispatch
from tui_file_dialog import keys


class HostRecorder:
    """Host key handler that records what it was given."""

    def __init__(self, dialog=None, open_key=None):
        self.dialog = dialog
        self.open_key = open_key
        self.keys = []

    def __call__(self, key):
        self.keys.append(key)
        if self.dialog is not None and key == self.open_key:
            self.dialog.open()


class TestKeys:
    def test_close_keys(self):
        assert keys.is_close("q")
        assert keys.is_close(readchar.key.ESC)
        assert not keys.is_close("Q")

    def test_navigation_keys(self):
        assert keys.is_down("j") and keys.is_down(readchar.key.DOWN)
        assert keys.is_up("k") and keys.is_up(readchar.key.UP)
        assert not keys.is_down("J")

    def test_enter_variations(self):
        assert keys.is_enter("\r")
        assert keys.is_enter("\n")
        assert keys.is_enter(readchar.key.ENTER)

    def test_toggle_hidden_is_capital_i(self):
        assert keys.is_toggle_hidden("I")
        assert not keys.is_toggle_hidden("i")


class TestClosedDialog:
    def test_passes_key_to_host(self, make_dialog):
        dialog = make_dialog()
        host = HostRecorder()
        result = dispatch(dialog, "x", host_handler=host)
        assert result == DispatchResult.pass_through("x")
        assert not result.consumed
        assert host.keys == ["x"]

    def test_dialog_keys_do_not_act_while_closed(self, tree, make_dialog):
        dialog = make_dialog()
        dispatch(dialog, "u")
        assert dialog.current_dir == tree

    def test_host_can_open_dialog(self, make_dialog):
        dialog = make_dialog()
        host = HostRecorder(dialog, open_key="o")
        dispatch(dialog, "o", host_handler=host)
        assert dialog.is_open

    def test_without_host_handler(self, make_dialog):
        result = dispatch(make_dialog(), "z")
        assert result.event == "z"


class TestOpenDialog:
    @pytest.fixture
    def dialog(self, make_dialog):
        dialog = make_dialog()
        dialog.open()
        return dialog

    def test_keys_never_reach_host(self, dialog):
        host = HostRecorder()
        for key in ["j", "k", "x", "?", "q"]:
            result = dispatch(dialog, key, host_handler=host)
            assert result == DispatchResult.consumed_key()
        assert host.keys == []

    @pytest.mark.parametrize("key", ["q", readchar.key.ESC])
    def test_close(self, dialog, key):
        dispatch(dialog, key)
        assert not dialog.is_open

    def test_move_down_and_up(self, dialog):
        dispatch(dialog, "j")
        assert dialog.cursor == 1
        dispatch(dialog, readchar.key.DOWN)
        assert dialog.cursor == 2
        dispatch(dialog, "k")
        assert dialog.cursor == 1
        dispatch(dialog, readchar.key.UP)
        assert dialog.cursor == 0

    def test_enter_opens_directory(self, tree, dialog):
        dispatch(dialog, "j")
        dispatch(dialog, readchar.key.ENTER)
        assert dialog.current_dir == tree / "sub"

    def test_enter_picks_file(self, tree, dialog):
        for key in ["j", "j", "\r"]:
            dispatch(dialog, key)
        assert not dialog.is_open
        assert dialog.collect_selection() == [tree / "a.toml"]

    def test_up_directory(self, tree, dialog):
        dispatch(dialog, "j")
        dispatch(dialog, "\r")
        dispatch(dialog, "u")
        assert dialog.current_dir == tree

    def test_toggle_hidden(self, hidden_tree, dialog):
        dispatch(dialog, "I")
        assert ".git/" in dialog.items
        dispatch(dialog, "i")
        assert dialog.show_hidden

    def test_space_ignored_in_single_mode(self, dialog):
        dispatch(dialog, "j")
        dispatch(dialog, " ")
        assert dialog.selected_indices == frozenset()

    def test_unknown_key_is_ignored(self, tree, dialog):
        dispatch(dialog, "x")
        assert dialog.is_open
        assert dialog.cursor is None
        assert dialog.current_dir == tree

    def test_navigation_error_propagates(self, tree, dialog):
        (tree / "gone").mkdir()
        dispatch(dialog, "I")
        dispatch(dialog, "I")
        assert dialog.current_entry() == "gone/"
        shutil.rmtree(tree / "gone")
        with pytest.raises(OSError):
            dispatch(dialog, "\r")
        assert dialog.current_dir == tree


class TestMultiSelection:
    def test_space_toggles_current_row(self, tree, make_dialog):
        dialog = make_dialog(multi_selection=True)
        dialog.open()
        for key in ["j", "j", " ", "j", " ", " "]:
            dispatch(dialog, key)
        assert dialog.selected_indices == {2}
        dispatch(dialog, "q")
        assert dialog.collect_selection() == [tree / "a.toml"]


class TestKeyBindingDispatcher:
    def test_wraps_dialog_and_host(self, make_dialog):
        dialog = make_dialog()
        host = HostRecorder(dialog, open_key="o")
        dispatcher = KeyBindingDispatcher(dialog, host)

        assert dispatcher("o") == DispatchResult.pass_through("o")
        assert dialog.is_open
        assert dispatcher.dispatch("o") == DispatchResult.consumed_key()
        assert host.keys == ["o"]
