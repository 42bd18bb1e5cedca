"""Pytest fixtures for tui-file-dialog tests."""

from pathlib import Path

import pytest

from tui_file_dialog import FileDialog


@pytest.fixture
def tree(tmp_path) -> Path:
    """Create a small directory to browse.

    Sets up:
    - a.toml, b.txt
    - sub/inner.toml
    """
    root = tmp_path / "x"
    root.mkdir()
    (root / "a.toml").write_text("a = 1\n")
    (root / "b.txt").write_text("b\n")
    (root / "sub").mkdir()
    (root / "sub" / "inner.toml").write_text("inner = true\n")
    return root.resolve()


@pytest.fixture
def hidden_tree(tree) -> Path:
    """Extend the tree with dot-entries (.git/ and .env)."""
    (tree / ".git").mkdir()
    (tree / ".env").write_text("SECRET=1\n")
    return tree


@pytest.fixture
def make_dialog(tree):
    """Factory for dialogs rooted at the sample tree."""
    def _make(**kwargs) -> FileDialog:
        kwargs.setdefault("directory", tree)
        return FileDialog(**kwargs)

    return _make


def move_to(dialog: FileDialog, entry: str) -> None:
    """Put the dialog cursor on the given entry."""
    target = dialog.items.index(entry)
    dialog.move_previous()
    while dialog.cursor < target:
        dialog.move_next()


@pytest.fixture
def cursor_to():
    """Helper to position the dialog cursor on an entry."""
    return move_to
