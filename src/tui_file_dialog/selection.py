"""Cursor and multi-selection bookkeeping.

SelectionState knows only how many rows the current listing has; it never
looks at the filesystem.
"""

from __future__ import annotations


class SelectionState:
    """Cursor position plus the set of chosen row indices."""

    def __init__(self, item_count: int = 0):
        self.item_count = item_count
        self.cursor: int | None = None
        self.selected: set[int] = set()

    def reset(self, item_count: int) -> None:
        """Adopt a new listing length and start over."""
        self.item_count = item_count
        self.reset_selection()

    def reset_selection(self) -> None:
        """Clear chosen rows and unset the cursor."""
        self.selected.clear()
        self.cursor = None

    def move_next(self) -> None:
        """Move the cursor down one row.

        The first move from an unset cursor skips past ".." when a second
        row exists.
        """
        if self.item_count <= 0:
            return
        last = self.item_count - 1
        if self.cursor is None:
            self.cursor = min(last, 1)
        else:
            self.cursor = min(last, self.cursor + 1)

    def move_previous(self) -> None:
        """Move the cursor up one row, stopping at the top."""
        if self.cursor is None:
            self.cursor = 0
        else:
            self.cursor = max(0, self.cursor - 1)

    def toggle_current(self) -> None:
        """Flip the cursor row's membership (or position the cursor first)."""
        if self.cursor is None:
            self.move_next()
            return

        if self.cursor in self.selected:
            self.selected.discard(self.cursor)
        else:
            self.selected.add(self.cursor)

    def is_selected(self, index: int) -> bool:
        return index in self.selected

    def selected_sorted(self) -> list[int]:
        return sorted(self.selected)
