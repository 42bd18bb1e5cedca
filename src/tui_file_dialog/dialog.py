"""The file dialog state machine.

FileDialog owns the current directory, the scanned listing, the active
filter and the open/closed status. Every operation that changes the listing
scans first and commits only when the scan succeeded, so a failed navigation
leaves the last good state in place.

Example:
    from tui_file_dialog import FileDialog, FilePattern

    dialog = FileDialog(width=60, height=40, multi_selection=True)
    dialog.set_filter(FilePattern.extension("toml"))
    dialog.open()
    ...
    paths = dialog.collect_selection()  # None until the dialog closes
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from .scanner import PARENT_ENTRY, scan
from .selection import SelectionState
from .types import DialogConfig, FilePattern

logger = logging.getLogger(__name__)

_UNSET = object()


def _canonicalize(path: Path) -> Path:
    return Path(path).expanduser().resolve(strict=True)


class FileDialog:
    """Embeddable file picker state.

    The dialog starts closed. Call open() to show it, feed key events through
    tui_file_dialog.dispatch(), and poll collect_selection() once per tick to
    learn about a finished pick.

    Raises:
        OSError: From the constructor when the starting directory cannot be
            canonicalized or scanned.
    """

    def __init__(self, config: DialogConfig | None = None, **overrides):
        if config is None:
            config = DialogConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)

        self._config = config
        self._filter: FilePattern | None = config.pattern
        self._show_hidden = config.show_hidden
        self._multi_selection = config.multi_selection
        self._open = False
        self._pending: list[Path] | None = None

        start = config.directory if config.directory is not None else Path.cwd()
        self.current_dir: Path = _canonicalize(start)
        self.items: list[str] = scan(self.current_dir, self._filter, self._show_hidden)
        self._selection = SelectionState(len(self.items))
        self._selection.move_next()

    @classmethod
    def from_config(cls, config: DialogConfig) -> "FileDialog":
        return cls(config)

    # ── read-only state ──────────────────────────────────────────────────

    @property
    def width(self) -> int:
        return self._config.width

    @property
    def height(self) -> int:
        return self._config.height

    @property
    def show_key_hints(self) -> bool:
        return self._config.show_key_hints

    @property
    def filter(self) -> FilePattern | None:
        return self._filter

    @property
    def show_hidden(self) -> bool:
        return self._show_hidden

    @property
    def multi_selection(self) -> bool:
        return self._multi_selection

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def cursor(self) -> int | None:
        return self._selection.cursor

    @property
    def selected_indices(self) -> frozenset[int]:
        return frozenset(self._selection.selected)

    def current_entry(self) -> str | None:
        """Return the highlighted entry, or None when no row is highlighted."""
        if self._selection.cursor is None:
            return None
        return self.items[self._selection.cursor]

    # ── open / close ─────────────────────────────────────────────────────

    def open(self) -> None:
        """Open the dialog and start a fresh selection session."""
        self._selection.reset_selection()
        self._pending = None
        self._open = True

    def close(self) -> None:
        """Close the dialog.

        In multi-selection mode this ends the session: the chosen paths
        (possibly none) become the result for collect_selection().
        """
        if not self._open:
            return
        self._open = False
        if self._multi_selection:
            self._pending = [
                self._entry_path(self.items[i]) for i in self._selection.selected_sorted()
            ]

    def collect_selection(self) -> list[Path] | None:
        """Return the finished pick once, then forget it.

        Returns:
            Absolute paths in listing order, or None while the dialog is open
            or when no session has finished since the last call.
        """
        if self._open or self._pending is None:
            return None
        result = self._pending
        self._pending = None
        self._selection.selected.clear()
        return result

    selected_files = collect_selection

    # ── cursor / selection ───────────────────────────────────────────────

    def move_next(self) -> None:
        self._selection.move_next()

    def move_previous(self) -> None:
        self._selection.move_previous()

    def toggle_selection(self) -> None:
        """Toggle the highlighted row (multi-selection mode only)."""
        if not self._multi_selection:
            return
        self._selection.toggle_current()

    def set_multi_selection(self, enable: bool) -> None:
        """Switch selection mode; chosen rows are dropped."""
        self._multi_selection = enable
        self._selection.selected.clear()

    # ── navigation ───────────────────────────────────────────────────────

    def select(self) -> None:
        """Activate the highlighted row.

        A file is picked (single mode, closing the dialog) or toggled
        (multi mode). A directory, including "..", is entered.

        Raises:
            OSError: If the target directory cannot be scanned. The dialog
                keeps showing the previous directory.
        """
        if not self._open:
            return

        entry = self.current_entry()
        if entry is None:
            self._selection.move_next()
            return

        path = self._entry_path(entry)
        if path.is_file():
            if self._multi_selection:
                self._selection.toggle_current()
            else:
                self._pending = [path]
                self._open = False
            return

        self._change_dir(path)

    def up(self) -> None:
        """Go to the parent directory (no-op at the filesystem root).

        Raises:
            OSError: If the parent cannot be scanned.
        """
        parent = self.current_dir.parent
        if parent == self.current_dir:
            return
        self._change_dir(parent)

    def set_dir(self, directory: Path) -> None:
        """Show a different directory.

        Raises:
            OSError: If the directory does not exist or cannot be scanned.
        """
        self._change_dir(Path(directory))

    # ── listing options ──────────────────────────────────────────────────

    def set_filter(self, pattern: FilePattern) -> None:
        """Restrict listed files to the given pattern.

        Raises:
            OSError: If rescanning fails; the previous filter stays active.
        """
        self._rescan(pattern=pattern)

    def reset_filter(self) -> None:
        """Remove the file filter.

        Raises:
            OSError: If rescanning fails; the previous filter stays active.
        """
        self._rescan(pattern=None)

    def toggle_show_hidden(self) -> None:
        """Flip whether dot-files are listed.

        Raises:
            OSError: If rescanning fails; the flag is left unchanged.
        """
        self._rescan(show_hidden=not self._show_hidden)

    # ── internals ────────────────────────────────────────────────────────

    def _entry_path(self, entry: str) -> Path:
        if entry == PARENT_ENTRY:
            return self.current_dir.parent
        return self.current_dir / entry.rstrip("/")

    def _change_dir(self, directory: Path) -> None:
        try:
            target = _canonicalize(directory)
            items = scan(target, self._filter, self._show_hidden)
        except OSError as e:
            logger.debug(f"Cannot enter {directory}: {e}")
            raise
        self._commit(target, items)

    def _rescan(self, pattern=_UNSET, show_hidden: bool | None = None) -> None:
        new_filter = self._filter if pattern is _UNSET else pattern
        new_hidden = self._show_hidden if show_hidden is None else show_hidden
        try:
            items = scan(self.current_dir, new_filter, new_hidden)
        except OSError as e:
            logger.debug(f"Cannot rescan {self.current_dir}: {e}")
            raise
        self._filter = new_filter
        self._show_hidden = new_hidden
        self._commit(self.current_dir, items)

    def _commit(self, directory: Path, items: list[str]) -> None:
        self.current_dir = directory
        self.items = items
        self._selection.reset(len(items))
        self._selection.move_next()
