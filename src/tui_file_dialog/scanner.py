"""Directory scanner for the file dialog.

Reads the direct children of one directory, drops hidden entries and files
rejected by the active FilePattern, and returns the sorted listing the dialog
displays. Directories are suffixed with "/" and the parent pseudo-entry ".."
always comes first.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import FilePattern

logger = logging.getLogger(__name__)

PARENT_ENTRY = ".."


def _sort_key(entry: str) -> tuple[int, str]:
    if entry == PARENT_ENTRY:
        return (0, entry)
    if entry.endswith("/"):
        return (1, entry)
    return (2, entry)


def sort_entries(entries: list[str]) -> list[str]:
    """Sort entries: "..", then directories, then files, each alphabetically."""
    return sorted(entries, key=_sort_key)


def scan(
    directory: Path,
    pattern: FilePattern | None = None,
    show_hidden: bool = False,
) -> list[str]:
    """Scan a directory into a sorted list of display entries.

    Args:
        directory: Directory to list.
        pattern: Optional filter applied to files only.
        show_hidden: Keep entries whose name starts with a dot.

    Returns:
        Entries with ".." first, directories ("name/") next, files last.

    Raises:
        OSError: If the directory cannot be read. Nothing is returned in
            that case, so callers never see a partial listing.
    """
    entries = [PARENT_ENTRY]

    with os.scandir(directory) as it:
        for child in it:
            if child.name.startswith(".") and not show_hidden:
                continue

            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False

            if is_dir:
                entries.append(f"{child.name}/")
            elif pattern is None or pattern.matches(Path(child.path)):
                entries.append(child.name)

    logger.debug(
        "Scanned %s: %d entries (pattern=%s, show_hidden=%s)",
        directory,
        len(entries) - 1,
        pattern,
        show_hidden,
    )
    return sort_entries(entries)
