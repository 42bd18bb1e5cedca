"""Type definitions for tui-file-dialog.

This module provides the shared value types (enums, dataclasses) used by the
scanner, the dialog state machine, the key dispatcher and the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class PatternKind(str, Enum):
    """How a FilePattern compares against a file name."""

    EXTENSION = "extension"
    SUBSTRING = "substring"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FilePattern:
    """A pattern that restricts which files appear in a listing.

    Directories always match, so the user can keep browsing.

    Attributes:
        kind: EXTENSION (case-insensitive) or SUBSTRING (case-sensitive).
        value: Extension without the leading dot, or the substring to find.
    """

    kind: PatternKind
    value: str

    @classmethod
    def extension(cls, value: str) -> "FilePattern":
        return cls(PatternKind.EXTENSION, value.lstrip("."))

    @classmethod
    def substring(cls, value: str) -> "FilePattern":
        return cls(PatternKind.SUBSTRING, value)

    def matches(self, path: Path) -> bool:
        """Return whether the given path passes this pattern."""
        path = Path(path)
        if path.is_dir():
            return True

        if self.kind is PatternKind.EXTENSION:
            suffix = path.suffix
            if not suffix:
                return False
            return suffix[1:].lower() == self.value.lower()
        if self.kind is PatternKind.SUBSTRING:
            return self.value in path.name
        raise ValueError(f"Unknown pattern kind: {self.kind!r}")

    def __str__(self) -> str:
        if self.kind is PatternKind.EXTENSION:
            return f"*.{self.value}"
        return f"*{self.value}*"


def _clamp_percent(value: int) -> int:
    return max(0, min(100, int(value)))


@dataclass(frozen=True)
class DialogConfig:
    """Construction-time settings for a FileDialog.

    Attributes:
        width: Popup width in percent of the available area (clamped 0-100).
        height: Popup height in percent of the available area (clamped 0-100).
        directory: Starting directory (None means the working directory).
        pattern: Optional file filter.
        show_hidden: Whether dot-files are listed.
        multi_selection: Whether several files can be picked per session.
        show_key_hints: Whether the renderer adds a one-line binding hint.
    """

    width: int = 50
    height: int = 50
    directory: Path | None = None
    pattern: FilePattern | None = None
    show_hidden: bool = False
    multi_selection: bool = False
    show_key_hints: bool = False

    def __post_init__(self):
        object.__setattr__(self, "width", _clamp_percent(self.width))
        object.__setattr__(self, "height", _clamp_percent(self.height))
        if self.directory is not None:
            object.__setattr__(self, "directory", Path(self.directory))


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of feeding one key event to the dialog.

    Attributes:
        consumed: True when the open dialog handled (or ignored) the key.
        event: The untouched key when it was passed through to the host.
    """

    consumed: bool
    event: str | None = None

    @classmethod
    def consumed_key(cls) -> "DispatchResult":
        return cls(consumed=True)

    @classmethod
    def pass_through(cls, event: str) -> "DispatchResult":
        return cls(consumed=False, event=event)


@dataclass(frozen=True)
class Rect:
    """A rectangle in terminal cells."""

    x: int
    y: int
    width: int
    height: int
