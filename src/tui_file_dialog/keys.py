"""Keyboard input helpers for the file dialog.

Key events are the strings produced by readchar.readkey(). These helpers
replace inline comparisons in the dispatcher with readable predicates.
"""

from __future__ import annotations

import readchar


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_close(key: str) -> bool:
    """Check if key closes the dialog (q or Escape)."""
    return key == "q" or is_escape(key)


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key == "j" or key == readchar.key.DOWN


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def is_up_dir(key: str) -> bool:
    """Check if key moves to the parent directory."""
    return key == "u"


def is_toggle_hidden(key: str) -> bool:
    """Check if key toggles hidden files (capital I only)."""
    return key == "I"
