"""Default key bindings for the file dialog.

While the dialog is open every key belongs to it: bound keys trigger dialog
actions and the rest are ignored. While it is closed the key is handed to
the host application untouched.

Default bindings:

    q, Esc      close the dialog
    j, Down     move down
    k, Up       move up
    Enter       open directory / pick file
    Space       toggle the current row (multi-selection only)
    u           go up one directory
    I           toggle hidden files

Example:
    result = dispatch(app.dialog, readchar.readkey(), host_handler=app.handle_key)
    if not result.consumed:
        ...  # the host already saw result.event through host_handler
"""

from __future__ import annotations

from typing import Callable

from .dialog import FileDialog
from .keys import (
    is_close,
    is_down,
    is_enter,
    is_space,
    is_toggle_hidden,
    is_up,
    is_up_dir,
)
from .types import DispatchResult

HostHandler = Callable[[str], None]


def _handle_open_key(dialog: FileDialog, key: str) -> None:
    if is_close(key):
        dialog.close()
    elif is_down(key):
        dialog.move_next()
    elif is_up(key):
        dialog.move_previous()
    elif is_enter(key):
        dialog.select()
    elif is_space(key):
        if dialog.multi_selection:
            dialog.toggle_selection()
    elif is_up_dir(key):
        dialog.up()
    elif is_toggle_hidden(key):
        dialog.toggle_show_hidden()


def dispatch(
    dialog: FileDialog,
    key: str,
    host_handler: HostHandler | None = None,
) -> DispatchResult:
    """Feed one key event to the dialog or pass it on to the host.

    Args:
        dialog: The dialog receiving keys while open.
        key: A key string as returned by readchar.readkey().
        host_handler: Called with the key while the dialog is closed.
            It may open the dialog.

    Returns:
        DispatchResult.consumed_key() when the open dialog took the key,
        DispatchResult.pass_through(key) otherwise.

    Raises:
        OSError: When a navigation or rescan triggered by the key fails.
            The dialog keeps its previous directory and listing.
    """
    if dialog.is_open:
        _handle_open_key(dialog, key)
        return DispatchResult.consumed_key()

    if host_handler is not None:
        host_handler(key)
    return DispatchResult.pass_through(key)


class KeyBindingDispatcher:
    """Bind a dialog and a host key handler once, then feed keys."""

    def __init__(self, dialog: FileDialog, host_handler: HostHandler | None = None):
        self.dialog = dialog
        self.host_handler = host_handler

    def dispatch(self, key: str) -> DispatchResult:
        return dispatch(self.dialog, key, self.host_handler)

    __call__ = dispatch
