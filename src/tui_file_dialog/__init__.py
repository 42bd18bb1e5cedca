"""Embeddable file picker popup for terminal applications.

The dialog is a small state machine (FileDialog) plus default key bindings
(dispatch) and a Rich renderer (DialogRenderer). The host application keeps
its own loop and terminal setup.

Example:
    from tui_file_dialog import DialogRenderer, FileDialog, FilePattern, dispatch

    dialog = FileDialog(width=60, height=40, multi_selection=True)
    dialog.set_filter(FilePattern.extension("toml"))
    dialog.open()

    while running:
        live.update(renderer.render_popup(dialog, console.width, console.height))
        dispatch(dialog, readchar.readkey(), host_handler=handle_app_key)
        if (paths := dialog.collect_selection()) is not None:
            selected_files = paths
"""

__version__ = "0.1.0"

from .dialog import FileDialog
from .dispatch import KeyBindingDispatcher, dispatch
from .render import DialogRenderer, centered_rect, keybinding_hint
from .scanner import scan, sort_entries
from .selection import SelectionState
from .types import DialogConfig, DispatchResult, FilePattern, PatternKind, Rect

__all__ = [
    # Main classes
    "FileDialog",
    "DialogConfig",
    "FilePattern",
    "PatternKind",
    # Key handling
    "dispatch",
    "DispatchResult",
    "KeyBindingDispatcher",
    # Rendering
    "DialogRenderer",
    "Rect",
    "centered_rect",
    "keybinding_hint",
    # Building blocks
    "SelectionState",
    "scan",
    "sort_entries",
]
