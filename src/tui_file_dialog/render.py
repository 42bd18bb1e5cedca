"""Rich rendering for the file dialog.

Draws the dialog's public state as a bordered Rich Panel titled with the
current directory. The listing scrolls to keep the cursor visible, the cursor
row is highlighted, and in multi-selection mode each row carries a checkbox.
The renderer never changes dialog state.
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from .dialog import FileDialog
from .types import Rect

BORDER_STYLE = "white"
HIGHLIGHT_STYLE = "bold black on green"
DIM_STYLE = "dim"
CHECKED_ICON = "☑ "
UNCHECKED_ICON = "☐ "
SCROLL_UP_ICON = "↑"
SCROLL_DOWN_ICON = "↓"

# Top and bottom border lines.
PANEL_CHROME_ROWS = 2


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Return a rectangle of the given percentages centered within area."""
    percent_x = max(0, min(100, percent_x))
    percent_y = max(0, min(100, percent_y))

    margin_x = area.width * ((100 - percent_x) // 2) // 100
    margin_y = area.height * ((100 - percent_y) // 2) // 100
    width = area.width * percent_x // 100
    height = area.height * percent_y // 100

    return Rect(x=area.x + margin_x, y=area.y + margin_y, width=width, height=height)


def keybinding_hint(multi_selection: bool) -> str:
    """Return the one-line hint for the default key bindings."""
    parts = []
    if multi_selection:
        parts.append("space select")
    parts.extend(["↵ open", "u up", "I hidden", "q/esc close"])
    return " · ".join(parts)


class DialogRenderer:
    """Turns a FileDialog into a Rich renderable.

    Keeps only the scroll offset between frames, like a list widget would.
    """

    def __init__(self):
        self.window_offset = 0

    def _update_window(self, cursor: int, total: int, max_visible: int) -> None:
        """Update window offset to keep cursor visible."""
        if total <= max_visible:
            self.window_offset = 0
            return

        if cursor < self.window_offset:
            self.window_offset = cursor
        elif cursor >= self.window_offset + max_visible:
            self.window_offset = cursor - max_visible + 1
        self.window_offset = max(0, min(self.window_offset, total - max_visible))

    def _row(self, dialog: FileDialog, index: int) -> str:
        entry = escape(dialog.items[index])
        if dialog.multi_selection:
            icon = CHECKED_ICON if index in dialog.selected_indices else UNCHECKED_ICON
            entry = f"{icon}{entry}"
        if index == dialog.cursor:
            return f"[{HIGHLIGHT_STYLE}]{entry}[/{HIGHLIGHT_STYLE}]"
        return entry

    def render(self, dialog: FileDialog, rect: Rect) -> RenderableType | None:
        """Render the dialog into a panel of rect's size, or None if closed."""
        if not dialog.is_open:
            return None

        hint_rows = 1 if dialog.show_key_hints else 0
        rows = max(1, rect.height - PANEL_CHROME_ROWS - hint_rows)
        total = len(dialog.items)
        max_visible = rows if total <= rows else max(1, rows - 2)
        cursor = dialog.cursor if dialog.cursor is not None else 0

        self._update_window(cursor, total, max_visible)
        window_end = min(self.window_offset + max_visible, total)

        lines = []
        if self.window_offset > 0:
            lines.append(
                f"[{DIM_STYLE}]{SCROLL_UP_ICON} {self.window_offset} more above[/{DIM_STYLE}]"
            )
        for index in range(self.window_offset, window_end):
            lines.append(self._row(dialog, index))
        items_below = total - window_end
        if items_below > 0:
            lines.append(
                f"[{DIM_STYLE}]{SCROLL_DOWN_ICON} {items_below} more below[/{DIM_STYLE}]"
            )

        parts: list[RenderableType] = [Text.from_markup("\n".join(lines))]
        if dialog.show_key_hints:
            parts.extend(Text("") for _ in range(rows - len(lines)))
            parts.append(Text(keybinding_hint(dialog.multi_selection), style=DIM_STYLE, justify="right"))

        return Panel(
            Group(*parts),
            title=escape(str(dialog.current_dir)),
            border_style=BORDER_STYLE,
            width=rect.width or None,
            height=rect.height or None,
        )

    def render_popup(
        self, dialog: FileDialog, console_width: int, console_height: int
    ) -> RenderableType | None:
        """Render the dialog centered on a console of the given size."""
        area = Rect(x=0, y=0, width=console_width, height=console_height)
        rect = centered_rect(dialog.width, dialog.height, area)
        panel = self.render(dialog, rect)
        if panel is None:
            return None
        return Padding(panel, (rect.y, 0, 0, rect.x))
