"""Demo host application for tui-file-dialog.

Shows how a terminal app embeds the dialog: the host loop renders, reads one
key, dispatches it, and polls for a finished selection. The picked paths are
printed one per line on exit, so the command also works as a picker in shell
pipelines.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

import readchar
from rich.console import Console, RenderableType
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel

from . import __version__
from .config import dialog_config_from_settings, get_log_path, load_config
from .dialog import FileDialog
from .dispatch import dispatch
from .keys import is_escape
from .render import DialogRenderer
from .types import FilePattern

logger = logging.getLogger(__name__)

console = Console(highlight=False)


class App:
    """Host application state: the embedded dialog plus the last pick."""

    def __init__(self, dialog: FileDialog):
        self.dialog = dialog
        self.renderer = DialogRenderer()
        self.selected_files: list[Path] = []
        self.status = ""
        self.should_exit = False

    def handle_key(self, key: str) -> None:
        """Host key bindings, active while the dialog is closed."""
        # "\x0f" is Ctrl+O
        if key in ("o", "\x0f"):
            self.status = ""
            self.dialog.open()
        elif key == "q" or is_escape(key):
            self.should_exit = True

    def render(self, width: int, height: int) -> RenderableType:
        popup = self.renderer.render_popup(self.dialog, width, height)
        if popup is not None:
            return popup

        if self.selected_files:
            body = "\n".join(escape(str(path)) for path in self.selected_files)
        else:
            body = "[dim](nothing selected)[/dim]"
        if self.status:
            body += f"\n\n[red]{escape(self.status)}[/red]"
        body += "\n\n[dim]o open · q quit[/dim]"
        return Panel(body, title="[bold]Selected files[/bold]", height=height)


def run_app(app: App, read_key: Callable[[], str], refresh: Callable[[], None]) -> None:
    """Run the host loop until the user quits.

    Args:
        app: Host state.
        read_key: Blocking key source (readchar.readkey in the real CLI).
        refresh: Called after every state change to redraw.
    """
    refresh()
    while not app.should_exit:
        try:
            key = read_key()
        except KeyboardInterrupt:
            break

        try:
            dispatch(app.dialog, key, host_handler=app.handle_key)
        except OSError as e:
            logger.debug(f"Dialog action failed: {e}")
            app.status = str(e)

        selected = app.dialog.collect_selection()
        if selected is not None:
            app.selected_files = selected

        refresh()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tui-file-dialog",
        description="Pick files in a terminal popup and print their paths.",
    )
    parser.add_argument("--version", action="version", version=f"tui-file-dialog {__version__}")
    parser.add_argument("dir", nargs="?", help="Directory to start in (default: cwd)")
    filter_group = parser.add_mutually_exclusive_group()
    filter_group.add_argument("--ext", help="Only list files with this extension")
    filter_group.add_argument("--contains", help="Only list files whose name contains this text")
    parser.add_argument("--multi", action="store_true", default=None, help="Allow picking several files")
    parser.add_argument("--hidden", action="store_true", default=None, help="Show dot-files")
    parser.add_argument("--width", type=int, help="Popup width in percent")
    parser.add_argument("--height", type=int, help="Popup height in percent")
    parser.add_argument(
        "--no-hints", dest="show_key_hints", action="store_false", default=None,
        help="Hide the key binding hint line",
    )
    parser.add_argument("--debug", action="store_true", help=f"Write debug log to {get_log_path()}")
    return parser


def _pattern_from_args(args: argparse.Namespace) -> FilePattern | None:
    if args.ext:
        return FilePattern.extension(args.ext)
    if args.contains:
        return FilePattern.substring(args.contains)
    return None


def _setup_logging() -> None:
    log_path = get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_path,
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    cfg = load_config()

    if args.debug or cfg.get("debug"):
        _setup_logging()

    dialog_config = dialog_config_from_settings(
        cfg,
        directory=Path(args.dir) if args.dir else None,
        pattern=_pattern_from_args(args),
        multi_selection=args.multi,
        show_hidden=args.hidden,
        width=args.width,
        height=args.height,
        show_key_hints=args.show_key_hints,
    )

    try:
        dialog = FileDialog(dialog_config)
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot open {escape(str(args.dir or '.'))}: {escape(str(e))}")
        sys.exit(1)

    app = App(dialog)
    dialog.open()

    with Live(console=console, screen=True, auto_refresh=False) as live:
        def refresh() -> None:
            live.update(app.render(console.width, console.height), refresh=True)

        run_app(app, readchar.readkey, refresh)

    for path in app.selected_files:
        print(path)
