"""Allow running as python -m tui_file_dialog."""

from .cli import main

main()
