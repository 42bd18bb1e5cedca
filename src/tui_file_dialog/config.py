"""YAML-based user preferences for the file dialog CLI.

Preferences live in ~/.config/tui-file-dialog/config.yaml (honoring
XDG_CONFIG_HOME). The file only supplies defaults for new dialogs; dialog
state is never written back.

Example config.yaml:

    width: 70
    height: 50
    multi_selection: true
    filter:
      extension: toml
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .types import DialogConfig, FilePattern, PatternKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "width": 60,
    "height": 40,
    "show_hidden": False,
    "multi_selection": False,
    "show_key_hints": True,
    "filter": None,
    "debug": False,
}


def get_config_dir() -> Path:
    """Get the tui-file-dialog config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "tui-file-dialog"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def get_log_path() -> Path:
    """Get the path to the debug log file."""
    return get_config_dir() / "debug.log"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config() -> dict[str, Any]:
    """Load config.yaml merged over DEFAULT_CONFIG."""
    config_path = get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            return copy.deepcopy(DEFAULT_CONFIG)
        return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return copy.deepcopy(DEFAULT_CONFIG)


def pattern_from_config(value: Any) -> FilePattern | None:
    """Build a FilePattern from a {extension: ...} or {substring: ...} mapping."""
    if not value:
        return None
    if not isinstance(value, dict) or len(value) != 1:
        logger.warning(f"Ignoring invalid filter setting: {value!r}")
        return None

    (kind, text), = value.items()
    try:
        pattern_kind = PatternKind(str(kind).lower())
    except ValueError:
        logger.warning(f"Ignoring unknown filter kind: {kind!r}")
        return None

    if pattern_kind is PatternKind.EXTENSION:
        return FilePattern.extension(str(text))
    return FilePattern.substring(str(text))


def dialog_config_from_settings(cfg: dict[str, Any], **overrides: Any) -> DialogConfig:
    """Build a DialogConfig from loaded settings plus explicit overrides.

    Overrides whose value is None are ignored, so argparse defaults fall
    through to the config file.
    """
    settings = {
        "width": int(cfg.get("width", DEFAULT_CONFIG["width"])),
        "height": int(cfg.get("height", DEFAULT_CONFIG["height"])),
        "show_hidden": bool(cfg.get("show_hidden", False)),
        "multi_selection": bool(cfg.get("multi_selection", False)),
        "show_key_hints": bool(cfg.get("show_key_hints", True)),
        "pattern": pattern_from_config(cfg.get("filter")),
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})
    return DialogConfig(**settings)
