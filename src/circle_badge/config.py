"""Configuration file management for circle-badge.

Reads and writes ~/.circle-badge/config.json for settings that persist between
runs (e.g., where the SVG icons live).
"""
from __future__ import annotations

import json
from pathlib import Path

DEFAULT_CONFIG_PATH: Path = Path.home() / ".circle-badge" / "config.json"

# Relative to the working directory of the running process
DEFAULT_ICONS_DIR: Path = Path("icons")


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_icons_dir(config_path: Path | None = None) -> Path:
    """Return the configured icons directory, or DEFAULT_ICONS_DIR if not set."""
    config = load_config(config_path)
    raw = config.get("icons_dir")
    if raw:
        return Path(raw)
    return DEFAULT_ICONS_DIR


def set_icons_dir(directory: Path, config_path: Path | None = None) -> None:
    """Persist the icons directory path to config."""
    config = load_config(config_path)
    config["icons_dir"] = str(directory)
    save_config(config, config_path)
