"""Persist the chosen body color across restarts."""

import json
import logging
from pathlib import Path

from pixel_octopus.theme import parse_hex

log = logging.getLogger("pixel-octopus")

_STATE_FILE = "state.json"

# Keys
BODY_COLOR = "body_color"


def _state_path(path: str | None = None) -> Path:
    """Return the state file path, relative to the process's cwd by default."""
    return Path(path or _STATE_FILE)


def load_color(default: str, path: str | None = None) -> str:
    """Load the saved body color. Returns default if missing, corrupt or invalid."""
    state_path = _state_path(path)
    if not state_path.exists():
        return default
    try:
        with open(state_path, encoding="utf-8") as f:
            data = json.load(f)
    except (ValueError, OSError) as e:
        log.warning(f"Could not load state file: {e}")
        return default

    color = data.get(BODY_COLOR) if isinstance(data, dict) else None
    if not isinstance(color, str):
        log.warning(f"State file has no {BODY_COLOR} string")
        return default
    try:
        parse_hex(color)
    except ValueError as e:
        log.warning(f"Ignoring saved color: {e}")
        return default

    log.info(f"Loaded saved color: {color}")
    return color


def save_color(color: str, path: str | None = None):
    """Write the body color to disk."""
    try:
        with open(_state_path(path), "w", encoding="utf-8") as f:
            json.dump({BODY_COLOR: color}, f, indent=2)
    except OSError as e:
        log.warning(f"Could not save state file: {e}")
