"""XDG-compliant path helpers for Flicker."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_cache_dir, user_config_dir


def get_config_dir() -> Path:
    """Get the config directory for Flicker (config.toml)."""
    override = os.environ.get("FLICKER_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("flicker"))


def get_cache_dir() -> Path:
    """Get the cache directory for Flicker (exported debug logs)."""
    override = os.environ.get("FLICKER_CACHE_DIR")
    if override:
        return Path(override)
    return Path(user_cache_dir("flicker"))


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.toml"


def get_debug_log_path() -> Path:
    """Get the default export path for the debug log."""
    return get_cache_dir() / "debug.log"


def ensure_directories() -> None:
    """Create all required directories if they don't exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_cache_dir().mkdir(parents=True, exist_ok=True)
