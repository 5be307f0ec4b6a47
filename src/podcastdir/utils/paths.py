"""Filesystem locations following XDG conventions via platformdirs."""

from pathlib import Path

import platformdirs

APP_NAME = "podcastdir"


def get_config_dir() -> Path:
    """Return the user configuration directory."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_cache_dir() -> Path:
    """Return the user cache directory."""
    return Path(platformdirs.user_cache_dir(APP_NAME))


def get_config_file() -> Path:
    """Return the path of the global config file."""
    return get_config_dir() / "config.yaml"
