"""Default locations for podcast-rss files."""

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "podcast-rss"


def get_config_dir() -> Path:
    """Get the configuration directory (XDG compliant on Linux)."""
    return Path(user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Get the path to the global config.yaml."""
    return get_config_dir() / "config.yaml"
