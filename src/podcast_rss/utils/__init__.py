"""Utility functions and helpers for podcast-rss."""

from podcast_rss.utils.errors import (
    ConfigError,
    ConfigNotFoundError,
    FileInspectionError,
    InvalidConfigError,
    MissingValueError,
    PodcastRSSError,
    ValidationError,
)
from podcast_rss.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "PodcastRSSError",
    "ValidationError",
    "MissingValueError",
    "FileInspectionError",
    "ConfigError",
    "InvalidConfigError",
    "ConfigNotFoundError",
    # Paths
    "get_config_dir",
    "get_config_file",
]
