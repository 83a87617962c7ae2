"""Settings, feed definition files and logging setup."""

from podcast_rss.config.builder import build_episode, build_podcast
from podcast_rss.config.manager import ConfigManager
from podcast_rss.config.schema import (
    EpisodeDefinition,
    FeedDefinition,
    GlobalConfig,
    PodcastDefinition,
)

__all__ = [
    "ConfigManager",
    "EpisodeDefinition",
    "FeedDefinition",
    "GlobalConfig",
    "PodcastDefinition",
    "build_episode",
    "build_podcast",
]
