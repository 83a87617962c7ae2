"""Podcast and episode entities and their RSS serialization."""

from podcast_rss.feeds.enums import EpisodeType, FileExtension, MimeType, PodcastType
from podcast_rss.feeds.episode import Episode
from podcast_rss.feeds.podcast import Podcast
from podcast_rss.feeds.serialization import CONTENT_NS, ITUNES_NS
from podcast_rss.feeds.writer import XmlWriter

__all__ = [
    "Episode",
    "EpisodeType",
    "FileExtension",
    "MimeType",
    "Podcast",
    "PodcastType",
    "XmlWriter",
    "ITUNES_NS",
    "CONTENT_NS",
]
