"""podcast-rss: build Apple Podcasts compliant RSS feeds."""

from podcast_rss.feeds import Episode, Podcast
from podcast_rss.utils.errors import PodcastRSSError, ValidationError

__version__ = "0.1.0"

__all__ = ["Episode", "Podcast", "PodcastRSSError", "ValidationError", "__version__"]
