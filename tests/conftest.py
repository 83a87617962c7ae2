"""Shared fixtures for podcast-rss tests."""

from collections.abc import Callable
from typing import Any

import pytest

from podcast_rss.feeds.episode import Episode
from podcast_rss.feeds.podcast import Podcast


@pytest.fixture
def make_episode() -> Callable[..., Episode]:
    """Factory for episodes holding every required field."""

    def _make_episode(
        title: str = "Ep1",
        url: str = "https://x/e1.mp3",
        mime_type: str = "audio/mpeg",
        file_size: int = 1000,
    ) -> Episode:
        return (
            Episode.new_full()
            .set_title(title)
            .set_file_size(file_size)
            .set_mime_type(mime_type)
            .set_episode_url(url)
        )

    return _make_episode


@pytest.fixture
def episode(make_episode: Callable[..., Episode]) -> Episode:
    """A minimal valid full episode."""
    return make_episode()


@pytest.fixture
def podcast(episode: Episode) -> Podcast:
    """A minimal valid episodic podcast with one episode."""
    return (
        Podcast.new_episodic()
        .set_title("Test Show")
        .set_description("A show.")
        .set_image_url("https://x/img.jpg")
        .set_language("en-US")
        .set_website("https://x")
        .add_category("Technology")
        .add_episode(episode)
    )


@pytest.fixture
def sample_feed_dict() -> dict[str, Any]:
    """A feed definition as loaded from YAML."""
    return {
        "podcast": {
            "type": "Serial",
            "title": "Test Show",
            "description": "<p>A show.</p>",
            "description_html": True,
            "image_url": "https://example.com/img.jpg",
            "language": "en-US",
            "website": "https://example.com",
            "author": "Jane Doe",
            "contact_name": "Jane Doe",
            "contact_email": "jane@example.com",
            "categories": {"Arts": ["Books", "Design"], "Technology": []},
            "episodes": [
                {
                    "type": "Trailer",
                    "title": "Coming soon",
                    "file_size": 1000,
                    "mime_type": "audio/mpeg",
                    "episode_url": "https://example.com/trailer.mp3",
                    "guid": "trailer",
                    "episode_number": 1,
                },
                {
                    "type": "Full",
                    "title": "Pilot",
                    "file_size": 2000,
                    "mime_type": "video/mp4",
                    "episode_url": "https://example.com/pilot.mp4",
                    "guid": "pilot",
                    "pub_date": "2023-03-12T12:10:00+00:00",
                    "duration": 3600,
                    "episode_number": 2,
                    "season_number": 1,
                },
            ],
        }
    }
