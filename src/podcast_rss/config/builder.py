"""Turn feed definitions into Podcast and Episode entities."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from podcast_rss.config.schema import EpisodeDefinition, PodcastDefinition
from podcast_rss.feeds.episode import Episode
from podcast_rss.feeds.podcast import Podcast

logger = logging.getLogger(__name__)


def _apply(values: list[tuple[Any, Callable[[Any], Any]]]) -> None:
    """Call each setter with its value, skipping values that are not set."""
    for value, setter in values:
        if value is not None:
            setter(value)


def build_episode(definition: EpisodeDefinition, base_dir: Path | None = None) -> Episode:
    """Build an episode, running every value through its validating setter.

    Args:
        definition: Episode definition
        base_dir: Directory relative file paths are resolved against

    Raises:
        ValidationError: If a value breaks a feed rule
    """
    episode = Episode()

    if definition.file is not None:
        file_path = definition.file
        if base_dir is not None and not file_path.is_absolute():
            file_path = base_dir / file_path
        episode.set_from_file(file_path)

    set_description = (
        episode.set_description_html
        if definition.description_html
        else episode.set_description
    )

    _apply(
        [
            (definition.type, episode.set_type),
            (definition.title, episode.set_title),
            (definition.description, set_description),
            (definition.file_size, episode.set_file_size),
            (definition.mime_type, episode.set_mime_type),
            (definition.episode_url, episode.set_episode_url),
            (definition.guid, episode.set_guid),
            (definition.pub_date, episode.set_pub_date),
            (definition.duration, episode.set_duration),
            (definition.website, episode.set_website),
            (definition.image_url, episode.set_image_url),
            (definition.explicit, episode.set_is_explicit),
            (definition.episode_number, episode.set_episode_number),
            (definition.season_number, episode.set_season_number),
        ]
    )
    episode.set_should_be_removed(definition.block)

    return episode


def build_podcast(definition: PodcastDefinition, base_dir: Path | None = None) -> Podcast:
    """Build a podcast and its episodes from a definition.

    Raises:
        ValidationError: If a value breaks a feed rule
    """
    podcast = Podcast(definition.type)

    set_description = (
        podcast.set_description_html
        if definition.description_html
        else podcast.set_description
    )

    _apply(
        [
            (definition.title, podcast.set_title),
            (definition.description, set_description),
            (definition.image_url, podcast.set_image_url),
            (definition.language, podcast.set_language),
            (definition.website, podcast.set_website),
            (definition.author, podcast.set_author),
            (definition.contact_name, podcast.set_contact_name),
            (definition.contact_email, podcast.set_contact_email),
            (definition.copyright, podcast.set_copyright),
            (definition.new_feed_url, podcast.set_new_feed_url),
        ]
    )
    podcast.set_is_explicit(definition.explicit)
    podcast.set_should_be_removed(definition.block)
    podcast.set_is_archived(definition.complete)

    podcast.set_categories(definition.categories)
    podcast.set_episodes(build_episode(episode, base_dir) for episode in definition.episodes)

    logger.debug(
        "Built podcast '%s' with %d episodes", podcast.title, len(podcast.episodes)
    )
    return podcast
