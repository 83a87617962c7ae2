"""Configuration schema models using Pydantic.

Feed definition models only describe the shape of a YAML file. Feed rules
(lengths, URLs, MIME types...) are enforced by the Podcast and Episode
setters when a definition is built.
"""

from datetime import datetime
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class GlobalConfig(BaseModel):
    """Global podcast-rss configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"
    pretty_print: bool = True
    default_output_dir: Path | None = None


class EpisodeDefinition(BaseModel):
    """One episode entry of a feed definition file."""

    model_config = ConfigDict(extra="forbid")

    type: str | None = None  # Full, Trailer or Bonus
    title: str | None = None
    description: str | None = None
    description_html: bool = False

    # Local file used to fill file_size and mime_type
    file: Path | None = None
    file_size: int | None = None
    mime_type: str | None = None
    episode_url: str | None = None

    guid: str | None = None
    pub_date: datetime | None = None
    duration: int | None = None
    website: str | None = None
    image_url: str | None = None
    explicit: bool | None = None
    block: bool = False
    episode_number: int | None = None
    season_number: int | None = None


class PodcastDefinition(BaseModel):
    """The podcast section of a feed definition file."""

    model_config = ConfigDict(extra="forbid")

    type: str | None = None  # Episodic or Serial
    title: str | None = None
    description: str | None = None
    description_html: bool = False
    image_url: str | None = None
    language: str | None = None
    website: str | None = None

    author: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    copyright: str | None = None
    explicit: bool = False
    block: bool = False
    complete: bool = False
    new_feed_url: str | None = None

    # Main category -> subcategories
    categories: dict[str, list[str]] = Field(default_factory=dict)
    episodes: list[EpisodeDefinition] = Field(default_factory=list)


class FeedDefinition(BaseModel):
    """A feed definition file."""

    model_config = ConfigDict(extra="forbid")

    podcast: PodcastDefinition
