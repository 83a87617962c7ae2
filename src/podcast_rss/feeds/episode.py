"""Podcast episode entity.

Required before rendering: title, file size, MIME type and episode URL.
Every setter validates its value eagerly and returns the episode, so calls
can be chained:

    >>> episode = (
    ...     Episode.new_full()
    ...     .set_title("Pilot")
    ...     .set_file_size(48_000_000)
    ...     .set_mime_type("audio/mpeg")
    ...     .set_episode_url("https://example.com/pilot.mp3")
    ... )
"""

import logging
from datetime import datetime, timezone
from email.utils import format_datetime
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from podcast_rss.feeds.enums import (
    EpisodeType,
    FileExtension,
    MimeType,
    mime_type_for_extension,
    raw_value,
)
from podcast_rss.feeds.files import inspect_file
from podcast_rss.feeds.serialization import FeedSerializer, XmlNode, itunes_name
from podcast_rss.feeds.validation import (
    validate_has_value,
    validate_is_one_of,
    validate_is_positive,
    validate_max_length,
    validate_max_length_html,
    validate_url,
)
from podcast_rss.feeds.writer import XmlWriter
from podcast_rss.utils.errors import ValidationError

logger = logging.getLogger(__name__)


def url_extension(url: str) -> str:
    """Get the lowercased file extension of a URL's path, e.g. "mp3"."""
    return PurePosixPath(urlparse(url).path).suffix.lstrip(".").lower()


class Episode:
    """One installment of a podcast, rendered as an RSS <item>."""

    def __init__(self) -> None:
        self._title: str | None = None
        self._description: str | None = None
        self._is_description_html = False
        self._image_url: str | None = None
        # None means "not set"; rendered the same as False
        self._is_explicit: bool | None = None
        self._website: str | None = None
        self._should_be_removed = False

        self._file_size: int | None = None
        self._mime_type: str | None = None
        self._episode_url: str | None = None
        self._guid: str | None = None
        self._pub_date: datetime | None = None
        self._duration: int | None = None
        self._episode_number: int | None = None
        self._season_number: int | None = None
        self._type: str | None = None

    # Factories

    @classmethod
    def new_full(cls) -> "Episode":
        """Create a regular episode, the most common type."""
        return cls().set_type_full()

    @classmethod
    def new_trailer(cls) -> "Episode":
        """Create a short, promotional preview of the podcast."""
        return cls().set_type_trailer()

    @classmethod
    def new_bonus(cls) -> "Episode":
        """Create an episode with extra content (behind the scenes, promos...)."""
        return cls().set_type_bonus()

    @classmethod
    def from_file(cls, file_path: Path | str) -> "Episode":
        """Create an episode with file size and MIME type read from a local file."""
        return cls().set_from_file(file_path)

    # Type

    @property
    def type(self) -> str | None:
        return self._type

    def set_type(self, episode_type: str | EpisodeType) -> "Episode":
        validate_is_one_of(episode_type, EpisodeType)
        self._type = raw_value(episode_type)
        return self

    def set_type_full(self) -> "Episode":
        return self.set_type(EpisodeType.FULL)

    def set_type_trailer(self) -> "Episode":
        return self.set_type(EpisodeType.TRAILER)

    def set_type_bonus(self) -> "Episode":
        return self.set_type(EpisodeType.BONUS)

    # Common fields

    @property
    def title(self) -> str | None:
        return self._title

    def set_title(self, title: str) -> "Episode":
        """Set the title.

        Episode and season numbers belong in their own fields, not in the title.
        """
        validate_max_length(title)
        self._title = title
        return self

    @property
    def description(self) -> str | None:
        return self._description

    def set_description(self, description: str | None) -> "Episode":
        if description is not None:
            validate_max_length_html(description)
        self._description = description
        return self

    def set_description_html(self, description: str) -> "Episode":
        """Set a description containing HTML, which must not be escaped."""
        return self.set_description(description).mark_description_as_html()

    @property
    def is_description_html(self) -> bool:
        return self._is_description_html

    def mark_description_as_html(self) -> "Episode":
        return self.set_is_description_html(True)

    def set_is_description_html(self, value: bool) -> "Episode":
        self._is_description_html = value
        return self

    @property
    def image_url(self) -> str | None:
        return self._image_url

    def set_image_url(self, image_url: str | None) -> "Episode":
        if image_url is not None:
            validate_url(image_url)
        self._image_url = image_url
        return self

    @property
    def is_explicit(self) -> bool:
        return bool(self._is_explicit)

    def mark_as_explicit(self) -> "Episode":
        return self.set_is_explicit(True)

    def set_is_explicit(self, value: bool | None) -> "Episode":
        self._is_explicit = value
        return self

    @property
    def website(self) -> str | None:
        return self._website

    def set_website(self, website: str | None) -> "Episode":
        if website is not None:
            validate_url(website)
        self._website = website
        return self

    @property
    def should_be_removed(self) -> bool:
        return self._should_be_removed

    def mark_for_removal(self) -> "Episode":
        return self.set_should_be_removed(True)

    def set_should_be_removed(self, value: bool) -> "Episode":
        self._should_be_removed = value
        return self

    # Enclosure

    def set_from_file(self, file_path: Path | str) -> "Episode":
        """Fill file size and MIME type from a file on local disk.

        Raises:
            FileInspectionError: If the file cannot be inspected
            ValidationError: If the size or MIME type is not acceptable
        """
        info = inspect_file(file_path)
        return self.set_file_size(info.size).set_mime_type(info.mime_type)

    @property
    def file_size(self) -> int | None:
        return self._file_size

    def set_file_size(self, file_size: int) -> "Episode":
        """Set the file size in bytes."""
        validate_is_positive(file_size)
        self._file_size = file_size
        return self

    @property
    def mime_type(self) -> str | None:
        return self._mime_type

    def set_mime_type(self, mime_type: str | MimeType) -> "Episode":
        validate_is_one_of(mime_type, MimeType)

        previous = self._mime_type
        self._mime_type = raw_value(mime_type)
        try:
            self._validate_mime_type_against_episode_url()
        except ValidationError:
            self._mime_type = previous
            raise

        return self

    @property
    def episode_url(self) -> str | None:
        return self._episode_url

    def set_episode_url(self, episode_url: str) -> "Episode":
        """Set the public URL of the episode file.

        The URL path must end with a supported extension (see FileExtension).
        """
        validate_url(episode_url)
        validate_is_one_of(url_extension(episode_url), FileExtension)

        previous = self._episode_url
        self._episode_url = episode_url
        try:
            self._validate_mime_type_against_episode_url()
        except ValidationError:
            self._episode_url = previous
            raise

        return self

    def _validate_mime_type_against_episode_url(self) -> None:
        """Check that the URL extension corresponds to the MIME type.

        Skipped until both the episode URL and the MIME type are set.
        """
        if self._episode_url is None or self._mime_type is None:
            return

        extension = url_extension(self._episode_url)
        expected = mime_type_for_extension(extension)

        if expected != self._mime_type:
            raise ValidationError(
                f"Episode URL extension '{extension}' does not correspond with "
                f"MIME type {self._mime_type}; expected {expected} instead"
            )

    # Other optional fields

    @property
    def guid(self) -> str | None:
        return self._guid

    def set_guid(self, guid: str | None) -> "Episode":
        """Set the globally unique identifier, which should never change."""
        if guid is not None:
            validate_max_length(guid)
        self._guid = guid
        return self

    @property
    def pub_date(self) -> datetime | None:
        return self._pub_date

    def set_pub_date(self, pub_date: datetime | str | None) -> "Episode":
        """Set the release date.

        Args:
            pub_date: A datetime, or an ISO 8601 string. Naive values are
                treated as UTC.

        Raises:
            ValidationError: If the string cannot be parsed, or the value is
                neither a string nor a datetime
        """
        if isinstance(pub_date, str):
            try:
                pub_date = datetime.fromisoformat(pub_date.strip())
            except ValueError as e:
                raise ValidationError(f"Unable to parse date '{pub_date}'") from e

        if pub_date is not None and not isinstance(pub_date, datetime):
            raise ValidationError(
                f"Expected a datetime or an ISO 8601 string, got {pub_date!r} instead"
            )

        self._pub_date = pub_date
        return self

    @property
    def duration(self) -> int | None:
        return self._duration

    def set_duration(self, duration: int) -> "Episode":
        """Set the duration in seconds."""
        validate_is_positive(duration)
        self._duration = duration
        return self

    @property
    def episode_number(self) -> int | None:
        return self._episode_number

    def set_episode_number(self, episode_number: int) -> "Episode":
        """Set the episode number, mandatory for serial podcasts."""
        validate_is_positive(episode_number)
        self._episode_number = episode_number
        return self

    @property
    def season_number(self) -> int | None:
        return self._season_number

    def set_season_number(self, season_number: int) -> "Episode":
        validate_is_positive(season_number)
        self._season_number = season_number
        return self

    # Serialization

    def validate_data_integrity(self) -> None:
        """Make sure all required data is set.

        Raises:
            MissingValueError: If a required field is empty
        """
        validate_has_value("title", self._title)
        validate_has_value("fileSize", self._file_size)
        validate_has_value("mimeType", self._mime_type)
        validate_has_value("episodeUrl", self._episode_url)

    def serialize(self) -> list[XmlNode]:
        """Describe the episode as <item> children, in feed order."""
        self.validate_data_integrity()

        serializer = FeedSerializer()
        serializer.write_field("title", self._title)
        serializer.write_description(self._description, self._is_description_html)
        serializer.write_field(
            "enclosure",
            None,
            {
                "length": self._file_size,
                "type": self._mime_type,
                "url": self._episode_url,
            },
        )
        serializer.write_field("guid", self._guid)
        serializer.write_field("pubDate", self.formatted_pub_date)
        serializer.write_field(itunes_name("duration"), self._duration)
        serializer.write_field("link", self._website)
        serializer.write_field(itunes_name("image"), None, {"href": self._image_url})
        serializer.write_explicit(self._is_explicit)
        serializer.write_field(itunes_name("episode"), self._episode_number)
        serializer.write_field(itunes_name("season"), self._season_number)
        serializer.write_field(itunes_name("episodeType"), self._type)
        serializer.write_flag("block", self._should_be_removed)

        return serializer.nodes

    @property
    def formatted_pub_date(self) -> str | None:
        """Release date formatted per RFC 2822, e.g. "Sun, 12 Mar 2023 12:10:00 +0000"."""
        if self._pub_date is None:
            return None

        pub_date = self._pub_date
        if pub_date.tzinfo is None:
            pub_date = pub_date.replace(tzinfo=timezone.utc)
        return format_datetime(pub_date)

    def render(self, pretty_print: bool = True) -> str:
        """Render the episode as a standalone <item> element."""
        nodes = self.serialize()
        return XmlWriter(pretty_print=pretty_print).write_fragment(XmlNode("item", value=nodes))
