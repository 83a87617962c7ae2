"""Podcast entity, the root of the feed.

Required before rendering: title, description, image URL, language,
website, at least one category and at least one episode.
"""

import logging
from collections.abc import Iterable, Mapping

from podcast_rss.feeds.enums import PodcastType, raw_value
from podcast_rss.feeds.episode import Episode
from podcast_rss.feeds.serialization import Category, FeedSerializer, XmlNode, itunes_name
from podcast_rss.feeds.validation import (
    validate_email,
    validate_has_value,
    validate_is_one_of,
    validate_language,
    validate_max_length,
    validate_max_length_html,
    validate_min_size,
    validate_url,
    validate_xml_text,
)
from podcast_rss.feeds.writer import XmlWriter
from podcast_rss.utils.errors import ValidationError

logger = logging.getLogger(__name__)

RSS_VERSION = "2.0"


class Podcast:
    """A podcast and its episodes, rendered as an RSS 2.0 <channel>.

    Example:
        >>> podcast = (
        ...     Podcast.new_episodic()
        ...     .set_title("Test Show")
        ...     .set_description("A show.")
        ...     .set_image_url("https://example.com/img.jpg")
        ...     .set_language("en-US")
        ...     .set_website("https://example.com")
        ...     .add_category("Technology")
        ...     .add_episode(episode)
        ... )
        >>> xml = podcast.render()
    """

    def __init__(self, podcast_type: str | PodcastType | None = None) -> None:
        """Initialize an empty podcast.

        Args:
            podcast_type: Episodic or Serial. Prefer the new_episodic() and
                new_serial() factories.
        """
        self._title: str | None = None
        self._description: str | None = None
        self._is_description_html = False
        self._image_url: str | None = None
        self._language: str | None = None
        self._website: str | None = None
        self._is_explicit = False
        self._should_be_removed = False

        self._author: str | None = None
        self._contact_name: str | None = None
        self._contact_email: str | None = None
        self._copyright: str | None = None
        self._is_archived = False
        self._new_feed_url: str | None = None
        self._type: str | None = None

        self._categories: list[Category] = []
        self._episodes: list[Episode] = []

        if podcast_type is not None:
            self.set_type(podcast_type)

    @classmethod
    def new_episodic(cls) -> "Podcast":
        """Create a podcast meant to be consumed in no particular order.

        Apple Podcasts shows the newest episodes first, with their publish dates.
        """
        return cls(PodcastType.EPISODIC)

    @classmethod
    def new_serial(cls) -> "Podcast":
        """Create a podcast meant to be consumed in sequential order.

        Apple Podcasts shows the oldest episodes first, so every episode
        must have an episode number.
        """
        return cls(PodcastType.SERIAL)

    @property
    def type(self) -> str | None:
        return self._type

    def set_type(self, podcast_type: str | PodcastType) -> "Podcast":
        """Set the podcast type.

        Raises:
            ValidationError: If the type is unknown, or if switching to Serial
                while some episodes have no episode number
        """
        validate_is_one_of(podcast_type, PodcastType)
        podcast_type = raw_value(podcast_type)

        if podcast_type == PodcastType.SERIAL.value:
            for episode in self._episodes:
                self._validate_serial_episode(episode)

        self._type = podcast_type
        return self

    # Channel metadata

    @property
    def title(self) -> str | None:
        return self._title

    def set_title(self, title: str) -> "Podcast":
        validate_max_length(title)
        self._title = title
        return self

    @property
    def description(self) -> str | None:
        return self._description

    def set_description(self, description: str) -> "Podcast":
        """Set the description (up to 3600 visible characters)."""
        validate_max_length_html(description)
        self._description = description
        return self

    def set_description_html(self, description: str) -> "Podcast":
        """Set a description containing HTML (<p>, <ol>, <ul>, <li>, <a>)."""
        return self.set_description(description).mark_description_as_html()

    @property
    def is_description_html(self) -> bool:
        return self._is_description_html

    def mark_description_as_html(self) -> "Podcast":
        return self.set_is_description_html(True)

    def set_is_description_html(self, value: bool) -> "Podcast":
        self._is_description_html = value
        return self

    @property
    def image_url(self) -> str | None:
        return self._image_url

    def set_image_url(self, image_url: str) -> "Podcast":
        """Set the artwork URL (JPEG or PNG, 1400x1400 to 3000x3000 px)."""
        validate_url(image_url)
        self._image_url = image_url
        return self

    @property
    def language(self) -> str | None:
        return self._language

    def set_language(self, language: str) -> "Podcast":
        """Set the spoken language as an ISO 639 code, e.g. "en" or "en-US"."""
        validate_language(language)
        self._language = language
        return self

    @property
    def website(self) -> str | None:
        return self._website

    def set_website(self, website: str) -> "Podcast":
        """Set the website of the podcast (not the URL of the feed itself)."""
        validate_url(website)
        self._website = website
        return self

    @property
    def is_explicit(self) -> bool:
        return self._is_explicit

    def mark_as_explicit(self) -> "Podcast":
        return self.set_is_explicit(True)

    def set_is_explicit(self, value: bool) -> "Podcast":
        self._is_explicit = value
        return self

    @property
    def should_be_removed(self) -> bool:
        return self._should_be_removed

    def mark_for_removal(self) -> "Podcast":
        """Ask the platforms to remove the podcast, which may take a while."""
        return self.set_should_be_removed(True)

    def set_should_be_removed(self, value: bool) -> "Podcast":
        self._should_be_removed = value
        return self

    @property
    def author(self) -> str | None:
        return self._author

    def set_author(self, author: str | None) -> "Podcast":
        if author is not None:
            validate_max_length(author)
        self._author = author
        return self

    def set_contact(self, name: str | None, email: str | None) -> "Podcast":
        """Set the owner contact used by the platforms for administrative mail."""
        return self.set_contact_name(name).set_contact_email(email)

    @property
    def contact_name(self) -> str | None:
        return self._contact_name

    def set_contact_name(self, contact_name: str | None) -> "Podcast":
        if contact_name is not None:
            validate_max_length(contact_name)
        self._contact_name = contact_name
        return self

    @property
    def contact_email(self) -> str | None:
        return self._contact_email

    def set_contact_email(self, contact_email: str | None) -> "Podcast":
        if contact_email is not None:
            validate_max_length(contact_email)
            validate_email(contact_email)
        self._contact_email = contact_email
        return self

    @property
    def copyright(self) -> str | None:
        return self._copyright

    def set_copyright(self, copyright: str | None) -> "Podcast":
        if copyright is not None:
            validate_max_length(copyright)
        self._copyright = copyright
        return self

    @property
    def is_archived(self) -> bool:
        return self._is_archived

    def mark_as_archived(self) -> "Podcast":
        """Signal that no new episodes will be published.

        The podcast stays visible; use mark_for_removal() to hide it.
        """
        return self.set_is_archived(True)

    def set_is_archived(self, value: bool) -> "Podcast":
        self._is_archived = value
        return self

    @property
    def new_feed_url(self) -> str | None:
        return self._new_feed_url

    def set_new_feed_url(self, new_feed_url: str | None) -> "Podcast":
        """Announce that the feed moved permanently to a new URL.

        The old URL should answer with a 301 redirect to the new one.
        """
        if new_feed_url is not None:
            validate_url(new_feed_url)
        self._new_feed_url = new_feed_url
        return self

    # Categories

    @property
    def categories(self) -> dict[str, list[str]]:
        """Main category labels mapped to their subcategory labels."""
        return {
            category.label: [child.label for child in category.children]
            for category in self._categories
        }

    def add_category(self, category: str, *subcategories: str) -> "Podcast":
        """Add a main category with optional subcategories.

        Blank subcategories are dropped. Adding a main category that already
        exists replaces its subcategories. Apple Podcasts only recognizes the
        first category.

        Raises:
            ValidationError: If the main category is blank, or a label is not
                valid XML text
        """
        validate_xml_text(category)
        for sub in subcategories:
            validate_xml_text(sub)

        label = category.strip()
        if not label:
            raise ValidationError("Category name cannot be empty")

        children = [Category(sub.strip()) for sub in subcategories if sub.strip()]

        for existing in self._categories:
            if existing.label == label:
                existing.children = children
                return self

        self._categories.append(Category(label, children))
        return self

    def set_categories(self, categories: Mapping[str, Iterable[str]]) -> "Podcast":
        """Replace all categories.

        Each entry goes through add_category(); a failure leaves the
        categories added so far in place.
        """
        self._categories = []
        for category, subcategories in categories.items():
            self.add_category(category, *subcategories)

        logger.debug("Replaced categories with %d entries", len(self._categories))
        return self

    # Episodes

    @property
    def episodes(self) -> list[Episode]:
        """Episodes in the order they were added (a copy)."""
        return list(self._episodes)

    def add_episode(self, episode: Episode) -> "Podcast":
        """Append an episode.

        Raises:
            ValidationError: If the podcast is serial and the episode has no
                number, or if another episode already uses the same episode
                number or GUID
        """
        if self._type == PodcastType.SERIAL.value:
            self._validate_serial_episode(episode)

        if episode.episode_number is not None:
            for existing in self._episodes:
                if existing.episode_number == episode.episode_number:
                    raise ValidationError(
                        f"Episode number {episode.episode_number} is already in use"
                    )

        # Episodes without a GUID (or with a blank one) never conflict
        guid = _normalized_guid(episode)
        if guid is not None:
            for existing in self._episodes:
                if _normalized_guid(existing) == guid:
                    raise ValidationError(f"Episode GUID '{guid}' is already in use")

        self._episodes.append(episode)
        logger.debug("Added episode '%s' (%d total)", episode.title, len(self._episodes))
        return self

    def set_episodes(self, episodes: Iterable[Episode]) -> "Podcast":
        """Replace all episodes.

        Each episode goes through add_episode(); a failure leaves the
        episodes added so far in place.
        """
        self._episodes = []
        for episode in episodes:
            self.add_episode(episode)
        return self

    def _validate_serial_episode(self, episode: Episode) -> None:
        if episode.episode_number is None:
            raise ValidationError(
                f"Episode '{episode.title}' needs an episode number, "
                "which is mandatory for serial podcasts"
            )

    # Serialization

    def validate_data_integrity(self) -> None:
        """Make sure all required data is set.

        Raises:
            MissingValueError: If a required field is empty, or there are no
                categories or no episodes
        """
        validate_has_value("title", self._title)
        validate_has_value("description", self._description)
        validate_has_value("imageUrl", self._image_url)
        validate_has_value("language", self._language)
        validate_has_value("website", self._website)
        validate_min_size("categories", self._categories, 1)
        validate_min_size("episodes", self._episodes, 1)

    def serialize(self) -> list[XmlNode]:
        """Describe the podcast as <channel> children, in feed order.

        Every episode is checked while the tree is built, so nothing reaches
        the writer unless the whole feed is valid.
        """
        self.validate_data_integrity()

        serializer = FeedSerializer()
        serializer.write_field("title", self._title)
        serializer.write_field("link", self._website)
        serializer.write_field("language", self._language)
        serializer.write_field(itunes_name("author"), self._author)
        serializer.write_field("copyright", self._copyright)
        serializer.write_description(self._description, self._is_description_html)
        serializer.write_field(itunes_name("type"), self._type)
        serializer.write_field(
            itunes_name("owner"),
            {
                itunes_name("name"): self._contact_name,
                itunes_name("email"): self._contact_email,
            },
        )
        serializer.write_field(itunes_name("image"), None, {"href": self._image_url})
        for category in self._categories:
            category.write(serializer)
        serializer.write_explicit(self._is_explicit)
        serializer.write_field(itunes_name("new-feed-url"), self._new_feed_url)
        serializer.write_flag("block", self._should_be_removed)
        serializer.write_flag("complete", self._is_archived)
        for episode in self._episodes:
            serializer.write_field("item", episode.serialize())

        return serializer.nodes

    def render(self, pretty_print: bool = True) -> str:
        """Render the complete RSS document.

        Raises:
            ValidationError: If the podcast or one of its episodes is not
                valid; no output is produced in that case
        """
        channel = XmlNode("channel", value=self.serialize())
        writer = XmlWriter(pretty_print=pretty_print)
        xml = writer.write_document("rss", [channel], {"version": RSS_VERSION})

        logger.debug(
            "Rendered feed '%s' with %d episodes", self._title, len(self._episodes)
        )
        return xml


def _normalized_guid(episode: Episode) -> str | None:
    """The GUID as rendered, or None when it is unset or blank."""
    if episode.guid is None:
        return None
    return episode.guid.strip() or None
