"""Custom exceptions for podcast-rss."""


class PodcastRSSError(Exception):
    """Base exception for all podcast-rss errors."""

    pass


class ValidationError(PodcastRSSError, ValueError):
    """A value or a combination of values breaks a feed rule."""

    pass


class MissingValueError(ValidationError):
    """Required data is missing, the feed cannot be serialized."""

    pass


class FileInspectionError(ValidationError):
    """A local episode file could not be inspected."""

    pass


class ConfigError(PodcastRSSError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    pass
