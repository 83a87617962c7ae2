"""Configuration manager for settings and feed definition files."""

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from podcast_rss.config.builder import build_podcast
from podcast_rss.config.defaults import DEFAULT_GLOBAL_CONFIG, get_default_config_content
from podcast_rss.config.schema import FeedDefinition, GlobalConfig
from podcast_rss.feeds.podcast import Podcast
from podcast_rss.utils.errors import ConfigNotFoundError, InvalidConfigError
from podcast_rss.utils.paths import get_config_dir, get_config_file


class ConfigManager:
    """Manages podcast-rss configuration and feed definition files."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            return DEFAULT_GLOBAL_CONFIG

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return GlobalConfig(**data)
        except (yaml.YAMLError, TypeError, PydanticValidationError) as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration.

        Args:
            config: GlobalConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def load_feed(self, feed_file: Path) -> FeedDefinition:
        """Load and validate the shape of a feed definition file.

        Args:
            feed_file: Path to a YAML feed definition

        Returns:
            FeedDefinition instance

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            InvalidConfigError: If the file is not valid YAML or has the wrong shape
        """
        if not feed_file.exists():
            raise ConfigNotFoundError(f"Feed definition {feed_file} not found")

        try:
            with open(feed_file) as f:
                data = yaml.safe_load(f) or {}
            return FeedDefinition(**data)
        except (yaml.YAMLError, TypeError, PydanticValidationError) as e:
            raise InvalidConfigError(
                f"Invalid feed definition in {feed_file}: {e}"
            ) from e

    def build_podcast(self, feed_file: Path) -> Podcast:
        """Load a feed definition and build the podcast it describes.

        Relative episode file paths are resolved against the definition's directory.

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            InvalidConfigError: If the file is not valid YAML or has the wrong shape
            ValidationError: If a value breaks a feed rule
        """
        definition = self.load_feed(feed_file)
        return build_podcast(definition.podcast, base_dir=feed_file.parent)

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())
