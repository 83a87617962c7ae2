"""Tests for ConfigManager."""

from pathlib import Path
from typing import Any

import pytest
import yaml

from podcast_rss.config.defaults import SAMPLE_FEED
from podcast_rss.config.manager import ConfigManager
from podcast_rss.config.schema import GlobalConfig
from podcast_rss.utils.errors import ConfigNotFoundError, InvalidConfigError, ValidationError


def write_yaml(path: Path, data: Any) -> Path:
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return path


class TestConfigManager:
    """Tests for global configuration handling."""

    def test_init_with_custom_dir(self, tmp_path: Path) -> None:
        """Test ConfigManager initialization with custom directory."""
        manager = ConfigManager(config_dir=tmp_path)
        assert manager.config_dir == tmp_path
        assert manager.config_file == tmp_path / "config.yaml"

    def test_load_config_creates_default_if_missing(self, tmp_path: Path) -> None:
        """Test that load_config creates default config if file doesn't exist."""
        manager = ConfigManager(config_dir=tmp_path / "nested")
        config = manager.load_config()

        assert config == GlobalConfig()
        assert manager.config_file.exists()

    def test_load_config_from_existing_file(self, tmp_path: Path) -> None:
        """Test loading config from existing file."""
        write_yaml(tmp_path / "config.yaml", {"log_level": "DEBUG", "pretty_print": False})

        config = ConfigManager(config_dir=tmp_path).load_config()

        assert config.log_level == "DEBUG"
        assert config.pretty_print is False

    def test_empty_config_file(self, tmp_path: Path) -> None:
        """Test that an empty file means defaults."""
        (tmp_path / "config.yaml").write_text("")
        assert ConfigManager(config_dir=tmp_path).load_config() == GlobalConfig()

    def test_invalid_config_raises(self, tmp_path: Path) -> None:
        """Test that a bad value raises InvalidConfigError."""
        write_yaml(tmp_path / "config.yaml", {"log_level": "LOUD"})

        with pytest.raises(InvalidConfigError):
            ConfigManager(config_dir=tmp_path).load_config()

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        """Test that unparsable YAML raises InvalidConfigError."""
        (tmp_path / "config.yaml").write_text("log_level: [unclosed")

        with pytest.raises(InvalidConfigError):
            ConfigManager(config_dir=tmp_path).load_config()

    def test_save_config(self, tmp_path: Path) -> None:
        """Test saving configuration."""
        manager = ConfigManager(config_dir=tmp_path)
        manager.save_config(GlobalConfig(log_level="DEBUG", default_output_dir=Path("out")))

        with open(manager.config_file) as f:
            data = yaml.safe_load(f)
        assert data["log_level"] == "DEBUG"
        assert data["default_output_dir"] == "out"
        assert manager.load_config().default_output_dir == Path("out")


class TestFeedDefinitions:
    """Tests for loading feed definition files."""

    def test_load_feed(self, tmp_path: Path, sample_feed_dict: dict[str, Any]) -> None:
        """Test loading a feed definition."""
        feed_file = write_yaml(tmp_path / "show.yaml", sample_feed_dict)

        definition = ConfigManager(config_dir=tmp_path).load_feed(feed_file)

        assert definition.podcast.title == "Test Show"

    def test_missing_feed_raises(self, tmp_path: Path) -> None:
        """Test that a missing definition raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            ConfigManager(config_dir=tmp_path).load_feed(tmp_path / "missing.yaml")

    def test_feed_with_wrong_shape(self, tmp_path: Path) -> None:
        """Test that a file without a podcast section is invalid."""
        feed_file = write_yaml(tmp_path / "show.yaml", {"title": "Loose"})

        with pytest.raises(InvalidConfigError):
            ConfigManager(config_dir=tmp_path).load_feed(feed_file)

    def test_feed_that_is_a_list(self, tmp_path: Path) -> None:
        """Test that a top-level list is invalid."""
        feed_file = write_yaml(tmp_path / "show.yaml", ["podcast"])

        with pytest.raises(InvalidConfigError):
            ConfigManager(config_dir=tmp_path).load_feed(feed_file)

    def test_build_podcast(self, tmp_path: Path, sample_feed_dict: dict[str, Any]) -> None:
        """Test building a podcast from a file."""
        feed_file = write_yaml(tmp_path / "show.yaml", sample_feed_dict)

        podcast = ConfigManager(config_dir=tmp_path).build_podcast(feed_file)

        assert len(podcast.episodes) == 2

    def test_build_podcast_resolves_files(
        self, tmp_path: Path, sample_feed_dict: dict[str, Any]
    ) -> None:
        """Test that episode files are found next to the definition."""
        media = tmp_path / "media"
        media.mkdir()
        (media / "pilot.mp4").write_bytes(b"\x00" * 5)
        pilot = sample_feed_dict["podcast"]["episodes"][1]
        del pilot["file_size"], pilot["mime_type"]
        pilot["file"] = "media/pilot.mp4"
        feed_file = write_yaml(tmp_path / "show.yaml", sample_feed_dict)

        podcast = ConfigManager(config_dir=tmp_path).build_podcast(feed_file)

        assert podcast.episodes[1].file_size == 5
        assert podcast.episodes[1].mime_type == "video/mp4"

    def test_build_podcast_rule_violation(
        self, tmp_path: Path, sample_feed_dict: dict[str, Any]
    ) -> None:
        """Test that a broken feed rule raises ValidationError."""
        sample_feed_dict["podcast"]["language"] = "English"
        feed_file = write_yaml(tmp_path / "show.yaml", sample_feed_dict)

        with pytest.raises(ValidationError):
            ConfigManager(config_dir=tmp_path).build_podcast(feed_file)

    def test_sample_feed_builds_and_renders(self, tmp_path: Path) -> None:
        """Test that the sample written by init is a valid feed."""
        feed_file = tmp_path / "show.yaml"
        feed_file.write_text(SAMPLE_FEED)

        xml = ConfigManager(config_dir=tmp_path).build_podcast(feed_file).render()

        assert "<title>Pilot</title>" in xml
