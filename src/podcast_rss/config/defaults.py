"""Default configuration values."""

import yaml

from podcast_rss.config.schema import GlobalConfig

DEFAULT_GLOBAL_CONFIG = GlobalConfig()

SAMPLE_FEED = """\
podcast:
  type: Episodic
  title: My Podcast
  description: What the show is about.
  image_url: https://example.com/artwork.jpg
  language: en-US
  website: https://example.com
  author: Jane Doe
  contact_name: Jane Doe
  contact_email: jane@example.com
  categories:
    Technology: []
  episodes:
    - type: Full
      title: Pilot
      file_size: 1000
      mime_type: audio/mpeg
      episode_url: https://example.com/episodes/pilot.mp3
      guid: pilot
"""


def get_default_config_content() -> str:
    """Get the content of a default config.yaml file."""
    return yaml.safe_dump(
        DEFAULT_GLOBAL_CONFIG.model_dump(mode="json"),
        default_flow_style=False,
        sort_keys=False,
    )
