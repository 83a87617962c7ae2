"""Closed value sets recognized by Apple Podcasts.

See https://help.apple.com/itc/podcasts_connect/#/itcb54353390
"""

from enum import Enum


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """List the raw string values of an enum class."""
    return [member.value for member in enum_cls]


class PodcastType(str, Enum):
    """How Apple Podcasts presents the show's episodes."""

    EPISODIC = "Episodic"  # newest first, pub dates shown
    SERIAL = "Serial"  # oldest first, episode numbers required


class EpisodeType(str, Enum):
    """Kind of content an episode carries."""

    FULL = "Full"
    TRAILER = "Trailer"
    BONUS = "Bonus"


class FileExtension(str, Enum):
    """Episode file extensions accepted in the enclosure URL."""

    M4A = "m4a"
    MP3 = "mp3"
    MOV = "mov"
    MP4 = "mp4"
    M4V = "m4v"
    PDF = "pdf"


class MimeType(str, Enum):
    """Episode file MIME types accepted in the enclosure."""

    AUDIO_X_M4A = "audio/x-m4a"
    AUDIO_MPEG = "audio/mpeg"
    VIDEO_QUICKTIME = "video/quicktime"
    VIDEO_MP4 = "video/mp4"
    VIDEO_X_M4V = "video/x-m4v"
    APPLICATION_PDF = "application/pdf"


# Each extension corresponds to exactly one MIME type
EXTENSION_MIME_TYPES: dict[FileExtension, MimeType] = {
    FileExtension.M4A: MimeType.AUDIO_X_M4A,
    FileExtension.MP3: MimeType.AUDIO_MPEG,
    FileExtension.MOV: MimeType.VIDEO_QUICKTIME,
    FileExtension.MP4: MimeType.VIDEO_MP4,
    FileExtension.M4V: MimeType.VIDEO_X_M4V,
    FileExtension.PDF: MimeType.APPLICATION_PDF,
}


def mime_type_for_extension(extension: str) -> str | None:
    """Get the MIME type mapped to a file extension.

    Args:
        extension: File extension without the leading dot (case-insensitive)

    Returns:
        MIME type string, or None if the extension is not supported
    """
    try:
        mime_type = EXTENSION_MIME_TYPES[FileExtension(extension.lower())]
    except ValueError:
        return None
    return mime_type.value


def raw_value(value: str | Enum) -> str:
    """Get the raw string of an enum member, or return a plain string as is."""
    return value.value if isinstance(value, Enum) else value
