"""Local file inspection used to pre-fill episode file size and MIME type."""

import logging
import mimetypes
from pathlib import Path

from pydantic import BaseModel

from podcast_rss.feeds.enums import mime_type_for_extension
from podcast_rss.utils.errors import FileInspectionError

logger = logging.getLogger(__name__)


class FileInfo(BaseModel):
    """Size and MIME type of a local file."""

    size: int
    mime_type: str


def inspect_file(path: Path | str) -> FileInfo:
    """Read the byte size and guess the MIME type of a local file.

    The MIME type is taken from the supported episode extensions first, then
    from the platform's mimetypes database.

    Args:
        path: Path to a file on local disk

    Returns:
        FileInfo for the file

    Raises:
        FileInspectionError: If the file is missing, unreadable, or its
            MIME type cannot be determined
    """
    path = Path(path)

    try:
        if not path.is_file():
            raise FileInspectionError(f"'{path}' is not a file")
        size = path.stat().st_size
    except OSError as e:
        raise FileInspectionError(f"Unable to read '{path}': {e}") from e

    mime_type = mime_type_for_extension(path.suffix.lstrip("."))
    if mime_type is None:
        mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type is None:
        raise FileInspectionError(f"Unable to determine the MIME type of '{path}'")

    logger.debug("Inspected %s: %d bytes, %s", path, size, mime_type)
    return FileInfo(size=size, mime_type=mime_type)
