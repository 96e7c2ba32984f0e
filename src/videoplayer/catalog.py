"""Read-only video catalog and its file loader."""

import os
from typing import Dict, Iterable, List, Optional

from .errors import CatalogError
from .logging_config import get_logger
from .models import Video

logger = get_logger(__name__)

FIELD_SEPARATOR = "|"
TAG_SEPARATOR = ","


class VideoCatalog:
    """Fixed set of videos indexed by id."""

    def __init__(self, videos: Iterable[Video]) -> None:
        """Initialize catalog.

        Args:
            videos: Videos in load order

        Raises:
            CatalogError: If two videos share an id
        """
        self._videos: Dict[str, Video] = {}
        for video in videos:
            if video.video_id in self._videos:
                raise CatalogError(f"Duplicate video id: {video.video_id}")
            self._videos[video.video_id] = video

    def list_all(self) -> List[Video]:
        """Return all videos in load order.

        The list is a copy, so callers are free to sort or filter it.
        """
        return list(self._videos.values())

    def find(self, video_id: str) -> Optional[Video]:
        """Look up a video by its id. Returns None when it does not exist."""
        return self._videos.get(video_id)

    def __len__(self) -> int:
        return len(self._videos)

    def __contains__(self, video_id: str) -> bool:
        return video_id in self._videos

    def __iter__(self):
        return iter(self.list_all())


def parse_catalog_line(line: str, line_number: Optional[int] = None) -> Video:
    """Parse one ``title | id | tag, tag`` line.

    Args:
        line: Raw line from the catalog source
        line_number: Line number for error messages

    Returns:
        The parsed Video

    Raises:
        CatalogError: If the title or id is missing
    """
    fields = [field.strip() for field in line.split(FIELD_SEPARATOR)]
    if len(fields) < 2:
        raise CatalogError(f"Expected 'title | id | tags', got: {line.strip()}", line_number)
    if len(fields) > 3:
        raise CatalogError(f"Too many fields: {line.strip()}", line_number)

    title, video_id = fields[0], fields[1]
    if not title:
        raise CatalogError("Missing video title", line_number)
    if not video_id:
        raise CatalogError("Missing video id", line_number)

    tags = ()
    if len(fields) == 3 and fields[2]:
        tags = tuple(tag.strip() for tag in fields[2].split(TAG_SEPARATOR) if tag.strip())

    return Video(title, video_id, tags)


def parse_catalog(lines: Iterable[str]) -> VideoCatalog:
    """Build a catalog from lines of text.

    Blank lines are skipped, as are ``#`` comment lines without a field separator.

    Raises:
        CatalogError: On malformed lines or duplicate ids
    """
    videos = []
    seen = set()
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if line.startswith("#") and FIELD_SEPARATOR not in line:
            continue
        video = parse_catalog_line(line, line_number)
        if video.video_id in seen:
            raise CatalogError(f"Duplicate video id: {video.video_id}", line_number)
        seen.add(video.video_id)
        videos.append(video)
    return VideoCatalog(videos)


def load_catalog(path: str) -> VideoCatalog:
    """Load the video catalog from a file.

    Args:
        path: Path to a UTF-8 text file with one video per line

    Returns:
        The loaded catalog

    Raises:
        CatalogError: If the file cannot be read or is malformed
    """
    if not os.path.isfile(path):
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            catalog = parse_catalog(f)
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Failed to read catalog {path}: {str(e)}") from e

    logger.info("Loaded %d videos from %s", len(catalog), path)
    return catalog
