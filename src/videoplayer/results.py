"""Outcome values returned by every player operation."""

from enum import Enum
from typing import List, Optional, Sequence

from .models import Video


class Status(Enum):
    """Kind of outcome produced by a player operation."""

    OK = "ok"
    # Informational: the request changed nothing but is not a failure
    ALREADY_PAUSED = "already_paused"
    # Not found
    NO_SUCH_VIDEO = "no_such_video"
    NO_SUCH_PLAYLIST = "no_such_playlist"
    # Conflicts
    ALREADY_EXISTS = "already_exists"
    ALREADY_FLAGGED = "already_flagged"
    ALREADY_IN_PLAYLIST = "already_in_playlist"
    FLAGGED = "flagged"
    # Wrong state
    NOTHING_SELECTED = "nothing_selected"
    NOT_FLAGGED = "not_flagged"
    NOT_IN_PLAYLIST = "not_in_playlist"
    NOT_PAUSED = "not_paused"
    # Empty results
    NO_VIDEOS = "no_videos"
    NONE_AVAILABLE = "none_available"
    NO_PLAYLISTS = "no_playlists"
    EMPTY_PLAYLIST = "empty_playlist"
    NO_RESULTS = "no_results"


class Result:
    """Outcome of a player operation.

    Attributes:
        status: What happened
        lines: Human readable output, one entry per line, including notices
            for implicit side effects such as stopping the previous video
        videos: Videos the operation reported on (search matches, playlist
            contents, listings)
        reason: Moderation reason for FLAGGED outcomes
    """

    def __init__(
        self,
        status: Status,
        lines: Optional[Sequence[str]] = None,
        videos: Optional[Sequence[Video]] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.status = status
        self.lines: List[str] = list(lines or [])
        self.videos: List[Video] = list(videos or [])
        self.reason = reason

    @classmethod
    def success(cls, *lines: str, videos: Optional[Sequence[Video]] = None) -> "Result":
        """Build an OK result."""
        return cls(Status.OK, lines, videos=videos)

    @classmethod
    def failure(cls, status: Status, *lines: str, reason: Optional[str] = None) -> "Result":
        """Build a non-OK result."""
        return cls(status, lines, reason=reason)

    @property
    def ok(self) -> bool:
        """True when the operation applied its change or produced its report."""
        return self.status is Status.OK

    @property
    def is_error(self) -> bool:
        """True for failures. ALREADY_PAUSED is informational and not an error."""
        return self.status not in (Status.OK, Status.ALREADY_PAUSED)

    @property
    def message(self) -> str:
        """All output lines joined with newlines."""
        return "\n".join(self.lines)

    def __repr__(self) -> str:
        return f"Result({self.status.name}, {self.lines!r})"
