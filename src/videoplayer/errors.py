"""Error types and error logging utilities."""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error(f"{context}: {str(error)}")
    else:
        logger.error(str(error))


class VideoPlayerError(Exception):
    """Base class for video player errors."""

    pass


class CatalogError(VideoPlayerError):
    """Error raised when the video catalog cannot be loaded."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        """Initialize error.

        Args:
            message: Description of the problem
            line_number: 1-based line of the catalog source, when known
        """
        self.line_number = line_number
        if line_number is not None:
            super().__init__(f"Line {line_number}: {message}")
        else:
            super().__init__(message)


class CommandError(VideoPlayerError):
    """Error raised for unknown commands or invalid command arguments."""

    pass


class PlaylistExistsError(VideoPlayerError):
    """Error raised when a playlist with the same name already exists."""

    pass


class PlaylistNotFoundError(VideoPlayerError):
    """Error raised when a playlist is not found."""

    pass


class VideoAlreadyInPlaylistError(VideoPlayerError):
    """Error raised when a video is added to a playlist twice."""

    pass


class VideoNotInPlaylistError(VideoPlayerError):
    """Error raised when removing a video that is not in the playlist."""

    pass


class AlreadyFlaggedError(VideoPlayerError):
    """Error raised when flagging a video that is already flagged."""

    pass


class NotFlaggedError(VideoPlayerError):
    """Error raised when unflagging a video that is not flagged."""

    pass
