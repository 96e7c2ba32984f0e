"""Moderation flags for catalog videos."""

from typing import Dict, Optional

from .config import DEFAULT_FLAG_REASON
from .errors import AlreadyFlaggedError, NotFlaggedError


class FlagStore:
    """Maps flagged video ids to their moderation reason.

    A video is flagged exactly when its id has an entry here.
    """

    def __init__(self, default_reason: str = DEFAULT_FLAG_REASON) -> None:
        """Initialize flag store.

        Args:
            default_reason: Reason recorded when a flag is given without one
        """
        self.default_reason = default_reason
        self._reasons: Dict[str, str] = {}

    def flag(self, video_id: str, reason: Optional[str] = None) -> str:
        """Flag a video.

        Args:
            video_id: Id of the video to flag
            reason: Moderation reason. Empty or None uses the default reason.

        Returns:
            The reason that was recorded

        Raises:
            AlreadyFlaggedError: If the video is already flagged
        """
        if video_id in self._reasons:
            raise AlreadyFlaggedError(f"Video {video_id} is already flagged")
        recorded = reason.strip() if reason and reason.strip() else self.default_reason
        self._reasons[video_id] = recorded
        return recorded

    def unflag(self, video_id: str) -> None:
        """Remove the flag from a video.

        Raises:
            NotFlaggedError: If the video is not flagged
        """
        if video_id not in self._reasons:
            raise NotFlaggedError(f"Video {video_id} is not flagged")
        del self._reasons[video_id]

    def is_flagged(self, video_id: str) -> bool:
        return video_id in self._reasons

    def reason_for(self, video_id: str) -> Optional[str]:
        return self._reasons.get(video_id)

    def __len__(self) -> int:
        return len(self._reasons)

    def __contains__(self, video_id: str) -> bool:
        return video_id in self._reasons
