"""Data models for videos and playlists."""

from typing import List, NamedTuple, Tuple


class Video(NamedTuple):
    """A single catalog entry. Immutable once loaded."""

    title: str
    video_id: str
    tags: Tuple[str, ...] = ()

    def details(self) -> str:
        """Return the display line for this video, e.g. ``Title (id) [tag tag]``."""
        return f"{self.title} ({self.video_id}) [{' '.join(self.tags)}]"


class Playlist:
    """A named, ordered and duplicate-free sequence of video ids."""

    def __init__(self, name: str) -> None:
        """Initialize playlist.

        Args:
            name: Display name, kept with the casing given by its creator
        """
        self.name = name
        self.video_ids: List[str] = []

    @property
    def key(self) -> str:
        """Case-insensitive storage key."""
        return playlist_key(self.name)

    def __contains__(self, video_id: str) -> bool:
        return video_id in self.video_ids

    def __len__(self) -> int:
        return len(self.video_ids)

    def __repr__(self) -> str:
        return f"Playlist({self.name!r}, {self.video_ids!r})"


def playlist_key(name: str) -> str:
    """Normalize a playlist name for lookups."""
    return name.lower()
