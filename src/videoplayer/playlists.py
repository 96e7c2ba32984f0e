"""Playlist storage keyed by case-insensitive name."""

from typing import Dict, List, Optional

from .errors import (
    PlaylistExistsError,
    PlaylistNotFoundError,
    VideoAlreadyInPlaylistError,
    VideoNotInPlaylistError,
)
from .models import Playlist, playlist_key


class PlaylistStore:
    """Owns the user's playlists.

    Names are matched case-insensitively, while each playlist keeps the
    display casing it was created with.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._playlists: Dict[str, Playlist] = {}

    def create(self, name: str) -> Playlist:
        """Create an empty playlist.

        Args:
            name: Display name for the playlist

        Returns:
            The new playlist

        Raises:
            PlaylistExistsError: If a playlist with the same name (ignoring case) exists
        """
        key = playlist_key(name)
        if key in self._playlists:
            raise PlaylistExistsError(f"Playlist {self._playlists[key].name} already exists")
        playlist = Playlist(name)
        self._playlists[key] = playlist
        return playlist

    def get(self, name: str) -> Optional[Playlist]:
        """Find a playlist by name, ignoring case."""
        return self._playlists.get(playlist_key(name))

    def delete(self, name: str) -> Playlist:
        """Remove a playlist.

        Returns:
            The removed playlist

        Raises:
            PlaylistNotFoundError: If no playlist has that name
        """
        try:
            return self._playlists.pop(playlist_key(name))
        except KeyError:
            raise PlaylistNotFoundError(f"Playlist {name} not found") from None

    def list_all(self) -> List[Playlist]:
        """Return all playlists sorted by their lower-cased name."""
        return [self._playlists[key] for key in sorted(self._playlists)]

    def add_video(self, playlist: Playlist, video_id: str) -> None:
        """Append a video id to a playlist.

        Raises:
            VideoAlreadyInPlaylistError: If the id is already in the playlist
        """
        if video_id in playlist.video_ids:
            raise VideoAlreadyInPlaylistError(f"Video {video_id} already in {playlist.name}")
        playlist.video_ids.append(video_id)

    def remove_video(self, playlist: Playlist, video_id: str) -> None:
        """Remove a video id from a playlist.

        Raises:
            VideoNotInPlaylistError: If the id is not in the playlist
        """
        if video_id not in playlist.video_ids:
            raise VideoNotInPlaylistError(f"Video {video_id} not in {playlist.name}")
        playlist.video_ids.remove(video_id)

    def clear(self, playlist: Playlist) -> None:
        """Remove every video from a playlist. The playlist itself is kept."""
        playlist.video_ids.clear()

    def __len__(self) -> int:
        return len(self._playlists)

    def __contains__(self, name: str) -> bool:
        return playlist_key(name) in self._playlists
