"""Commands that manage playlists."""

from ..results import Result
from .base import PlayerCommand


class CreatePlaylistCommand(PlayerCommand):
    """Create a new, empty playlist."""

    name = "CREATE_PLAYLIST"
    usage = "<playlist_name>"
    help = "Creates a new (empty) playlist with the provided name."
    min_args = 1
    max_args = 1

    def _run(self) -> Result:
        return self.player.create_playlist(self.args[0])


class AddToPlaylistCommand(PlayerCommand):
    """Add a video to a playlist."""

    name = "ADD_TO_PLAYLIST"
    usage = "<playlist_name> <video_id>"
    help = "Adds the requested video to the playlist."
    min_args = 2
    max_args = 2

    def _run(self) -> Result:
        return self.player.add_to_playlist(self.args[0], self.args[1])


class RemoveFromPlaylistCommand(PlayerCommand):
    """Remove a video from a playlist."""

    name = "REMOVE_FROM_PLAYLIST"
    usage = "<playlist_name> <video_id>"
    help = "Removes the specified video from the specified playlist"
    min_args = 2
    max_args = 2

    def _run(self) -> Result:
        return self.player.remove_from_playlist(self.args[0], self.args[1])


class ClearPlaylistCommand(PlayerCommand):
    name = "CLEAR_PLAYLIST"
    usage = "<playlist_name>"
    help = "Removes all videos from the playlist."
    min_args = 1
    max_args = 1

    def _run(self) -> Result:
        return self.player.clear_playlist(self.args[0])


class DeletePlaylistCommand(PlayerCommand):
    name = "DELETE_PLAYLIST"
    usage = "<playlist_name>"
    help = "Deletes the playlist."
    min_args = 1
    max_args = 1

    def _run(self) -> Result:
        return self.player.delete_playlist(self.args[0])


class ShowAllPlaylistsCommand(PlayerCommand):
    name = "SHOW_ALL_PLAYLISTS"
    help = "Shows all available playlists (name only)."

    def _run(self) -> Result:
        return self.player.show_all_playlists()


class ShowPlaylistCommand(PlayerCommand):
    name = "SHOW_PLAYLIST"
    usage = "<playlist_name>"
    help = "Shows all videos in a playlist."
    min_args = 1
    max_args = 1

    def _run(self) -> Result:
        return self.player.show_playlist(self.args[0])
