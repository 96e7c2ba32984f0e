"""Commands that report on the video library."""

from ..results import Result
from .base import PlayerCommand


class NumberOfVideosCommand(PlayerCommand):
    """Show how many videos are in the library."""

    name = "NUMBER_OF_VIDEOS"
    help = "Shows how many videos are in the library."

    def _run(self) -> Result:
        return self.player.count()


class ShowAllVideosCommand(PlayerCommand):
    """List all videos in the library."""

    name = "SHOW_ALL_VIDEOS"
    help = "Lists all videos from the library."

    def _run(self) -> Result:
        return self.player.list_all()
