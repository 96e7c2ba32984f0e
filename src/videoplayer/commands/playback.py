"""Commands that control playback."""

from ..results import Result
from .base import PlayerCommand


class PlayCommand(PlayerCommand):
    """Play a video by id."""

    name = "PLAY"
    usage = "<video_id>"
    help = "Plays specified video."
    min_args = 1
    max_args = 1

    def _run(self) -> Result:
        return self.player.play(self.args[0])


class StopCommand(PlayerCommand):
    name = "STOP"
    help = "Stops the current video."

    def _run(self) -> Result:
        return self.player.stop()


class PlayRandomCommand(PlayerCommand):
    name = "PLAY_RANDOM"
    help = "Plays a random video from the library."

    def _run(self) -> Result:
        return self.player.play_random()


class PauseCommand(PlayerCommand):
    name = "PAUSE"
    help = "Pauses the current video."

    def _run(self) -> Result:
        return self.player.pause()


class ContinueCommand(PlayerCommand):
    name = "CONTINUE"
    help = "Resumes playing the current video."

    def _run(self) -> Result:
        return self.player.resume()


class ShowPlayingCommand(PlayerCommand):
    name = "SHOW_PLAYING"
    help = (
        "Displays the title, video_id, video tags and paused status "
        "of the video that is currently playing (or paused)."
    )

    def _run(self) -> Result:
        return self.player.show_current()
