"""Moderation commands: flag and allow videos."""

from ..results import Result
from .base import PlayerCommand


class FlagVideoCommand(PlayerCommand):
    """Flag a video with an optional reason.

    Everything after the video id is taken as the reason, so reasons may
    contain spaces.
    """

    name = "FLAG_VIDEO"
    usage = "<video_id> [<flag_reason>]"
    help = "Mark a video as flagged."
    min_args = 1
    max_args = None

    def _run(self) -> Result:
        reason = " ".join(self.args[1:]) or None
        return self.player.flag(self.args[0], reason)


class AllowVideoCommand(PlayerCommand):
    name = "ALLOW_VIDEO"
    usage = "<video_id>"
    help = "Removes a flag from a video."
    min_args = 1
    max_args = 1

    def _run(self) -> Result:
        return self.player.unflag(self.args[0])
