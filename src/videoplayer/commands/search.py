"""Search commands.

A successful search carries its numbered matches in ``Result.videos``; the
shell then asks which one to play and hands the answer to
PlayerController.select_search_result.
"""

from ..results import Result
from .base import PlayerCommand


class SearchVideosCommand(PlayerCommand):
    name = "SEARCH_VIDEOS"
    usage = "<search_term>"
    help = "Display all the videos whose titles contain the search_term."
    min_args = 1
    max_args = 1
    offers_selection = True

    def _run(self) -> Result:
        return self.player.search(self.args[0])


class SearchVideosWithTagCommand(PlayerCommand):
    name = "SEARCH_VIDEOS_WITH_TAG"
    usage = "<tag_name>"
    help = "Display all videos whose tags contains the provided tag."
    min_args = 1
    max_args = 1
    offers_selection = True

    def _run(self) -> Result:
        return self.player.search_by_tag(self.args[0])
