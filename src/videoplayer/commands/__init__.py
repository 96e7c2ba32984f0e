"""Text commands for the video player.

Each command is a PlayerCommand subclass that validates its arguments and
runs exactly one PlayerController operation. ALL_COMMANDS lists them in the
order HELP shows them.
"""

from .base import PlayerCommand
from .library import NumberOfVideosCommand, ShowAllVideosCommand
from .moderation import AllowVideoCommand, FlagVideoCommand
from .parser import CommandParser
from .playback import (
    ContinueCommand,
    PauseCommand,
    PlayCommand,
    PlayRandomCommand,
    ShowPlayingCommand,
    StopCommand,
)
from .playlist import (
    AddToPlaylistCommand,
    ClearPlaylistCommand,
    CreatePlaylistCommand,
    DeletePlaylistCommand,
    RemoveFromPlaylistCommand,
    ShowAllPlaylistsCommand,
    ShowPlaylistCommand,
)
from .search import SearchVideosCommand, SearchVideosWithTagCommand

ALL_COMMANDS = (
    NumberOfVideosCommand,
    ShowAllVideosCommand,
    PlayCommand,
    PlayRandomCommand,
    StopCommand,
    PauseCommand,
    ContinueCommand,
    ShowPlayingCommand,
    CreatePlaylistCommand,
    AddToPlaylistCommand,
    RemoveFromPlaylistCommand,
    ClearPlaylistCommand,
    DeletePlaylistCommand,
    ShowAllPlaylistsCommand,
    ShowPlaylistCommand,
    SearchVideosCommand,
    SearchVideosWithTagCommand,
    FlagVideoCommand,
    AllowVideoCommand,
)


def create_parser(player) -> CommandParser:
    """Build a CommandParser exposing every command."""
    return CommandParser(player, ALL_COMMANDS)


__all__ = [
    "ALL_COMMANDS",
    "CommandParser",
    "PlayerCommand",
    "create_parser",
]
