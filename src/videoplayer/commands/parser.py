"""Parse text command lines and dispatch them to the player."""

from typing import Dict, List, Optional, Sequence, Type

from ..errors import CommandError
from ..logging_config import get_logger
from ..player import PlayerController
from ..results import Result
from .base import PlayerCommand

logger = get_logger(__name__)

INVALID_COMMAND = "Please enter a valid command, type HELP for a list of available commands."


class CommandParser:
    """Resolves command names to command classes and runs them."""

    def __init__(
        self, player: PlayerController, command_classes: Sequence[Type[PlayerCommand]]
    ) -> None:
        """Initialize parser.

        Args:
            player: Controller every command runs against
            command_classes: Commands to expose, in help order
        """
        self.player = player
        self.commands: Dict[str, Type[PlayerCommand]] = {
            command.name: command for command in command_classes
        }

    def parse(self, line: str) -> Optional[PlayerCommand]:
        """Build the command for a line of input.

        Returns:
            The command, or None for a blank line

        Raises:
            CommandError: If the command name is unknown
        """
        words: List[str] = line.split()
        if not words:
            return None
        command_class = self.commands.get(words[0].upper())
        if command_class is None:
            logger.debug("Unknown command: %s", words[0])
            raise CommandError(INVALID_COMMAND)
        return command_class(self.player, words[1:])

    def execute(self, line: str) -> Optional[Result]:
        """Parse and run one line of input.

        Returns:
            The command's result, or None for a blank line

        Raises:
            CommandError: If the command is unknown or its arguments are invalid
        """
        command = self.parse(line)
        if command is None:
            return None
        return command.run()

    def help_text(self) -> str:
        """Describe every available command."""
        lines = ["Available commands:"]
        for command in self.commands.values():
            signature = f"{command.name} {command.usage}".rstrip()
            lines.append(f"    {signature} - {command.help}")
        lines.append("    HELP - Displays help.")
        lines.append("    EXIT - Terminates the program execution.")
        return "\n".join(lines)
