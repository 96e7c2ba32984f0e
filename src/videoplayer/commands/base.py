"""Base command class for player operations."""

from typing import List, Optional, Sequence

from ..errors import CommandError
from ..logging_config import get_logger
from ..player import PlayerController
from ..results import Result

# Get logger for this module
logger = get_logger(__name__)


class PlayerCommand:
    """Base class for player commands.

    Subclasses set the class attributes and implement _run(), which calls
    exactly one controller operation.
    """

    name = ""
    usage = ""
    help = ""
    min_args = 0
    max_args: Optional[int] = 0
    offers_selection = False

    def __init__(self, player: PlayerController, args: Sequence[str] = ()):
        """Initialize command.

        Args:
            player: Controller the command runs against
            args: Command arguments, already split on whitespace
        """
        self.player = player
        self.args: List[str] = list(args)
        self._logger = logger

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            CommandError: If the player is missing or the argument count is wrong
        """
        if self.player is None:
            raise CommandError("Player is required")
        count = len(self.args)
        if count < self.min_args or (self.max_args is not None and count > self.max_args):
            raise CommandError(f"Please enter {self.name} command with {self._expected()}.")

    def _expected(self) -> str:
        if self.max_args == 0:
            return "no arguments"
        if self.min_args == self.max_args:
            return f"{self.min_args} argument{'s' if self.min_args > 1 else ''}"
        return f"at least {self.min_args} argument{'s' if self.min_args > 1 else ''}"

    def run(self) -> Result:
        """Run the command.

        Returns:
            Result: Outcome reported by the controller

        Raises:
            CommandError: If validation fails
        """
        self.validate()
        self._logger.debug("Running %s %s", self.name, " ".join(self.args))
        return self._run()

    def _run(self) -> Result:
        """Internal run implementation."""
        raise NotImplementedError(f"{type(self).__name__} does not implement _run")
