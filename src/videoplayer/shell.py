"""Interactive line-based shell for the video player."""

from typing import Callable

from .commands import CommandParser
from .config import PLAYER_NAME
from .errors import CommandError
from .logging_config import get_logger
from .results import Result

logger = get_logger(__name__)

SELECTION_PROMPT = (
    "Would you like to play any of the above? If yes, specify the number of the video.",
    "If your answer is not a valid number, we will assume it's a no.",
)


class Shell:
    """Reads commands line by line and prints their results."""

    def __init__(
        self,
        parser: CommandParser,
        input_func: Callable[[], str] = input,
        output: Callable[[str], None] = print,
        player_name: str = PLAYER_NAME,
    ) -> None:
        """Initialize shell.

        Args:
            parser: Parser bound to the session's player
            input_func: Returns the next line of input, raising EOFError at the end
            output: Writes one line of output
            player_name: Name used in the welcome and goodbye banners
        """
        self.parser = parser
        self.input_func = input_func
        self.output = output
        self.player_name = player_name

    def _print_result(self, result: Result) -> None:
        for line in result.lines:
            self.output(line)

    def offer_selection(self, result: Result) -> None:
        """Ask which search result to play. Anything but a valid number means no."""
        for line in SELECTION_PROMPT:
            self.output(line)
        try:
            choice = self.input_func()
        except EOFError:
            return
        selected = self.parser.player.select_search_result(result, choice)
        if selected is not None:
            self._print_result(selected)

    def handle(self, line: str) -> bool:
        """Process one line of input.

        Returns:
            False when the shell should exit, True otherwise
        """
        word = line.strip().upper()
        if word == "EXIT":
            self.output(
                f"{self.player_name} has now terminated its execution. Thank you and goodbye!"
            )
            return False
        if word == "HELP":
            self.output(self.parser.help_text())
            return True

        try:
            command = self.parser.parse(line)
            if command is None:
                return True
            result = command.run()
        except CommandError as e:
            self.output(str(e))
            return True

        self._print_result(result)
        if command.offers_selection and result.ok:
            self.offer_selection(result)
        return True

    def run(self) -> None:
        """Run until EXIT or end of input."""
        self.output(f"Hello and welcome to {self.player_name}, what would you like to do?")
        self.output("Enter HELP for list of available commands or EXIT to terminate.")
        while True:
            try:
                line = self.input_func()
            except EOFError:
                logger.debug("End of input")
                return
            if not self.handle(line):
                return
