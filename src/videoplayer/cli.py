"""Command-line interface for the video player."""

import argparse
import random
import sys
from typing import List, Optional

from . import commands
from .catalog import load_catalog
from .config import CATALOG_FILE, RANDOM_SEED
from .errors import VideoPlayerError, log_error
from .logging_config import configure_logging, enable_debug, get_logger
from .player import PlayerController
from .shell import Shell

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="In-memory video player with playlists and moderation flags"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--catalog",
        default=CATALOG_FILE,
        help="Video catalog file with one 'title | id | tags' entry per line",
    )
    parser.add_argument(
        "--seed", type=int, default=RANDOM_SEED, help="Seed for PLAY_RANDOM selection"
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to run once, e.g. PLAY amazing_cats_video_id. Starts the shell if omitted.",
    )
    return parser


def build_player(catalog_file: str, seed: Optional[int] = None) -> PlayerController:
    """Load the catalog and build a controller for one session.

    Raises:
        CatalogError: If the catalog cannot be loaded
    """
    catalog = load_catalog(catalog_file)
    return PlayerController(catalog, rng=random.Random(seed))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging()
    if args.debug:
        enable_debug()

    try:
        player = build_player(args.catalog, args.seed)
    except VideoPlayerError as e:
        log_error(e, "Failed to load catalog")
        return 1

    command_parser = commands.create_parser(player)

    if not args.command:
        Shell(command_parser, input_func=input).run()
        return 0

    if args.command[0].upper() == "HELP":
        print(command_parser.help_text())
        return 0

    try:
        command = command_parser.parse(" ".join(args.command))
        if command is None:
            parser.print_help()
            return 1
        result = command.run()
    except VideoPlayerError as e:
        logger.error("Command failed: %s", str(e))
        return 1

    for line in result.lines:
        print(line)
    if command.offers_selection and result.ok:
        Shell(command_parser, input_func=input).offer_selection(result)
    return 1 if result.is_error else 0


if __name__ == "__main__":
    sys.exit(main())
