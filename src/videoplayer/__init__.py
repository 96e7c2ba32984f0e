"""In-memory video player with playlists and moderation flags."""

__version__ = "0.1.0"

# Import all public components
from .catalog import VideoCatalog, load_catalog
from .commands import CommandParser, PlayerCommand, create_parser
from .errors import CatalogError, CommandError, VideoPlayerError
from .flags import FlagStore
from .logging_config import configure_logging, get_logger
from .models import Playlist, Video
from .player import PlaybackSlot, PlayerController
from .playlists import PlaylistStore
from .results import Result, Status
from .shell import Shell

# Import config variables
from .config import (  # noqa: F401
    CATALOG_FILE,
    DEFAULT_FLAG_REASON,
    PLAYER_NAME,
    RANDOM_SEED,
)

# Configure logging
configure_logging()

# Get logger for this module
logger = get_logger(__name__)
