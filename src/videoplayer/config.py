"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

load_dotenv()

# Directory Settings
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# Catalog Settings
CATALOG_FILE = os.getenv("VIDEOPLAYER_CATALOG_FILE", os.path.join(PACKAGE_DIR, "videos.txt"))

# Player Settings
PLAYER_NAME = os.getenv("VIDEOPLAYER_NAME", "YouTube")
DEFAULT_FLAG_REASON = os.getenv("VIDEOPLAYER_DEFAULT_FLAG_REASON", "Not supplied")
LOG_LEVEL = os.getenv("VIDEOPLAYER_LOG_LEVEL", "WARNING")


def _parse_seed(value):
    """Parse the random seed setting, ignoring values that are not integers."""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None


RANDOM_SEED = _parse_seed(os.getenv("VIDEOPLAYER_RANDOM_SEED"))
