"""Common test fixtures and utilities."""

import random
from typing import Callable, Iterable, List

import pytest

from src.videoplayer.catalog import VideoCatalog
from src.videoplayer.models import Video
from src.videoplayer.player import PlayerController

CATALOG_TEXT = """\
Funny Dogs | funny_dogs_video_id |  #dog , #animal
Amazing Cats | amazing_cats_video_id |  #cat , #animal
Another Cat Video | another_cat_video_id |  #cat , #animal
Life at Google | life_at_google_video_id |  #google , #career
Video about nothing | nothing_video_id |
"""


@pytest.fixture
def videos() -> List[Video]:
    """Two-video catalog used by the scenario tests."""
    return [
        Video("Amazing Cats", "cat1", ("cat", "animal")),
        Video("Funny Dogs", "dog1", ("dog", "animal")),
    ]


@pytest.fixture
def catalog(videos) -> VideoCatalog:
    return VideoCatalog(videos)


@pytest.fixture
def player(catalog) -> PlayerController:
    """Controller over the two-video catalog with a seeded random source."""
    return PlayerController(catalog, rng=random.Random(42))


@pytest.fixture
def catalog_file(tmp_path) -> str:
    """Catalog file in the pipe-delimited format.

    Returns:
        str: Path to the file
    """
    path = tmp_path / "videos.txt"
    path.write_text(CATALOG_TEXT, encoding="utf-8")
    return str(path)


@pytest.fixture
def feed() -> Callable[[Iterable[str]], Callable[[], str]]:
    """Build input functions that return each line, then raise EOFError."""

    def make(lines: Iterable[str]) -> Callable[[], str]:
        remaining = iter(lines)

        def read() -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read

    return make
