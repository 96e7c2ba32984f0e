"""Tests for configuration settings."""

import os

import pytest

from src.videoplayer import config


def test_defaults():
    assert config.DEFAULT_FLAG_REASON
    assert config.PLAYER_NAME
    assert config.CATALOG_FILE.endswith(".txt") or os.getenv("VIDEOPLAYER_CATALOG_FILE")


@pytest.mark.parametrize(
    "value, expected",
    [("42", 42), (" 7 ", 7), ("-1", -1), ("", None), ("   ", None), ("abc", None), (None, None)],
)
def test_parse_seed(value, expected):
    assert config._parse_seed(value) == expected


def test_settings_are_all_used():
    """Only settings the package reads are exposed."""
    assert not hasattr(config, "DATA_DIR")
    assert config.PACKAGE_DIR == os.path.dirname(os.path.abspath(config.__file__))
