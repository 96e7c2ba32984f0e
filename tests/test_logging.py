"""Tests for the logging configuration."""

import logging

from src.videoplayer.logging_config import (
    DATE_FORMAT,
    LOG_FORMAT,
    configure_logging,
    disable_debug,
    enable_debug,
    get_logger,
    logger,
)


def test_default_logger_configuration():
    """Test the default logger configuration."""
    configure_logging()
    assert logger.name == "videoplayer"
    assert not logger.propagate

    # Check handler configuration
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)

    # Check formatter configuration
    formatter = handler.formatter
    assert formatter._fmt == LOG_FORMAT == "%(asctime)s - %(levelname)s - %(message)s"
    assert formatter.datefmt == DATE_FORMAT == "%Y-%m-%d %H:%M:%S"


def test_configure_logging_is_idempotent():
    configure_logging()
    configure_logging()
    assert len(logger.handlers) == 1


def test_configure_logging_level():
    try:
        configure_logging("info")
        assert logger.level == logging.INFO
        configure_logging("not-a-level")
        assert logger.level == logging.WARNING
    finally:
        configure_logging()


def test_enable_debug():
    """Test enabling debug logging."""
    configure_logging()
    try:
        enable_debug()
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG
    finally:
        disable_debug()


def test_disable_debug():
    """Test disabling debug logging."""
    enable_debug()
    disable_debug()
    assert logger.level != logging.DEBUG
    assert not get_logger("videoplayer.test").isEnabledFor(logging.DEBUG)


def test_get_logger_no_name():
    """Test getting the package logger."""
    assert get_logger() is logger


def test_get_logger_with_name():
    """Test getting a named logger."""
    log = get_logger("videoplayer.test")
    assert log.name == "videoplayer.test"
    assert log.parent is logger


def test_get_logger_for_module_names():
    assert get_logger("src.videoplayer.player").name == "videoplayer.player"
    assert get_logger("videoplayer.commands.base").name == "videoplayer.commands.base"
    assert get_logger("src.videoplayer") is logger


def test_logger_output():
    """Test that logger output is formatted correctly."""
    test_formatter = logging.Formatter("%(levelname)s - %(message)s")
    record = logging.LogRecord("test", logging.INFO, "test.py", 1, "Test message", (), None)
    assert test_formatter.format(record) == "INFO - Test message"


def test_get_logger_outside_package():
    """Names outside the package are not moved under the package logger."""
    log = get_logger("tests.helpers")
    assert log.name == "tests.helpers"
    assert log is logging.getLogger("tests.helpers")
    assert log.parent is not logger
