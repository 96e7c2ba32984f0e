"""Tests for Result and Status."""

from src.videoplayer.models import Video
from src.videoplayer.results import Result, Status


def test_success():
    video = Video("A", "a")
    result = Result.success("line one", "line two", videos=[video])
    assert result.ok
    assert not result.is_error
    assert result.status is Status.OK
    assert result.message == "line one\nline two"
    assert result.videos == [video]


def test_failure():
    result = Result.failure(Status.FLAGGED, "Cannot play", reason="spam")
    assert not result.ok
    assert result.is_error
    assert result.reason == "spam"
    assert result.videos == []


def test_already_paused_is_informational():
    result = Result.failure(Status.ALREADY_PAUSED, "Video already paused: A")
    assert not result.ok
    assert not result.is_error


def test_repr():
    assert repr(Result.success("hi")) == "Result(OK, ['hi'])"
