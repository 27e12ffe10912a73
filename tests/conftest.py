"""Shared fixtures for utcolor tests."""

import pytest

from utcolor.core.buffer import ColorBuffer
from utcolor.session import ColorSession, SessionConfig

from helpers import RED, RecordingWriter


@pytest.fixture
def red_abc() -> ColorBuffer:
    """Buffer "abc" with every character red."""
    return ColorBuffer.from_text("abc", RED)


@pytest.fixture
def session() -> ColorSession:
    return ColorSession()


@pytest.fixture
def small_session() -> ColorSession:
    """Session that only accepts 5 characters."""
    return ColorSession(SessionConfig(max_length=5))


@pytest.fixture
def recording_writer() -> RecordingWriter:
    return RecordingWriter()
