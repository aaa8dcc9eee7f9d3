"""
LogWriter Test Configuration and Fixtures

This module provides common fixtures and configuration for LogWriter tests.
"""

import logging
import uuid
from unittest.mock import Mock

import pytest

from logwriter.config import LoggerSettings
from logwriter.core.definitions.log_level import LogLevel, LogTime
from logwriter.core.interfaces.logger_interface import ILogger
from logwriter.extensions.display_text import restore_display_text


class RecordingHandler(logging.Handler):
    """Handler keeping every record it receives."""

    def __init__(self):
        super().__init__(level=logging.NOTSET)
        self.records = []

    def emit(self, record):
        self.records.append(record)


class DummyComponent:
    """Class used as logging context and scope in tests."""

    def run(self):
        return "run"


@pytest.fixture
def mock_logger():
    """Mock logger exposing the ILogger interface."""
    return Mock(spec=ILogger)


@pytest.fixture
def recording_handler():
    """Handler collecting emitted log records."""
    return RecordingHandler()


@pytest.fixture
def logger_name():
    """Unique standard logging name so handlers do not leak between tests."""
    name = f"logwriter-tests.{uuid.uuid4().hex}"
    yield name
    std_logger = logging.getLogger(name)
    for handler in list(std_logger.handlers):
        std_logger.removeHandler(handler)


@pytest.fixture
def trace_settings(logger_name):
    """Settings writing every level."""
    return LoggerSettings(level=LogLevel.TRACE, log_time=LogTime.UTC, name=logger_name)


@pytest.fixture
def sample_exception():
    """Exception raised once so that it carries a traceback."""
    try:
        raise RuntimeError("connection refused")
    except RuntimeError as e:
        return e


@pytest.fixture(autouse=True)
def reset_display_texts():
    """Restore level display texts changed by a test."""
    yield
    for level in LogLevel:
        restore_display_text(level)


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove LogWriter environment variables."""
    for key in (
        "LOGWRITER_LEVEL",
        "LOG_LEVEL",
        "LOGWRITER_FULL_NAME",
        "LOGWRITER_LOG_TIME",
        "LOGWRITER_TIME_FORMAT",
        "LOGWRITER_NAME",
        "LOGWRITER_SETTINGS_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
