import logging
import threading

import pytest

from logwriter.config import LoggerSettings, LogWriterConfig
from logwriter.core.definitions.log_level import LogLevel, LogTime
from logwriter.core.interfaces.logger_interface import IContextLogger
from logwriter.extensions import level_facade
from logwriter.factories.logger_factory import (
    LoggerFactory,
    LoggerFactoryBuilder,
    create_default_logger_factory,
    create_development_logger_factory,
    create_production_logger_factory
)
from logwriter.infrastructure.logging.empty_logger import EmptyContextLogger, EmptyLogger
from logwriter.infrastructure.logging.structured_logger import ContextLogger, StructuredLogger
from tests.conftest import DummyComponent


@pytest.fixture
def factory(logger_name, recording_handler):
    """Factory writing every level to a recording handler."""
    factory = LoggerFactoryBuilder() \
        .with_level(LogLevel.TRACE) \
        .with_name(logger_name) \
        .with_handler(recording_handler) \
        .build()
    yield factory
    for name in list(logging.root.manager.loggerDict):
        if name.startswith(f"{logger_name}."):
            logging.getLogger(name).handlers.clear()


class TestLoggerFactory:
    """Test suite for LoggerFactory."""

    def test_logger_for_class(self, factory, logger_name):
        logger = factory.logger_for(DummyComponent)

        assert isinstance(logger, ContextLogger)
        assert isinstance(logger, IContextLogger)
        assert logger.context == "DummyComponent"
        assert logger.name == f"{logger_name}.DummyComponent"

    def test_logger_for_is_cached(self, factory):
        assert factory.logger_for(DummyComponent) is factory.logger_for("DummyComponent")
        assert factory.logger_for(DummyComponent) is not factory.logger_for("Other")

    def test_logger_for_is_thread_safe(self, factory):
        results = []

        def worker():
            results.append(factory.logger_for("Shared"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(logger) for logger in results}) == 1

    def test_context_logger_writes_through_facade(self, factory, recording_handler):
        level_facade.message(factory.logger_for(DummyComponent), "started", ("attempt", 1))

        record = recording_handler.records[0]
        assert record.context == "DummyComponent"
        assert record.details == {"attempt": 1}

    def test_create_logger(self, factory, logger_name):
        logger = factory.create_logger()

        assert isinstance(logger, StructuredLogger)
        assert logger.name == logger_name

    def test_disabled_factory_creates_empty_loggers(self):
        factory = LoggerFactoryBuilder().with_level("disabled").build()

        assert isinstance(factory.create_logger(), EmptyLogger)
        context_logger = factory.logger_for(DummyComponent)
        assert isinstance(context_logger, EmptyContextLogger)
        assert context_logger.context == "DummyComponent"

    def test_full_name_context(self, logger_name, recording_handler):
        factory = LoggerFactoryBuilder() \
            .with_name(logger_name) \
            .with_full_name() \
            .with_handler(recording_handler) \
            .build()

        logger = factory.logger_for(DummyComponent)

        assert logger.context == "tests.conftest.DummyComponent"
        logging.getLogger(logger.name).handlers.clear()

    def test_update_settings_clears_cache(self, factory, logger_name):
        before = factory.logger_for("Worker")

        factory.update_settings(LoggerSettings(level=LogLevel.DISABLED, name=logger_name))

        after = factory.logger_for("Worker")
        assert after is not before
        assert after.is_disabled

    def test_update_settings_refreshes_formatter(self, logger_name):
        """Test loggers recreated after an update format with the new settings."""
        factory = LoggerFactoryBuilder() \
            .with_name(logger_name) \
            .with_time_format("%Y") \
            .build()
        factory.logger_for("Worker")

        factory.update_settings(LoggerSettings(name=logger_name, log_time=LogTime.UTC, time_format="%H:%M"))
        logger = factory.logger_for("Worker")

        handlers = logging.getLogger(logger.name).handlers
        assert len(handlers) == 1
        assert handlers[0].formatter.time_format == "%H:%M"
        assert handlers[0].formatter.log_time is LogTime.UTC
        handlers.clear()

    def test_application_handlers_are_kept(self, logger_name, recording_handler):
        """Test a handler added outside the factory is never replaced."""
        logging.getLogger(f"{logger_name}.Worker").addHandler(recording_handler)
        factory = LoggerFactoryBuilder().with_name(logger_name).build()

        level_facade.message(factory.logger_for("Worker"), "started")

        assert logging.getLogger(f"{logger_name}.Worker").handlers == [recording_handler]
        assert recording_handler.records[0].getMessage() == "started"
        logging.getLogger(f"{logger_name}.Worker").handlers.clear()

    def test_settings_are_copied(self, logger_name):
        settings = LoggerSettings(level=LogLevel.ERROR, name=logger_name)
        factory = LoggerFactory(settings)

        settings.level = LogLevel.TRACE

        assert factory.get_settings().level is LogLevel.ERROR

    def test_from_config(self, clean_environment):
        clean_environment.setenv("LOGWRITER_LEVEL", "fatal")

        factory = LoggerFactory.from_config(LogWriterConfig())

        assert factory.get_settings().level is LogLevel.FATAL


class TestLoggerFactoryBuilder:
    """Test suite for LoggerFactoryBuilder."""

    def test_builder_sets_all_settings(self):
        factory = LoggerFactoryBuilder() \
            .with_level("warning") \
            .with_full_name() \
            .with_log_time("utc") \
            .with_time_format("%H:%M") \
            .with_name("service") \
            .build()

        settings = factory.get_settings()
        assert settings.level is LogLevel.WARNING
        assert settings.full_name is True
        assert settings.log_time is LogTime.UTC
        assert settings.time_format == "%H:%M"
        assert settings.name == "service"

    def test_convenience_factories(self):
        assert create_default_logger_factory().get_settings().level is LogLevel.MESSAGE
        assert create_development_logger_factory().get_settings().level is LogLevel.TRACE
        production = create_production_logger_factory().get_settings()
        assert production.level is LogLevel.WARNING
        assert production.log_time is LogTime.UTC
