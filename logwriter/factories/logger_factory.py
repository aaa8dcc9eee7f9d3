"""
Logger factory for dependency injection and context-bound logger creation.
"""
import logging
import threading
from typing import Any, Dict, Optional, Union

from ..config import LoggerSettings, LogWriterConfig
from ..core.definitions.log_level import LogLevel, LogTime
from ..core.interfaces.logger_interface import ILogger, IContextLogger
from ..infrastructure.logging.empty_logger import EmptyContextLogger, EmptyLogger
from ..infrastructure.logging.structured_logger import ContextLogger, StructuredLogger, resolve_context


class LoggerFactory:
    """Factory creating loggers that share one set of settings."""

    def __init__(self, settings: Optional[LoggerSettings] = None, handler: Optional[logging.Handler] = None):
        """Initialize the logger factory with settings."""
        self._settings = settings.copy() if settings else LoggerSettings()
        self._handler = handler
        self._context_loggers: Dict[str, IContextLogger] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: Optional[LogWriterConfig] = None) -> 'LoggerFactory':
        """Create a factory from environment and settings file configuration."""
        config = config or LogWriterConfig()
        return cls(config.logger)

    def create_logger(self, name: Optional[str] = None) -> ILogger:
        """Create a logger that is not bound to a context."""
        if self._settings.level is LogLevel.DISABLED:
            return EmptyLogger()
        return StructuredLogger(name=name, settings=self._settings, handler=self._handler)

    def logger_for(self, context: Any) -> IContextLogger:
        """Get or create the logger bound to context (class, module or name)."""
        key = resolve_context(context, self._settings.full_name)
        with self._lock:
            if key not in self._context_loggers:
                if self._settings.level is LogLevel.DISABLED:
                    self._context_loggers[key] = EmptyContextLogger(key)
                else:
                    self._context_loggers[key] = ContextLogger(
                        context=key,
                        settings=self._settings,
                        handler=self._handler
                    )
            return self._context_loggers[key]

    def get_settings(self) -> LoggerSettings:
        """Get a copy of the current settings."""
        return self._settings.copy()

    def update_settings(self, settings: LoggerSettings):
        """Replace the settings; loggers created afterwards use them."""
        with self._lock:
            self._settings = settings.copy()
            # Clear logger instances to force recreation with new settings
            self._context_loggers.clear()


class LoggerFactoryBuilder:
    """Builder for creating LoggerFactory instances with fluent configuration."""

    def __init__(self):
        self._settings = LoggerSettings()
        self._handler: Optional[logging.Handler] = None

    def with_level(self, level: Union[LogLevel, str]) -> 'LoggerFactoryBuilder':
        """Set logging level threshold."""
        self._settings.level = LogLevel.parse(level)
        return self

    def with_full_name(self, full_name: bool = True) -> 'LoggerFactoryBuilder':
        """Qualify context and scope type names with their module."""
        self._settings.full_name = full_name
        return self

    def with_log_time(self, log_time: Union[LogTime, str]) -> 'LoggerFactoryBuilder':
        """Set timestamp time zone."""
        self._settings.log_time = LogTime.parse(log_time)
        return self

    def with_time_format(self, time_format: str) -> 'LoggerFactoryBuilder':
        """Set timestamp format."""
        self._settings.time_format = time_format
        return self

    def with_name(self, name: str) -> 'LoggerFactoryBuilder':
        """Set the root logger name."""
        self._settings.name = name
        return self

    def with_handler(self, handler: logging.Handler) -> 'LoggerFactoryBuilder':
        """Send records to handler instead of standard output."""
        self._handler = handler
        return self

    def build(self) -> LoggerFactory:
        """Build the LoggerFactory instance."""
        return LoggerFactory(self._settings, self._handler)


# Convenience function for creating a default logger factory
def create_default_logger_factory() -> LoggerFactory:
    """Create a logger factory with default configuration."""
    return LoggerFactoryBuilder() \
        .with_level(LogLevel.MESSAGE) \
        .build()


# Convenience function for creating a development logger factory
def create_development_logger_factory() -> LoggerFactory:
    """Create a logger factory configured for development."""
    return LoggerFactoryBuilder() \
        .with_level(LogLevel.TRACE) \
        .with_full_name() \
        .build()


# Convenience function for creating a production logger factory
def create_production_logger_factory() -> LoggerFactory:
    """Create a logger factory configured for production."""
    return LoggerFactoryBuilder() \
        .with_level(LogLevel.WARNING) \
        .with_log_time(LogTime.UTC) \
        .build()
