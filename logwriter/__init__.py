"""
LogWriter

Level-named logging shortcuts (trace, debug, verbose, message, warning,
error, fatal, critical, disaster) over one abstract ``ILogger.write``.
"""

from .core.definitions import LogLevel, LogTime
from .core.exceptions import (
    LogWriterException,
    InvalidLogLevelError,
    InvalidDisplayTextError,
    ConfigurationError
)
from .core.interfaces import ILogger, IContextLogger
from .core.value_objects import Detail, NO_SCOPE
from .extensions import (
    LEVEL_FUNCTIONS,
    log,
    trace,
    debug,
    verbose,
    message,
    warning,
    error,
    fatal,
    critical,
    disaster,
    to_display_text,
    register_display_text,
    restore_display_text
)
from .config import LoggerSettings, LogWriterConfig
from .infrastructure.logging import EmptyLogger, EmptyContextLogger, StructuredLogger, ContextLogger
from .factories import LoggerFactory, LoggerFactoryBuilder

__version__ = "1.0.0"

__all__ = [
    'LogLevel',
    'LogTime',
    'LogWriterException',
    'InvalidLogLevelError',
    'InvalidDisplayTextError',
    'ConfigurationError',
    'ILogger',
    'IContextLogger',
    'Detail',
    'NO_SCOPE',
    'LEVEL_FUNCTIONS',
    'log',
    'trace',
    'debug',
    'verbose',
    'message',
    'warning',
    'error',
    'fatal',
    'critical',
    'disaster',
    'to_display_text',
    'register_display_text',
    'restore_display_text',
    'LoggerSettings',
    'LogWriterConfig',
    'EmptyLogger',
    'EmptyContextLogger',
    'StructuredLogger',
    'ContextLogger',
    'LoggerFactory',
    'LoggerFactoryBuilder'
]
