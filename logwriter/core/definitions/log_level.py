"""
Logging level definitions.
"""
from enum import Enum, IntEnum
from typing import Union

from ..exceptions.logging_exceptions import InvalidLogLevelError


class LogLevel(IntEnum):
    """Severity of a log entry, ordered from least to most severe.

    ``DISABLED`` is a threshold only: a logger configured with it writes
    nothing, and it is never the level of an entry.
    """
    DISABLED = 0
    TRACE = 1
    DEBUG = 2
    VERBOSE = 3
    MESSAGE = 4
    WARNING = 5
    ERROR = 6
    FATAL = 7
    CRITICAL = 8
    DISASTER = 9

    @classmethod
    def default(cls) -> 'LogLevel':
        """Level used when nothing else is configured"""
        return cls.MESSAGE

    @classmethod
    def parse(cls, value: Union['LogLevel', str]) -> 'LogLevel':
        """Get level from its name (case-insensitive)"""
        if isinstance(value, LogLevel):
            return value
        if not isinstance(value, str):
            raise InvalidLogLevelError(value, "expected a level name")

        name = value.strip().upper()
        try:
            return cls[name]
        except KeyError:
            raise InvalidLogLevelError(value) from None

    @property
    def is_writable(self) -> bool:
        """Check if entries can be written at this level"""
        return self is not LogLevel.DISABLED

    def to_unix_severity(self) -> int:
        """Convert to the syslog severity used by GELF and syslog sinks"""
        if self is LogLevel.DISABLED:
            raise InvalidLogLevelError(self.name, "cannot be converted to a severity")
        return _UNIX_SEVERITIES[self]

    def to_logging_level(self) -> int:
        """Convert to a numeric level of the standard ``logging`` module"""
        return _LOGGING_LEVELS[self]


class LogTime(str, Enum):
    """Time zone used for log timestamps"""
    UTC = "utc"
    LOCAL = "local"

    @classmethod
    def default(cls) -> 'LogTime':
        return cls.LOCAL

    @classmethod
    def parse(cls, value: Union['LogTime', str]) -> 'LogTime':
        if isinstance(value, LogTime):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported log time '{value}', expected 'utc' or 'local'") from None


_UNIX_SEVERITIES = {
    LogLevel.TRACE: 7,      # debug-level messages
    LogLevel.DEBUG: 7,
    LogLevel.VERBOSE: 6,    # informational
    LogLevel.MESSAGE: 5,    # notice
    LogLevel.WARNING: 4,
    LogLevel.ERROR: 3,
    LogLevel.FATAL: 2,      # critical conditions
    LogLevel.CRITICAL: 1,   # alert
    LogLevel.DISASTER: 0,   # emergency
}

# TRACE, VERBOSE, FATAL and DISASTER sit between the stdlib levels
_LOGGING_LEVELS = {
    LogLevel.DISABLED: 100,
    LogLevel.TRACE: 5,
    LogLevel.DEBUG: 10,
    LogLevel.VERBOSE: 15,
    LogLevel.MESSAGE: 20,
    LogLevel.WARNING: 30,
    LogLevel.ERROR: 40,
    LogLevel.FATAL: 45,
    LogLevel.CRITICAL: 50,
    LogLevel.DISASTER: 55,
}
