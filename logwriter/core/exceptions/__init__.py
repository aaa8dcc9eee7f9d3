"""Core log writer exceptions"""

from .logging_exceptions import (
    LogWriterException,
    InvalidLogLevelError,
    InvalidDisplayTextError,
    ConfigurationError
)

__all__ = [
    'LogWriterException',
    'InvalidLogLevelError',
    'InvalidDisplayTextError',
    'ConfigurationError'
]
