"""Level-named logging shortcuts and level display texts"""

from . import level_facade
from .level_facade import (
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
    disaster
)
from .display_text import to_display_text, register_display_text, restore_display_text

__all__ = [
    'level_facade',
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
    'restore_display_text'
]
