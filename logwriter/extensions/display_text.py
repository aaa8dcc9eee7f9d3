"""
Display texts printed for logging levels.
"""
import threading
from typing import Any, Dict

from ..core.definitions.log_level import LogLevel
from ..core.exceptions.logging_exceptions import InvalidDisplayTextError, InvalidLogLevelError


def _default_text(level: LogLevel) -> str:
    return level.name.upper()


_lock = threading.Lock()
_mappings: Dict[LogLevel, str] = {level: _default_text(level) for level in LogLevel}


def _checked(level: Any) -> LogLevel:
    if not isinstance(level, LogLevel) or level not in _mappings:
        raise InvalidLogLevelError(level)
    return level


def to_display_text(level: LogLevel) -> str:
    """Get the text a logger prints for level, e.g. ``WARNING``."""
    level = _checked(level)
    with _lock:
        return _mappings[level]


def register_display_text(level: LogLevel, text: str) -> None:
    """Replace the printed text of level, e.g. ``WARN`` instead of ``WARNING``."""
    level = _checked(level)
    if text is None or not str(text).strip():
        raise InvalidDisplayTextError(level.name, text)
    with _lock:
        _mappings[level] = str(text)


def restore_display_text(level: LogLevel) -> None:
    """Restore the default text of level."""
    level = _checked(level)
    with _lock:
        _mappings[level] = _default_text(level)
