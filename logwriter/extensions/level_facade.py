"""
Level-named shortcuts for ``ILogger.write``.

Every function takes the logger first and then any of these shapes::

    warning(logger, "disk nearly full")
    warning(logger, "disk nearly full", ("free", 120), ("unit", "MB"))
    warning(logger, scope, "disk nearly full")
    warning(logger, error)
    warning(logger, scope, error)
    warning(logger, "disk nearly full", error)
    warning(logger, scope, "disk nearly full", error, ("free", 120))

Trailing ``(label, value)`` tuples are detail pairs. ``scope``,
``exception`` and ``details`` may also be passed by keyword. A text first
argument followed by an exception is always read as a message; pass
``scope=`` to tag a text scope in that case.

A ``None`` logger makes every call a no-op. Exceptions raised by the
logger's ``write`` are not caught.
"""
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Tuple

from ..core.definitions.log_level import LogLevel
from ..core.value_objects.detail import is_detail_pair
from ..core.value_objects.scope import NO_SCOPE

if TYPE_CHECKING:
    from ..core.interfaces.logger_interface import ILogger


def _is_text(value: Any) -> bool:
    return value is None or isinstance(value, str)


def _unpack(
    args: Tuple[Any, ...],
    scope: Any,
    exception: Optional[BaseException],
    details: Iterable[Tuple[str, Any]]
) -> Tuple[Any, Optional[str], Optional[BaseException], Tuple[Tuple[str, Any], ...]]:
    """Sort positional arguments into scope, message, exception and details"""
    head = list(args)
    trailing = []
    while head and is_detail_pair(head[-1]):
        trailing.insert(0, head.pop())

    message = None
    positional_scope = NO_SCOPE
    positional_exception = None

    if len(head) == 1:
        value = head[0]
        if isinstance(value, BaseException):
            positional_exception = value
        elif _is_text(value):
            message = value
        else:
            raise TypeError(f"Expected message text or exception, got {type(value).__name__}")
    elif len(head) == 2:
        first, second = head
        if isinstance(second, BaseException) and _is_text(first):
            message, positional_exception = first, second
        elif isinstance(second, BaseException):
            positional_scope, positional_exception = first, second
        elif isinstance(first, str) and second is None:
            # optional exception variable that happens to be unset
            message = first
        elif _is_text(second):
            positional_scope, message = first, second
        else:
            raise TypeError(f"Expected message text or exception, got {type(second).__name__}")
    elif len(head) == 3:
        positional_scope, message, positional_exception = head
        if not _is_text(message):
            raise TypeError(f"Expected message text, got {type(message).__name__}")
        if positional_exception is not None and not isinstance(positional_exception, BaseException):
            raise TypeError(f"Expected exception, got {type(positional_exception).__name__}")
    elif len(head) > 3:
        raise TypeError(f"Too many positional arguments: {len(head)}")

    if positional_scope is not NO_SCOPE and scope is not NO_SCOPE:
        raise TypeError("Scope given both positionally and by keyword")
    if positional_exception is not None and exception is not None:
        raise TypeError("Exception given both positionally and by keyword")

    if positional_scope is not NO_SCOPE:
        scope = positional_scope
    if positional_exception is not None:
        exception = positional_exception

    return scope, message, exception, tuple(trailing) + tuple(details or ())


def log(
    logger: Optional['ILogger'],
    level: LogLevel,
    *args: Any,
    scope: Any = NO_SCOPE,
    exception: Optional[BaseException] = None,
    details: Iterable[Tuple[str, Any]] = ()
) -> None:
    """Write one entry at ``level``; does nothing when ``logger`` is None."""
    if logger is None:
        return

    scope, message, exception, details = _unpack(args, scope, exception, details)
    logger.write(level, message, exception, details, scope=scope)


def trace(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write a trace entry."""
    log(logger, LogLevel.TRACE, *args, **kwargs)


def debug(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write a debug entry."""
    log(logger, LogLevel.DEBUG, *args, **kwargs)


def verbose(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write a verbose entry."""
    log(logger, LogLevel.VERBOSE, *args, **kwargs)


def message(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write a regular message entry."""
    log(logger, LogLevel.MESSAGE, *args, **kwargs)


def warning(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write a warning entry."""
    log(logger, LogLevel.WARNING, *args, **kwargs)


def error(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write an error entry."""
    log(logger, LogLevel.ERROR, *args, **kwargs)


def fatal(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write a fatal entry."""
    log(logger, LogLevel.FATAL, *args, **kwargs)


def critical(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write a critical entry."""
    log(logger, LogLevel.CRITICAL, *args, **kwargs)


def disaster(logger: Optional['ILogger'], *args: Any, **kwargs: Any) -> None:
    """Write a disaster entry."""
    log(logger, LogLevel.DISASTER, *args, **kwargs)


LEVEL_FUNCTIONS: Mapping[LogLevel, Any] = MappingProxyType({
    LogLevel.TRACE: trace,
    LogLevel.DEBUG: debug,
    LogLevel.VERBOSE: verbose,
    LogLevel.MESSAGE: message,
    LogLevel.WARNING: warning,
    LogLevel.ERROR: error,
    LogLevel.FATAL: fatal,
    LogLevel.CRITICAL: critical,
    LogLevel.DISASTER: disaster,
})
