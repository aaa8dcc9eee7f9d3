"""
Structured logger writing log entries through the standard logging module.
"""
import contextvars
import json
import logging
import sys
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence, Tuple

from ...config import LoggerSettings
from ...core.definitions.log_level import LogLevel, LogTime
from ...core.interfaces.logger_interface import ILogger, IContextLogger
from ...core.value_objects.detail import details_to_dict
from ...core.value_objects.scope import NO_SCOPE
from ...extensions.display_text import to_display_text
from .logging_scope import LoggingScope, resolve_context, resolve_scope


for _level in (LogLevel.TRACE, LogLevel.VERBOSE, LogLevel.FATAL, LogLevel.DISASTER):
    logging.addLevelName(_level.to_logging_level(), _level.name)

# Open scopes of the current thread or task, each paired with its logger.
_active_scopes: contextvars.ContextVar[Tuple[Tuple[ILogger, LoggingScope], ...]] = contextvars.ContextVar(
    "logwriter_active_scopes", default=()
)

# Handler installed by this package, per standard logger name.
_installed_handlers: Dict[str, logging.Handler] = {}
_handlers_lock = threading.Lock()


def resolve_message(message: Optional[str], exception: Optional[BaseException]) -> str:
    """Get the entry text, falling back to the exception when message is blank."""
    if message is not None and str(message).strip():
        return str(message).strip()
    if exception is not None:
        text = str(exception).strip()
        return text or type(exception).__name__
    return ""


class StructuredLogger(ILogger):
    """Structured logger implementation with JSON formatting and scope support."""

    def __init__(
        self,
        name: Optional[str] = None,
        settings: Optional[LoggerSettings] = None,
        handler: Optional[logging.Handler] = None
    ):
        self.settings = settings or LoggerSettings()
        self.name = name or self.settings.name
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(LogLevel.TRACE.to_logging_level())
        self._install_handler(handler)

        # Prevent duplicate logs
        self.logger.propagate = False

    def _install_handler(self, handler: Optional[logging.Handler]) -> None:
        """Replace the handler a previous logger of this name installed.

        Handlers added by application code are left alone; when one is
        present nothing is installed.
        """
        with _handlers_lock:
            previous = _installed_handlers.pop(self.name, None)
            if previous is not None:
                self.logger.removeHandler(previous)
            if self.logger.handlers:
                return
            if handler is None:
                handler = logging.StreamHandler(sys.stdout)
                handler.setFormatter(StructuredFormatter(
                    log_time=self.settings.log_time,
                    time_format=self.settings.time_format
                ))
            self.logger.addHandler(handler)
            _installed_handlers[self.name] = handler

    @property
    def context(self) -> str:
        return ""

    @property
    def is_disabled(self) -> bool:
        return not self.settings.level.is_writable

    def is_enabled(self, level: LogLevel) -> bool:
        if self.is_disabled or not LogLevel(level).is_writable:
            return False
        return level >= self.settings.level

    def begin_scope(self, scope: Any) -> LoggingScope:
        handle = LoggingScope(scope, on_close=self._end_scope)
        _active_scopes.set(_active_scopes.get() + ((self, handle),))
        return handle

    def _end_scope(self, handle: LoggingScope) -> None:
        _active_scopes.set(tuple(item for item in _active_scopes.get() if item[1] is not handle))

    @property
    def active_scope(self) -> Optional[LoggingScope]:
        """Innermost scope this logger opened in the current thread or task."""
        for owner, handle in reversed(_active_scopes.get()):
            if owner is self:
                return handle
        return None

    def write(
        self,
        level: LogLevel,
        message: Optional[str] = None,
        exception: Optional[BaseException] = None,
        details: Sequence[Tuple[str, Any]] = (),
        *,
        scope: Any = NO_SCOPE
    ) -> None:
        if not self.is_enabled(level):
            return

        text = resolve_message(message, exception)
        if not text:
            return

        if scope is NO_SCOPE:
            scope = self.active_scope

        self._log(LogLevel(level), text, exception, {
            "log_level": to_display_text(LogLevel(level)),
            "context": self.context,
            "scope": resolve_scope(scope, self.settings.full_name),
            "details": details_to_dict(details),
        })

    def _log(
        self,
        level: LogLevel,
        message: str,
        exception: Optional[BaseException],
        extra: Dict[str, Any]
    ) -> None:
        """Internal logging method with structured context."""
        exc_info = None
        if exception is not None:
            exc_info = (type(exception), exception, exception.__traceback__)

        record = self.logger.makeRecord(
            name=self.name,
            level=level.to_logging_level(),
            fn="",
            lno=0,
            msg=message,
            args=(),
            exc_info=exc_info,
            extra=extra
        )
        self.logger.handle(record)


class ContextLogger(StructuredLogger, IContextLogger):
    """Structured logger bound to a context category."""

    def __init__(
        self,
        context: Any,
        settings: Optional[LoggerSettings] = None,
        handler: Optional[logging.Handler] = None
    ):
        settings = settings or LoggerSettings()
        self._context = resolve_context(context, settings.full_name)
        name = f"{settings.name}.{self._context}" if self._context else settings.name
        super().__init__(name, settings, handler)

    @property
    def context(self) -> str:
        return self._context


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def __init__(self, log_time: LogTime = LogTime.LOCAL, time_format: Optional[str] = None):
        super().__init__()
        self.log_time = log_time
        self.time_format = time_format

    def format_time(self, record: logging.LogRecord) -> str:
        if self.log_time is LogTime.UTC:
            moment = datetime.fromtimestamp(record.created, tz=timezone.utc)
        else:
            moment = datetime.fromtimestamp(record.created).astimezone()
        if self.time_format:
            return moment.strftime(self.time_format)
        return moment.isoformat()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry: Dict[str, Any] = {
            "timestamp": self.format_time(record),
            "level": getattr(record, "log_level", record.levelname),
            "logger": record.name,
            "context": getattr(record, "context", ""),
            "scope": getattr(record, "scope", ""),
            "message": record.getMessage(),
        }

        details = {}
        for key, value in (getattr(record, "details", None) or {}).items():
            # Ensure value is JSON serializable
            try:
                json.dumps(value)
                details[key] = value
            except (TypeError, ValueError):
                details[key] = str(value)
        if details:
            log_entry["details"] = details

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'))
