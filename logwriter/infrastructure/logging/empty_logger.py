"""
Loggers that write nothing.
"""
from typing import Any, Optional, Sequence, Tuple

from ...core.definitions.log_level import LogLevel
from ...core.interfaces.logger_interface import ILogger, IContextLogger
from ...core.value_objects.scope import NO_SCOPE
from .logging_scope import LoggingScope


class EmptyLogger(ILogger):
    """Disabled logger; every write is dropped."""

    @property
    def is_disabled(self) -> bool:
        return True

    def is_enabled(self, level: LogLevel) -> bool:
        return False

    def begin_scope(self, scope: Any) -> LoggingScope:
        return LoggingScope(scope)

    def write(
        self,
        level: LogLevel,
        message: Optional[str] = None,
        exception: Optional[BaseException] = None,
        details: Sequence[Tuple[str, Any]] = (),
        *,
        scope: Any = NO_SCOPE
    ) -> None:
        pass


class EmptyContextLogger(EmptyLogger, IContextLogger):
    """Disabled logger bound to a context."""

    def __init__(self, context: str = ""):
        self._context = context

    @property
    def context(self) -> str:
        return self._context
