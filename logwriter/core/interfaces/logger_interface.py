"""
Logger interface for level-dispatched logging abstraction.
"""
from abc import ABC, abstractmethod
from typing import Any, ContextManager, Optional, Sequence, Tuple

from ...extensions import level_facade
from ..definitions.log_level import LogLevel
from ..value_objects.scope import NO_SCOPE


class ILogger(ABC):
    """Interface every logger implements.

    Only :meth:`write` does real work. The level-named methods are
    shortcuts for the functions in :mod:`logwriter.extensions.level_facade`
    and accept the same argument shapes.
    """

    @property
    @abstractmethod
    def is_disabled(self) -> bool:
        """Check if the logger writes nothing at all."""
        pass

    @abstractmethod
    def is_enabled(self, level: LogLevel) -> bool:
        """Check if entries of given level would be written."""
        pass

    @abstractmethod
    def begin_scope(self, scope: Any) -> ContextManager[Any]:
        """Make scope the default for entries written inside the block."""
        pass

    @abstractmethod
    def write(
        self,
        level: LogLevel,
        message: Optional[str] = None,
        exception: Optional[BaseException] = None,
        details: Sequence[Tuple[str, Any]] = (),
        *,
        scope: Any = NO_SCOPE
    ) -> None:
        """Write one entry.

        When ``message`` is missing or blank and ``exception`` is given,
        implementations take the entry text from the exception.
        """
        pass

    def trace(self, *args: Any, **kwargs: Any) -> None:
        level_facade.trace(self, *args, **kwargs)

    def debug(self, *args: Any, **kwargs: Any) -> None:
        level_facade.debug(self, *args, **kwargs)

    def verbose(self, *args: Any, **kwargs: Any) -> None:
        level_facade.verbose(self, *args, **kwargs)

    def message(self, *args: Any, **kwargs: Any) -> None:
        level_facade.message(self, *args, **kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> None:
        level_facade.warning(self, *args, **kwargs)

    def error(self, *args: Any, **kwargs: Any) -> None:
        level_facade.error(self, *args, **kwargs)

    def fatal(self, *args: Any, **kwargs: Any) -> None:
        level_facade.fatal(self, *args, **kwargs)

    def critical(self, *args: Any, **kwargs: Any) -> None:
        level_facade.critical(self, *args, **kwargs)

    def disaster(self, *args: Any, **kwargs: Any) -> None:
        level_facade.disaster(self, *args, **kwargs)


class IContextLogger(ILogger):
    """Logger bound to a context category, e.g. a class or module."""

    @property
    @abstractmethod
    def context(self) -> str:
        """Resolved name of the bound context."""
        pass
