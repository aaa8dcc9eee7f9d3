"""
Scope handle returned by ``ILogger.begin_scope`` and the naming rules for
scope and context values.
"""
import inspect
import uuid
from typing import Any, Callable, Optional

from ...core.value_objects.scope import NO_SCOPE


def _type_name(value_type: type, full_name: bool) -> str:
    if full_name and value_type.__module__ not in ("builtins", "__main__"):
        return f"{value_type.__module__}.{value_type.__qualname__}"
    return value_type.__qualname__


def resolve_context(context: Any, full_name: bool = False) -> str:
    """Get the name of a logging context (class, module, routine or text)."""
    if context is None:
        return ""
    if isinstance(context, str):
        return context.strip()
    if inspect.ismodule(context):
        return context.__name__
    if inspect.isclass(context):
        return _type_name(context, full_name)
    if inspect.isroutine(context):
        return context.__qualname__ if full_name else context.__name__
    return _type_name(type(context), full_name)


def resolve_scope(scope: Any, full_name: bool = False) -> str:
    """Get the text shown for a scope value."""
    if scope is NO_SCOPE or scope is None:
        return ""
    if isinstance(scope, str):
        return scope.strip()
    if isinstance(scope, uuid.UUID):
        return str(scope)
    if isinstance(scope, LoggingScope):
        return resolve_scope(scope.value, full_name)
    if inspect.isroutine(scope) or inspect.ismodule(scope):
        return scope.__name__
    if inspect.isclass(scope):
        return _type_name(scope, full_name)
    return _type_name(type(scope), full_name)


class LoggingScope:
    """Holds a scope value until closed; usable as a context manager."""

    def __init__(self, value: Any = None, on_close: Optional[Callable[['LoggingScope'], None]] = None):
        self.value = value
        self.is_closed = False
        self._on_close = on_close

    def close(self) -> None:
        if self.is_closed:
            return
        # The value is released but never closed; it belongs to the caller.
        try:
            if self._on_close is not None:
                self._on_close(self)
        finally:
            self._on_close = None
            self.value = None
            self.is_closed = True

    def __enter__(self) -> 'LoggingScope':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"LoggingScope(type={type(self.value).__name__}, value={resolve_scope(self.value)!r})"
