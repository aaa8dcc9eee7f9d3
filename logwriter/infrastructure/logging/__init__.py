"""Logger implementations"""

from .empty_logger import EmptyLogger, EmptyContextLogger
from .logging_scope import LoggingScope
from .structured_logger import (
    StructuredLogger,
    ContextLogger,
    StructuredFormatter,
    resolve_context,
    resolve_scope,
    resolve_message
)

__all__ = [
    'EmptyLogger',
    'EmptyContextLogger',
    'LoggingScope',
    'StructuredLogger',
    'ContextLogger',
    'StructuredFormatter',
    'resolve_context',
    'resolve_scope',
    'resolve_message'
]
