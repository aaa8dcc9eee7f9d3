"""Logger factories"""

from .logger_factory import (
    LoggerFactory,
    LoggerFactoryBuilder,
    create_default_logger_factory,
    create_development_logger_factory,
    create_production_logger_factory
)

__all__ = [
    'LoggerFactory',
    'LoggerFactoryBuilder',
    'create_default_logger_factory',
    'create_development_logger_factory',
    'create_production_logger_factory'
]
