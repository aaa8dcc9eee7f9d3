"""Core interfaces"""

from .logger_interface import ILogger, IContextLogger

__all__ = ['ILogger', 'IContextLogger']
