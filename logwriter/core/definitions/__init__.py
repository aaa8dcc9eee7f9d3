"""Logging definitions"""

from .log_level import LogLevel, LogTime

__all__ = ['LogLevel', 'LogTime']
