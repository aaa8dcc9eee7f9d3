from typing import Dict, Any, Optional


class LogWriterException(Exception):
    """Base exception for all log writer errors"""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization"""
        return {
            'error_type': self.__class__.__name__,
            'message': str(self),
            'error_code': self.error_code,
            'details': self.details
        }


class InvalidLogLevelError(LogWriterException, ValueError):
    """Unknown or unsupported logging level"""

    def __init__(self, level: Any, reason: Optional[str] = None):
        message = f"Found unsupported logging level '{level}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            error_code="INVALID_LOG_LEVEL",
            details={"level": str(level)}
        )


class InvalidDisplayTextError(LogWriterException, ValueError):
    """Display text for a logging level is blank"""

    def __init__(self, level: Any, text: Optional[str]):
        super().__init__(
            f"Display text for logging level '{level}' cannot be empty",
            error_code="INVALID_DISPLAY_TEXT",
            details={"level": str(level), "text": text}
        )


class ConfigurationError(LogWriterException):
    """Logger settings could not be loaded"""

    def __init__(self, message: str, source: Optional[str] = None, cause: Optional[str] = None):
        details = {}
        if source:
            details["source"] = source
        if cause:
            details["cause"] = cause
        super().__init__(
            message,
            error_code="INVALID_CONFIGURATION",
            details=details
        )
