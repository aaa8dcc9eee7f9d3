from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any

from .core.definitions.log_level import LogLevel, LogTime


DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
DEFAULT_LOGGER_NAME = "logwriter"


class LoggerSettingsModel(BaseModel):
    """Logger section of a settings file"""
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default=LogLevel.MESSAGE)
    full_name: bool = Field(default=False)
    log_time: LogTime = Field(default=LogTime.LOCAL)
    time_format: str = Field(default=DEFAULT_TIME_FORMAT, min_length=1)
    name: str = Field(default=DEFAULT_LOGGER_NAME, min_length=1)

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return LogLevel.parse(value)
        return value

    @field_validator("log_time", mode="before")
    @classmethod
    def parse_log_time(cls, value: Any) -> Any:
        if isinstance(value, str):
            return LogTime.parse(value)
        return value
