"""
LogWriter Configuration Module

Loads logger settings from an optional YAML or JSON settings file and from
environment variables. Environment values win over file values.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .core.definitions.log_level import LogLevel, LogTime
from .core.exceptions.logging_exceptions import ConfigurationError, InvalidLogLevelError
from .models import DEFAULT_LOGGER_NAME, DEFAULT_TIME_FORMAT, LoggerSettingsModel

logger = logging.getLogger(__name__)

SETTINGS_SECTION = "logwriter"


@dataclass
class LoggerSettings:
    """Settings shared by all loggers a factory creates"""
    level: LogLevel = field(default_factory=LogLevel.default)
    full_name: bool = False
    log_time: LogTime = field(default_factory=LogTime.default)
    time_format: str = DEFAULT_TIME_FORMAT
    name: str = DEFAULT_LOGGER_NAME

    def copy(self) -> 'LoggerSettings':
        return LoggerSettings(
            level=self.level,
            full_name=self.full_name,
            log_time=self.log_time,
            time_format=self.time_format,
            name=self.name
        )


class LogWriterConfig:
    """
    LogWriter configuration loaded from a settings file and environment variables.

    Variables are read with the ``LOGWRITER_`` prefix first; the level also
    falls back to the common ``LOG_LEVEL`` variable.
    """

    ENV_PREFIX = "LOGWRITER_"

    def __init__(self, settings_file: Optional[str] = None):
        self.logger = LoggerSettings()
        self.settings_file = settings_file or self._get_string("SETTINGS_FILE", "") or None

        if self.settings_file:
            self._load_settings_file(Path(self.settings_file))

        self._load_environment_variables()

    def _load_settings_file(self, path: Path):
        """Apply the ``logwriter`` section of a YAML or JSON file"""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read settings file: {path}", source=str(path), cause=str(e)) from e

        try:
            if path.suffix.lower() == ".json":
                content = json.loads(text) if text.strip() else {}
            else:
                content = yaml.safe_load(text) or {}
        except (ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse settings file: {path}", source=str(path), cause=str(e)) from e

        if not isinstance(content, dict):
            raise ConfigurationError(f"Settings file must contain a mapping: {path}", source=str(path))

        section = content.get(SETTINGS_SECTION, content)
        if not isinstance(section, dict):
            raise ConfigurationError(f"Section '{SETTINGS_SECTION}' must be a mapping: {path}", source=str(path))

        self.apply(section, source=str(path))

    def apply(self, values: Dict[str, Any], source: str = "<mapping>"):
        """Validate and apply a mapping of logger settings"""
        try:
            model = LoggerSettingsModel.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid logger settings in {source}", source=source, cause=str(e)) from e

        for name in model.model_fields_set:
            setattr(self.logger, name, getattr(model, name))

    def _load_environment_variables(self):
        """Load and process all environment variables into the logger settings"""
        level = self._get_string("LEVEL", "") or os.getenv("LOG_LEVEL", "")
        if level:
            try:
                self.logger.level = LogLevel.parse(level)
            except InvalidLogLevelError:
                logger.warning("Invalid log level: %s, using %s", level, self.logger.level.name)

        self.logger.full_name = self._get_bool("FULL_NAME", self.logger.full_name)

        log_time = self._get_string("LOG_TIME", "")
        if log_time:
            try:
                self.logger.log_time = LogTime.parse(log_time)
            except ValueError:
                logger.warning("Invalid log time: %s, using %s", log_time, self.logger.log_time.value)

        self.logger.time_format = self._get_string("TIME_FORMAT", self.logger.time_format)
        self.logger.name = self._get_string("NAME", self.logger.name)

    def _get_string(self, key: str, default: str) -> str:
        """Get string value from environment"""
        value = os.getenv(f"{self.ENV_PREFIX}{key}")
        if value is not None:
            return value
        return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean value from environment with validation"""
        value = self._get_string(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'level': self.logger.level.name,
            'full_name': self.logger.full_name,
            'log_time': self.logger.log_time.value,
            'time_format': self.logger.time_format,
            'name': self.logger.name,
            'settings_file': self.settings_file
        }
