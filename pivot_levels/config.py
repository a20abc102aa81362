# pivot_levels/config.py - Configuration and constants for the pivot levels module
"""
Configuration module for the pivot points indicator.
Handles indicator settings, environment variables and logging setup.
"""

import os
import logging
from dataclasses import dataclass, asdict, fields
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv

from .colors import (
    DEFAULT_MIDNIGHT_COLOR,
    DEFAULT_PIVOT_COLOR,
    DEFAULT_RESISTANCE_COLOR,
    DEFAULT_SUPPORT_COLOR,
)
from .exceptions import PivotConfigurationError
from .models import LineStyle

# Load environment variables from the project root's .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

# Parameter bounds exposed by the host settings panel
MIN_DAYS_TO_SHOW = 1
MIN_THICKNESS = 1
MAX_THICKNESS = 5
MIN_FONT_SIZE = 6
MAX_FONT_SIZE = 14

# Parent of every module logger in the package
PACKAGE_LOGGER = 'pivot_levels'

INT_FIELDS = (
    'days_to_show',
    'midnight_thickness',
    'pivot_thickness',
    'resistance_thickness',
    'support_thickness',
    'label_font_size',
)
BOOL_FIELDS = (
    'extend_lines',
    'show_ny_midnight',
    'show_pivot_point',
    'show_support_resistance',
)


def _parse_bool(value: str) -> bool:
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class IndicatorSettings:
    """User-configurable indicator options with the host's defaults"""
    days_to_show: int = 3
    extend_lines: bool = False
    show_ny_midnight: bool = True
    show_pivot_point: bool = True
    show_support_resistance: bool = True

    midnight_color: str = DEFAULT_MIDNIGHT_COLOR
    midnight_thickness: int = 2
    midnight_style: LineStyle = LineStyle.DOTS_RARE

    pivot_color: str = DEFAULT_PIVOT_COLOR
    pivot_thickness: int = 1
    pivot_style: LineStyle = LineStyle.DOTS_RARE

    resistance_color: str = DEFAULT_RESISTANCE_COLOR
    resistance_thickness: int = 1
    resistance_style: LineStyle = LineStyle.DOTS_RARE

    support_color: str = DEFAULT_SUPPORT_COLOR
    support_thickness: int = 1
    support_style: LineStyle = LineStyle.DOTS_RARE

    label_font_size: int = 9
    timezone_id: str = 'Eastern Standard Time'
    object_prefix: str = 'PivotInd_'

    def __post_init__(self):
        # Host may hand numbers and flags over as strings
        for name in INT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                try:
                    setattr(self, name, int(value))
                except (ValueError, TypeError):
                    raise PivotConfigurationError(
                        f"{name} must be an integer", field=name, value=value
                    )

        for name in BOOL_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                setattr(self, name, _parse_bool(value))

        # Host may hand styles over as plain ints
        for name in ('midnight_style', 'pivot_style', 'resistance_style', 'support_style'):
            value = getattr(self, name)
            if not isinstance(value, LineStyle):
                try:
                    setattr(self, name, LineStyle(int(value)))
                except (ValueError, TypeError):
                    raise PivotConfigurationError(
                        f"Invalid line style for {name}", field=name, value=value
                    )

    def validate(self) -> 'IndicatorSettings':
        """
        [FUNCTION SUMMARY]
        Purpose: Check every option against the host's parameter bounds
        Returns: self, for chaining
        Raises: PivotConfigurationError naming the first offending field
        """
        if self.days_to_show < MIN_DAYS_TO_SHOW:
            raise PivotConfigurationError(
                f"days_to_show must be at least {MIN_DAYS_TO_SHOW}",
                field='days_to_show',
                value=self.days_to_show
            )

        for name in ('midnight_thickness', 'pivot_thickness',
                     'resistance_thickness', 'support_thickness'):
            value = getattr(self, name)
            if not MIN_THICKNESS <= value <= MAX_THICKNESS:
                raise PivotConfigurationError(
                    f"{name} must be between {MIN_THICKNESS} and {MAX_THICKNESS}",
                    field=name,
                    value=value
                )

        if not MIN_FONT_SIZE <= self.label_font_size <= MAX_FONT_SIZE:
            raise PivotConfigurationError(
                f"label_font_size must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}",
                field='label_font_size',
                value=self.label_font_size
            )

        if not self.object_prefix:
            raise PivotConfigurationError("object_prefix must not be empty", field='object_prefix')

        return self

    @property
    def extends_lines(self) -> bool:
        """Extend-lines only applies when a single day is shown."""
        return self.days_to_show == 1 and self.extend_lines

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for name, value in data.items():
            if isinstance(value, LineStyle):
                data[name] = value.name
        return data


# Environment variable -> (settings field, parser)
ENV_SETTINGS = {
    'PIVOT_DAYS_TO_SHOW': ('days_to_show', int),
    'PIVOT_EXTEND_LINES': ('extend_lines', _parse_bool),
    'PIVOT_SHOW_NY_MIDNIGHT': ('show_ny_midnight', _parse_bool),
    'PIVOT_SHOW_PIVOT_POINT': ('show_pivot_point', _parse_bool),
    'PIVOT_SHOW_SUPPORT_RESISTANCE': ('show_support_resistance', _parse_bool),
    'PIVOT_LABEL_FONT_SIZE': ('label_font_size', int),
    'PIVOT_TIMEZONE': ('timezone_id', str),
}


class PivotLevelsConfig:
    """
    [CLASS SUMMARY]
    Purpose: Centralized configuration for the pivot points indicator
    Responsibilities:
        - Build indicator settings from defaults, environment and overrides
        - Configure logging for the module
    Usage:
        config = PivotLevelsConfig({'days_to_show': 1, 'extend_lines': True})
        settings = config.settings
    """

    def __init__(self, config_override: Optional[Dict[str, Any]] = None):
        self.config_override = config_override or {}

        self._load_settings()
        self._setup_logging()

    def _load_settings(self):
        """
        [FUNCTION SUMMARY]
        Purpose: Merge defaults, PIVOT_* environment variables and overrides
        Sets: settings
        Raises: PivotConfigurationError for unparseable or out-of-range values
        """
        values: Dict[str, Any] = {}

        for env_name, (field_name, parser) in ENV_SETTINGS.items():
            raw = os.getenv(env_name)
            if raw is None or raw == '':
                continue
            try:
                values[field_name] = parser(raw)
            except ValueError:
                raise PivotConfigurationError(
                    f"Invalid value for {env_name}", field=field_name, value=raw
                )

        known_fields = {f.name for f in fields(IndicatorSettings)}
        for key, value in self.config_override.items():
            if key in known_fields:
                values[key] = value

        self.settings = IndicatorSettings(**values).validate()

    def _setup_logging(self):
        """
        [FUNCTION SUMMARY]
        Purpose: Configure logging for the pivot_levels module
        Sets: logger_config, log_file
        Note: File logging is only enabled when a log file is configured
        """
        log_level = self.config_override.get(
            'log_level',
            os.getenv('PIVOT_LOG_LEVEL', 'INFO')
        )

        self.logger_config = {
            'level': getattr(logging, str(log_level).upper(), logging.INFO),
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        }

        log_file = self.config_override.get('log_file', os.getenv('PIVOT_LOG_FILE'))
        self.log_file = Path(log_file) if log_file else None
        self.max_log_size = 10 * 1024 * 1024  # 10 MB
        self.log_backup_count = 5

    def get_logger(self, name: str) -> logging.Logger:
        """
        [FUNCTION SUMMARY]
        Purpose: Create a configured logger for a module component
        Parameters:
            - name (str): Logger name (usually __name__ of the calling module)
        Returns: logging.Logger - Configured logger instance
        Example: logger = config.get_logger(__name__)
        """
        logger = logging.getLogger(name)
        logger.setLevel(self.logger_config['level'])

        # Remove existing handlers to avoid duplicates
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        formatter = logging.Formatter(
            self.logger_config['format'],
            datefmt=self.logger_config['datefmt']
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.logger_config['level'])
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=self.max_log_size,
                backupCount=self.log_backup_count
            )
            file_handler.setLevel(self.logger_config['level'])
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        return logger

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as a dictionary for debugging/inspection"""
        return {
            'settings': self.settings.to_dict(),
            'logging': {
                'level': logging.getLevelName(self.logger_config['level']),
                'log_file': str(self.log_file) if self.log_file else None
            }
        }


# Convenience function for getting config instance
_config_instance = None


def get_config(reset: bool = False, **overrides) -> PivotLevelsConfig:
    """
    [FUNCTION SUMMARY]
    Purpose: Get or create singleton configuration instance
    Parameters:
        - reset (bool): Force create new instance
        - **overrides: Configuration overrides
    Returns: PivotLevelsConfig - Configuration instance
    Example: config = get_config(days_to_show=1)
    """
    global _config_instance

    if _config_instance is None or reset or overrides:
        _config_instance = PivotLevelsConfig(overrides)
        _config_instance.get_logger(PACKAGE_LOGGER)

    return _config_instance
