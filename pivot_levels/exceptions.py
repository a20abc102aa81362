# pivot_levels/exceptions.py - Custom exceptions for the pivot levels module
"""
Custom exception classes for the pivot levels module.
Insufficient history and bad price data are never raised; they are skipped.
Only configuration problems and malformed input frames surface as errors.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class PivotLevelsError(Exception):
    """
    [CLASS SUMMARY]
    Purpose: Base exception class for all pivot levels errors
    Usage: Base class for inheritance, rarely raised directly
    Attributes:
        - message: Error description
        - details: Additional context dictionary
        - timestamp: When the error occurred (UTC)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        """Format error message with details if available"""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class PivotConfigurationError(PivotLevelsError):
    """
    [CLASS SUMMARY]
    Purpose: Raised when indicator settings are out of range or unusable
    Common scenarios:
        - days_to_show below 1
        - line thickness outside 1-5
        - label font size outside 6-14
        - empty object prefix
    """

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        details = kwargs
        if field:
            details['field'] = field
        if value is not None:
            details['value'] = value

        super().__init__(message, details)
        self.field = field
        self.value = value


class PivotTimezoneError(PivotConfigurationError):
    """Raised when a configured timezone identifier cannot be resolved"""

    def __init__(self, timezone_id: str, **kwargs):
        super().__init__(
            f"Unknown timezone: {timezone_id}",
            field='timezone_id',
            value=timezone_id,
            **kwargs
        )
        self.timezone_id = timezone_id


class PivotDataError(PivotLevelsError):
    """
    [CLASS SUMMARY]
    Purpose: Raised when a bar series cannot be interpreted
    Common scenarios:
        - Missing open/high/low/close columns
        - Index that cannot be converted to timestamps
    """

    def __init__(self, message: str, series: Optional[str] = None, **kwargs):
        details = kwargs
        if series:
            details['series'] = series

        super().__init__(message, details)
        self.series = series
