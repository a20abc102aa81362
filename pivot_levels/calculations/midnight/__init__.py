# pivot_levels/calculations/midnight/__init__.py
"""Midnight reference price"""

from .midnight_locator import (
    MidnightLocator,
    locate_midnight,
    local_midnight_utc,
    resolve_timezone,
    DEFAULT_TIMEZONE_ID,
)

__all__ = [
    'MidnightLocator',
    'locate_midnight',
    'local_midnight_utc',
    'resolve_timezone',
    'DEFAULT_TIMEZONE_ID',
]
