# pivot_levels/calculations/midnight/midnight_locator.py
"""
Module: Midnight Locator
Purpose: Find the price in effect at local midnight of a trading zone (default New York)
Dependencies: pandas, pytz
Note: Bar times are UTC. Midnight is converted with the zone's STANDARD offset, so
      daylight saving is deliberately ignored (00:00 EST = 05:00 UTC all year).
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

import pandas as pd
import pytz

from pivot_levels.exceptions import PivotTimezoneError
from pivot_levels.models import MidnightLevel

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE_ID = 'Eastern Standard Time'

# Windows zone ids used by desktop chart hosts -> IANA names
WINDOWS_TIMEZONES = {
    'Eastern Standard Time': 'America/New_York',
    'Central Standard Time': 'America/Chicago',
    'Mountain Standard Time': 'America/Denver',
    'Pacific Standard Time': 'America/Los_Angeles',
    'Atlantic Standard Time': 'America/Halifax',
    'GMT Standard Time': 'Europe/London',
    'Greenwich Standard Time': 'Atlantic/Reykjavik',
    'W. Europe Standard Time': 'Europe/Berlin',
    'Central European Standard Time': 'Europe/Warsaw',
    'Romance Standard Time': 'Europe/Paris',
    'E. Europe Standard Time': 'Europe/Chisinau',
    'Russian Standard Time': 'Europe/Moscow',
    'Arabian Standard Time': 'Asia/Dubai',
    'India Standard Time': 'Asia/Kolkata',
    'China Standard Time': 'Asia/Shanghai',
    'Singapore Standard Time': 'Asia/Singapore',
    'Tokyo Standard Time': 'Asia/Tokyo',
    'AUS Eastern Standard Time': 'Australia/Sydney',
    'New Zealand Standard Time': 'Pacific/Auckland',
    'UTC': 'UTC',
}


def resolve_timezone(timezone_id: str):
    """
    [FUNCTION SUMMARY]
    Purpose: Resolve an IANA or Windows timezone identifier
    Parameters:
        - timezone_id (str): e.g. 'Eastern Standard Time', 'America/New_York', 'US/Eastern'
    Returns: pytz timezone
    Raises: PivotTimezoneError if the identifier is unknown
    """
    if not timezone_id or not timezone_id.strip():
        raise PivotTimezoneError(str(timezone_id))

    name = timezone_id.strip()
    name = WINDOWS_TIMEZONES.get(name, name)

    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise PivotTimezoneError(timezone_id)


def standard_offset(timezone_id: str, date) -> timedelta:
    """UTC offset of the zone on ``date`` with any DST adjustment removed."""
    tz = resolve_timezone(timezone_id)
    naive = datetime(date.year, date.month, date.day)
    localized = tz.localize(naive, is_dst=False)
    return localized.utcoffset() - (localized.dst() or timedelta(0))


def local_midnight_utc(date, timezone_id: str = DEFAULT_TIMEZONE_ID) -> pd.Timestamp:
    """
    Convert local midnight of ``date`` in ``timezone_id`` to UTC.

    Uses the standard offset only: New York midnight is 05:00 UTC in both
    January and July.
    """
    naive = datetime(date.year, date.month, date.day)
    offset = standard_offset(timezone_id, date)
    return pd.Timestamp(naive - offset, tz='UTC')


def locate_midnight(bars: pd.DataFrame,
                    date,
                    timezone_id: str = DEFAULT_TIMEZONE_ID) -> Optional[MidnightLevel]:
    """
    Find the open price of the last bar opening at or before local midnight.

    Args:
        bars: Normalized intraday series
        date: Calendar date whose midnight is wanted
        timezone_id: Zone identifier (IANA or Windows)

    Returns:
        MidnightLevel, or None when the series starts after midnight
    """
    midnight = local_midnight_utc(date, timezone_id)

    if len(bars) == 0:
        return None

    position = int(bars.index.searchsorted(midnight, side='right')) - 1
    if position < 0:
        logger.debug(f"No bar at or before {midnight} (series starts {bars.index[0]})")
        return None

    return MidnightLevel(
        midnight_time=midnight,
        bar_time=bars.index[position],
        price=float(bars['open'].iloc[position]),
    )


class MidnightLocator:
    """Locate the midnight reference price for a fixed timezone"""

    def __init__(self, timezone_id: str = DEFAULT_TIMEZONE_ID):
        # Fail fast on unknown zones
        resolve_timezone(timezone_id)
        self.timezone_id = timezone_id

    def midnight(self, date) -> pd.Timestamp:
        return local_midnight_utc(date, self.timezone_id)

    def locate(self, bars: pd.DataFrame, date) -> Optional[MidnightLevel]:
        return locate_midnight(bars, date, self.timezone_id)
