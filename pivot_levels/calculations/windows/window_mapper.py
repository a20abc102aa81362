# pivot_levels/calculations/windows/window_mapper.py
"""
Module: Day Window Mapper
Purpose: Map a day offset onto the daily series (seed/display days) and the intraday
         series (line time range and label anchor)
Dependencies: pandas, numpy
Note: Bounds violations return None; insufficient history is an expected case
"""

import logging
from datetime import timedelta
from typing import Optional

import numpy as np
import pandas as pd

from pivot_levels.models import DisplayWindow

logger = logging.getLogger(__name__)

# Labels sit this many bars before the right edge of their window
LABEL_BARS_FROM_END = 5
LABEL_FALLBACK_OFFSET = timedelta(minutes=60)
DAY = timedelta(days=1)


def to_utc(value) -> pd.Timestamp:
    """Coerce a datetime-like value into a tz-aware UTC Timestamp."""
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return ts.tz_localize('UTC')
    return ts.tz_convert('UTC')


def label_anchor(bars: pd.DataFrame,
                 start_time,
                 end_time,
                 bars_from_end: int = LABEL_BARS_FROM_END) -> pd.Timestamp:
    """
    Find where a level's text label should be anchored.

    Takes the last intraday bar opening inside [start_time, end_time) and steps
    ``bars_from_end`` bars back from it. When no bar falls inside the window, or
    there are not enough bars before it, the label goes 60 minutes before
    ``end_time``.
    """
    start_time = to_utc(start_time)
    end_time = to_utc(end_time)

    times = bars.index
    if len(times) > 0:
        inside = np.flatnonzero((times >= start_time) & (times < end_time))
        if len(inside) > 0:
            last_index = int(inside[-1])
            if last_index >= bars_from_end:
                return times[last_index - bars_from_end]

    return end_time - LABEL_FALLBACK_OFFSET


def map_window(days_back: int,
               daily_bars: pd.DataFrame,
               bars: pd.DataFrame,
               days_to_show: int = 1,
               extend_lines: bool = False,
               bars_from_end: int = LABEL_BARS_FROM_END) -> Optional[DisplayWindow]:
    """
    Locate the display window for one day offset.

    Args:
        days_back: 1-based offset, 1 = most recently completed day
        daily_bars: Normalized daily series
        bars: Normalized intraday (chart) series
        days_to_show: Number of days the indicator draws
        extend_lines: Stretch the line back to the first chart bar (single-day mode only)
        bars_from_end: Label offset from the window's last bar

    Returns:
        DisplayWindow, or None when the daily series is too short
    """
    daily_count = len(daily_bars)
    calc_index = daily_count - 1 - days_back
    display_index = calc_index + 1

    if calc_index < 0 or display_index >= daily_count:
        logger.debug(f"Insufficient daily history for days_back={days_back} ({daily_count} bars)")
        return None

    start_time = daily_bars.index[display_index]
    if display_index + 1 < daily_count:
        end_time = daily_bars.index[display_index + 1]
    else:
        end_time = start_time + DAY

    # Label placement always uses the unextended window
    label_time = label_anchor(bars, start_time, end_time, bars_from_end)

    if days_to_show == 1 and extend_lines and len(bars) > 0:
        start_time = bars.index[0]

    return DisplayWindow(
        start_time=start_time,
        end_time=end_time,
        label_time=label_time,
        days_back=days_back,
        calc_time=daily_bars.index[calc_index],
    )


class WindowMapper:
    """
    Bind the display options once and map day offsets to windows.

    >>> mapper = WindowMapper(days_to_show=3)
    >>> window = mapper.map(1, daily_bars, bars)
    """

    def __init__(self,
                 days_to_show: int = 1,
                 extend_lines: bool = False,
                 bars_from_end: int = LABEL_BARS_FROM_END):
        self.days_to_show = days_to_show
        self.extend_lines = extend_lines
        self.bars_from_end = bars_from_end

    @property
    def extends(self) -> bool:
        """Whether lines are stretched back to the first chart bar."""
        return self.days_to_show == 1 and self.extend_lines

    def calc_index(self, days_back: int, daily_bars: pd.DataFrame) -> int:
        return len(daily_bars) - 1 - days_back

    def map(self, days_back: int, daily_bars: pd.DataFrame,
            bars: pd.DataFrame) -> Optional[DisplayWindow]:
        return map_window(
            days_back,
            daily_bars,
            bars,
            days_to_show=self.days_to_show,
            extend_lines=self.extend_lines,
            bars_from_end=self.bars_from_end,
        )

    def anchor(self, bars: pd.DataFrame, start_time, end_time) -> pd.Timestamp:
        return label_anchor(bars, start_time, end_time, self.bars_from_end)
