# pivot_levels/tests/conftest.py
"""
Shared fixtures: ten daily bars starting 2024-01-01 and the matching hourly series.
Daily bar i has H=110+i, L=100+i, C=105+i, so its pivot point is 105+i.
"""

import os
from datetime import datetime, timezone

import pandas as pd
import pytest

# Qt must be headless before pyqtgraph is imported anywhere
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from pivot_levels.models import Bar
from pivot_levels.series import bars_to_frame

START = pd.Timestamp('2024-01-01', tz='UTC')


def make_daily(days: int = 10, start: pd.Timestamp = START) -> pd.DataFrame:
    bars = []
    for i in range(days):
        bars.append(Bar(
            open_time=start + pd.Timedelta(days=i),
            open=102.0 + i,
            high=110.0 + i,
            low=100.0 + i,
            close=105.0 + i,
        ))
    return bars_to_frame(bars)


def make_intraday(periods: int, start: pd.Timestamp = START, freq: str = '1h') -> pd.DataFrame:
    index = pd.date_range(start, periods=periods, freq=freq)
    opens = [100.0 + k * 0.1 for k in range(periods)]
    df = pd.DataFrame({
        'open': opens,
        'high': [o + 0.5 for o in opens],
        'low': [o - 0.5 for o in opens],
        'close': [o + 0.2 for o in opens],
    }, index=index)
    df.index.name = 'datetime'
    return df


@pytest.fixture
def daily_bars():
    return make_daily(10)


@pytest.fixture
def intraday_bars():
    # Hourly bars covering the ten daily bars exactly
    return make_intraday(24 * 10)


@pytest.fixture
def fixed_clock():
    now = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
    return lambda: now
