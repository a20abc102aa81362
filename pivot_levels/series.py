# pivot_levels/series.py - Bar series helpers
"""
Helpers for building and normalizing the bar series handed over by the chart host.
Every series is a DataFrame indexed by UTC open times, ascending.
"""

from typing import Iterable, Optional

import pandas as pd

from .exceptions import PivotDataError
from .models import Bar

OHLC_COLUMNS = ['open', 'high', 'low', 'close']


def bars_to_frame(bars: Iterable[Bar]) -> pd.DataFrame:
    """
    [FUNCTION SUMMARY]
    Purpose: Build a normalized bar series from Bar records
    Parameters:
        - bars: Iterable of Bar objects
    Returns: DataFrame - open/high/low/close/volume indexed by UTC open time
    Example: df = bars_to_frame([Bar(pd.Timestamp('2024-01-02', tz='UTC'), 1, 2, 0.5, 1.5)])
    """
    records = [
        {
            'datetime': bar.open_time,
            'open': bar.open,
            'high': bar.high,
            'low': bar.low,
            'close': bar.close,
            'volume': bar.volume,
        }
        for bar in bars
    ]

    if not records:
        return empty_frame()

    df = pd.DataFrame(records).set_index('datetime')
    return normalize_bars(df)


def empty_frame() -> pd.DataFrame:
    """Empty bar series with the expected columns and a UTC index."""
    return pd.DataFrame(
        columns=OHLC_COLUMNS + ['volume'],
        index=pd.DatetimeIndex([], tz='UTC', name='datetime'),
        dtype=float,
    )


def normalize_bars(df: Optional[pd.DataFrame], series: str = 'bars') -> pd.DataFrame:
    """
    [FUNCTION SUMMARY]
    Purpose: Coerce a host-provided frame into a UTC, time-ascending bar series
    Parameters:
        - df (DataFrame): Frame with a datetime index or 'timestamp' column
        - series (str): Name used in error context ('daily', 'bars')
    Returns: DataFrame - Normalized copy
    Raises: PivotDataError if the index is not datetime-like or columns are missing
    """
    if df is None:
        return empty_frame()

    df = df.copy()
    df.columns = [str(col).lower() for col in df.columns]

    if not isinstance(df.index, pd.DatetimeIndex):
        if 'timestamp' not in df.columns:
            raise PivotDataError(
                "Bar series needs a datetime index or a 'timestamp' column",
                series=series,
                index_type=type(df.index).__name__
            )
        df = df.set_index('timestamp')
        try:
            df.index = pd.to_datetime(df.index, utc=True)
        except (ValueError, TypeError) as e:
            raise PivotDataError(
                "Bar series index cannot be converted to timestamps",
                series=series,
                error=str(e)
            )

    missing_columns = [col for col in OHLC_COLUMNS if col not in df.columns]
    if missing_columns:
        raise PivotDataError(
            f"Missing required columns: {missing_columns}",
            series=series
        )

    # Host times are UTC
    if df.index.tz is None:
        df.index = df.index.tz_localize('UTC')
    else:
        df.index = df.index.tz_convert('UTC')

    for col in OHLC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors='coerce')

    df = df[~df.index.duplicated(keep='last')]
    df = df.sort_index()
    df.index.name = 'datetime'

    return df
