# pivot_levels/calculations/pivots/classic_pivots.py
"""
Module: Classic Pivot Points Calculator
Purpose: Calculate floor-trader pivot levels (PP, R1-R3, S1-S3) from a prior day's H/L/C
Dependencies: pandas
Note: Values keep full float precision, nothing is rounded before drawing
"""

import logging
from typing import Optional

import pandas as pd

from pivot_levels.models import PivotSet

# Set up logging
logger = logging.getLogger(__name__)


def compute_pivots(high: float, low: float, close: float) -> Optional[PivotSet]:
    """
    Calculate classic pivot levels.

    Returns None when any input is non-positive (uninitialized or zero bars at
    the start of a series); the caller skips that day.
    """
    for value in (high, low, close):
        if pd.isna(value) or value <= 0:
            return None

    pp = (high + low + close) / 3

    return PivotSet(
        pp=pp,
        r1=2 * pp - low,
        r2=pp + high - low,
        r3=high + 2 * (pp - low),
        s1=2 * pp - high,
        s2=pp - high + low,
        s3=low - 2 * (high - pp),
    )


class PivotCalculator:
    """
    Calculate classic pivot levels for rows of a daily bar series.
    Pivots seeded by day D are displayed across day D+1.
    """

    def calculate(self, high: float, low: float, close: float) -> Optional[PivotSet]:
        return compute_pivots(high, low, close)

    def calculate_for_day(self, daily_bars: pd.DataFrame, index: int) -> Optional[PivotSet]:
        """
        Calculate pivots seeded by one row of the daily series.

        Args:
            daily_bars: Normalized daily series
            index: Positional row index of the completed seed day

        Returns:
            PivotSet, or None when the row is out of range or holds non-positive prices
        """
        if index < 0 or index >= len(daily_bars):
            return None

        row = daily_bars.iloc[index]
        high = float(row['high'])
        low = float(row['low'])
        close = float(row['close'])

        pivots = compute_pivots(high, low, close)
        if pivots is None:
            logger.debug(
                f"Skipping pivots for {daily_bars.index[index]}: "
                f"non-positive prices H={high} L={low} C={close}"
            )
        return pivots
