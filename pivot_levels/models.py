# pivot_levels/models.py
"""
Module: Pivot Level Models
Purpose: Value objects shared by the calculators, the renderer and the chart registries
Note: All timestamps are tz-aware UTC pandas Timestamps
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

import pandas as pd

from .colors import Color


class LineStyle(IntEnum):
    """Dash patterns offered by the chart host (values match the host enum)"""
    SOLID = 0
    DOTS = 1
    DOTS_RARE = 2
    DOTS_VERY_RARE = 3
    LINES_DOTS = 4
    LINES = 5


@dataclass(frozen=True)
class Bar:
    """Single OHLC bar"""
    open_time: pd.Timestamp
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0


@dataclass(frozen=True)
class PivotSet:
    """Classic floor pivots derived from one prior-day high/low/close"""
    pp: float
    r1: float
    r2: float
    r3: float
    s1: float
    s2: float
    s3: float

    def levels(self) -> List[Tuple[str, float]]:
        """Levels in drawing order: PP, R1-R3, S1-S3."""
        return [
            ('PP', self.pp),
            ('R1', self.r1),
            ('R2', self.r2),
            ('R3', self.r3),
            ('S1', self.s1),
            ('S2', self.s2),
            ('S3', self.s3),
        ]

    def resistance_levels(self) -> List[Tuple[str, float]]:
        return [('R1', self.r1), ('R2', self.r2), ('R3', self.r3)]

    def support_levels(self) -> List[Tuple[str, float]]:
        return [('S1', self.s1), ('S2', self.s2), ('S3', self.s3)]


@dataclass(frozen=True)
class DisplayWindow:
    """Where a day's levels are drawn and where their labels sit"""
    start_time: pd.Timestamp
    end_time: pd.Timestamp
    label_time: pd.Timestamp
    days_back: int = 0
    calc_time: Optional[pd.Timestamp] = None


@dataclass(frozen=True)
class MidnightLevel:
    """Open price of the bar active at local midnight"""
    midnight_time: pd.Timestamp
    bar_time: pd.Timestamp
    price: float


@dataclass(frozen=True)
class LineArtifact:
    """Non-interactive horizontal trend line"""
    start_time: pd.Timestamp
    end_time: pd.Timestamp
    price: float
    color: Color
    thickness: int
    style: LineStyle
    interactive: bool = False


@dataclass(frozen=True)
class TextArtifact:
    """Non-interactive text label anchored at a (time, price) point"""
    text: str
    time: pd.Timestamp
    price: float
    color: Color
    font_size: int
    horizontal_alignment: str = 'left'
    vertical_alignment: str = 'center'
    interactive: bool = False
