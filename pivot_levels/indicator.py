# pivot_levels/indicator.py
"""
Module: Pivot Points Indicator
Purpose: Draw daily classic pivots (PP, R1-R3, S1-S3) and the New York midnight
         open line on a host chart
Note: Every recalculation clears all prefixed objects and redraws from scratch.
      Bar times are UTC; the host clock is read once per cycle.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

import pandas as pd

from .calculations.midnight import MidnightLocator
from .calculations.pivots import PivotCalculator
from .calculations.windows import WindowMapper, to_utc
from .chart.registry import ChartObjectRegistry
from .chart.renderer import ArtifactRenderer
from .colors import (
    parse_color,
    DEFAULT_MIDNIGHT_COLOR,
    DEFAULT_PIVOT_COLOR,
    DEFAULT_RESISTANCE_COLOR,
    DEFAULT_SUPPORT_COLOR,
)
from .config import IndicatorSettings, get_config
from .models import DisplayWindow, PivotSet
from .series import normalize_bars

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PivotPointsIndicator:
    """
    Overlay indicator driven by the chart host.

    The host calls ``calculate(index, bars, daily_bars)`` for every bar update;
    only the final bar triggers a redraw.

    Args:
        registry: Chart object registry to draw into
        settings: Indicator options (defaults come from the module config)
        clock: Returns the host's current time
    """

    def __init__(self,
                 registry: ChartObjectRegistry,
                 settings: Optional[IndicatorSettings] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.registry = registry
        self.config = get_config()
        self.settings = settings if settings is not None else self.config.settings
        self.clock = clock or _utc_now
        self.initialized = False

    def initialize(self):
        """Validate options and resolve colors and timezone once."""
        settings = self.settings.validate()

        self.resistance_color = parse_color(settings.resistance_color, DEFAULT_RESISTANCE_COLOR)
        self.support_color = parse_color(settings.support_color, DEFAULT_SUPPORT_COLOR)
        self.pivot_color = parse_color(settings.pivot_color, DEFAULT_PIVOT_COLOR)
        self.midnight_color = parse_color(settings.midnight_color, DEFAULT_MIDNIGHT_COLOR)

        # Raises PivotTimezoneError for unknown zones
        self.midnight_locator = MidnightLocator(settings.timezone_id)

        self.calculator = PivotCalculator()
        self.window_mapper = WindowMapper(
            days_to_show=settings.days_to_show,
            extend_lines=settings.extend_lines,
        )
        self.renderer = ArtifactRenderer(
            self.registry,
            prefix=settings.object_prefix,
            font_size=settings.label_font_size,
        )

        self.initialized = True
        logger.info(
            f"Pivot indicator initialized: {settings.days_to_show} day(s), "
            f"timezone {settings.timezone_id}"
        )

    def calculate(self, index: int, bars: pd.DataFrame,
                  daily_bars: pd.DataFrame) -> Optional[List[str]]:
        """Per-bar host callback; redraws only on the final bar."""
        if index != len(bars) - 1:
            return None
        return self.recalculate(bars, daily_bars)

    def recalculate(self, bars: pd.DataFrame, daily_bars: pd.DataFrame) -> List[str]:
        """
        Clear every object this indicator owns and redraw all levels.

        Args:
            bars: Chart (intraday) series
            daily_bars: Daily series of the same symbol

        Returns:
            Names of the objects drawn in this cycle
        """
        if not self.initialized:
            self.initialize()

        bars = normalize_bars(bars, series='bars')
        daily_bars = normalize_bars(daily_bars, series='daily')

        removed = self.renderer.clear()
        drawn: List[str] = []

        for days_back in range(1, self.settings.days_to_show + 1):
            if len(daily_bars) - days_back < 0:
                break
            drawn.extend(self.draw_pivots_for_day(days_back, bars, daily_bars))

        if self.settings.show_ny_midnight:
            drawn.extend(self.draw_midnight_line(bars))

        logger.debug(f"Redraw complete: removed {removed}, drew {len(drawn)} objects")
        return drawn

    def pivots_for_day(self, days_back: int,
                       daily_bars: pd.DataFrame) -> Optional[PivotSet]:
        """Pivots seeded by the completed day ``days_back`` days ago."""
        calc_index = self.window_mapper.calc_index(days_back, daily_bars)
        return self.calculator.calculate_for_day(daily_bars, calc_index)

    def draw_pivots_for_day(self, days_back: int, bars: pd.DataFrame,
                            daily_bars: pd.DataFrame) -> List[str]:
        window: Optional[DisplayWindow] = self.window_mapper.map(days_back, daily_bars, bars)
        if window is None:
            return []

        pivots = self.pivots_for_day(days_back, daily_bars)
        if pivots is None:
            return []

        settings = self.settings
        drawn: List[str] = []

        if settings.show_pivot_point:
            drawn.extend(self.renderer.draw_window_level(
                'PP', window, pivots.pp,
                self.pivot_color, settings.pivot_thickness, settings.pivot_style
            ))

        if settings.show_support_resistance:
            for name, price in pivots.resistance_levels():
                drawn.extend(self.renderer.draw_window_level(
                    name, window, price,
                    self.resistance_color, settings.resistance_thickness, settings.resistance_style
                ))
            for name, price in pivots.support_levels():
                drawn.extend(self.renderer.draw_window_level(
                    name, window, price,
                    self.support_color, settings.support_thickness, settings.support_style
                ))

        return drawn

    def draw_midnight_line(self, bars: pd.DataFrame) -> List[str]:
        """Draw the open price of the bar active at today's local midnight."""
        today = to_utc(self.clock()).normalize()

        level = self.midnight_locator.locate(bars, today)
        if level is None:
            logger.debug(f"No bar at or before midnight for {today.date()}")
            return []

        if self.window_mapper.extends:
            start_time = bars.index[0]
        else:
            start_time = level.midnight_time

        end_time = today + timedelta(days=1)
        label_time = self.window_mapper.anchor(bars, today, end_time)

        settings = self.settings
        return self.renderer.draw_midnight(
            start_time,
            end_time,
            label_time,
            level.price,
            self.midnight_color,
            settings.midnight_thickness,
            settings.midnight_style,
        )
