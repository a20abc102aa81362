# pivot_levels/__init__.py - Public API for the pivot levels module
"""
Pivot Levels Overlay Module

Computes classic daily pivot points (PP, R1-R3, S1-S3) and the New York midnight
reference price, and draws them as named lines and labels on a chart.

Basic Usage:
    from pivot_levels import compute_pivots

    pivots = compute_pivots(high=110.0, low=100.0, close=105.0)
    pivots.pp   # 105.0

Chart Usage:
    from pivot_levels import PivotPointsIndicator, InMemoryChartRegistry, IndicatorSettings

    registry = InMemoryChartRegistry()
    indicator = PivotPointsIndicator(registry, IndicatorSettings(days_to_show=1))
    indicator.calculate(len(bars) - 1, bars, daily_bars)
"""

# Version info
__version__ = '1.0.0'

from .config import get_config, PivotLevelsConfig, IndicatorSettings
from .exceptions import (
    PivotLevelsError,
    PivotConfigurationError,
    PivotTimezoneError,
    PivotDataError,
)
from .models import (
    Bar,
    PivotSet,
    DisplayWindow,
    MidnightLevel,
    LineStyle,
    LineArtifact,
    TextArtifact,
)
from .colors import Color, parse_color
from .series import bars_to_frame, normalize_bars

from .calculations.pivots import PivotCalculator, compute_pivots
from .calculations.windows import WindowMapper, map_window, label_anchor
from .calculations.midnight import MidnightLocator, locate_midnight, local_midnight_utc
from .chart import ArtifactRenderer, ChartObjectRegistry, InMemoryChartRegistry
from .indicator import PivotPointsIndicator

__all__ = [
    # Configuration
    'get_config',
    'PivotLevelsConfig',
    'IndicatorSettings',

    # Exceptions
    'PivotLevelsError',
    'PivotConfigurationError',
    'PivotTimezoneError',
    'PivotDataError',

    # Models
    'Bar',
    'PivotSet',
    'DisplayWindow',
    'MidnightLevel',
    'LineStyle',
    'LineArtifact',
    'TextArtifact',
    'Color',
    'parse_color',
    'bars_to_frame',
    'normalize_bars',

    # Calculations
    'PivotCalculator',
    'compute_pivots',
    'WindowMapper',
    'map_window',
    'label_anchor',
    'MidnightLocator',
    'locate_midnight',
    'local_midnight_utc',

    # Chart
    'ArtifactRenderer',
    'ChartObjectRegistry',
    'InMemoryChartRegistry',
    'PivotPointsIndicator',
]
