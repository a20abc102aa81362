# pivot_levels/chart/renderer.py
"""
Module: Artifact Renderer
Purpose: Turn computed levels into named line + label draw requests
Note: Every name starts with the indicator prefix so clear() never touches
      objects drawn by anything else on the chart
"""

import logging
from typing import List, Optional, Tuple

import pandas as pd

from pivot_levels.colors import Color
from pivot_levels.models import DisplayWindow, LineArtifact, LineStyle, TextArtifact
from .registry import ChartObjectRegistry

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = 'PivotInd_'
LABEL_SUFFIX = '_label'
MIDNIGHT_KIND = 'MidnightNY'
MIDNIGHT_LABEL_TEXT = '0 NY'


def day_suffix(days_back: int) -> str:
    return f"_{days_back}"


class ArtifactRenderer:
    """
    Issue create/remove requests against a chart object registry.

    Lines are named ``<prefix><kind><suffix>`` and their labels
    ``<prefix><kind><suffix>_label``.
    """

    def __init__(self,
                 registry: ChartObjectRegistry,
                 prefix: str = DEFAULT_PREFIX,
                 font_size: int = 9):
        self.registry = registry
        self.prefix = prefix
        self.font_size = font_size

    def line_name(self, kind: str, suffix: str = '') -> str:
        return f"{self.prefix}{kind}{suffix}"

    def label_name(self, kind: str, suffix: str = '') -> str:
        return self.line_name(kind, suffix) + LABEL_SUFFIX

    def clear(self) -> int:
        """Remove every object this indicator owns."""
        return self.registry.remove_all_with_prefix(self.prefix)

    def draw_level(self,
                   kind: str,
                   suffix: str,
                   start_time: pd.Timestamp,
                   end_time: pd.Timestamp,
                   label_time: pd.Timestamp,
                   price: float,
                   color: Color,
                   thickness: int,
                   style: LineStyle,
                   text: Optional[str] = None) -> Tuple[str, str]:
        """
        Draw one horizontal level and its text label.

        Returns:
            (line name, label name)
        """
        line_name = self.line_name(kind, suffix)
        label_name = line_name + LABEL_SUFFIX

        self.registry.upsert(line_name, LineArtifact(
            start_time=start_time,
            end_time=end_time,
            price=price,
            color=color,
            thickness=thickness,
            style=style,
        ))
        self.registry.upsert(label_name, TextArtifact(
            text=text if text is not None else kind,
            time=label_time,
            price=price,
            color=color,
            font_size=self.font_size,
        ))

        return line_name, label_name

    def draw_window_level(self,
                          kind: str,
                          window: DisplayWindow,
                          price: float,
                          color: Color,
                          thickness: int,
                          style: LineStyle) -> List[str]:
        """Draw a pivot level across a day's display window."""
        names = self.draw_level(
            kind,
            day_suffix(window.days_back),
            window.start_time,
            window.end_time,
            window.label_time,
            price,
            color,
            thickness,
            style,
        )
        return list(names)

    def draw_midnight(self,
                      start_time: pd.Timestamp,
                      end_time: pd.Timestamp,
                      label_time: pd.Timestamp,
                      price: float,
                      color: Color,
                      thickness: int,
                      style: LineStyle) -> List[str]:
        names = self.draw_level(
            MIDNIGHT_KIND,
            '',
            start_time,
            end_time,
            label_time,
            price,
            color,
            thickness,
            style,
            text=MIDNIGHT_LABEL_TEXT,
        )
        return list(names)
