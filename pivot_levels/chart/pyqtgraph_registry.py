# pivot_levels/chart/pyqtgraph_registry.py
"""
Module: PyQtGraph Chart Registry
Purpose: Draw pivot artifacts on a PyQtGraph plot, keyed by object name
UI Framework: PyQt6 with PyQtGraph
Note: X axis values are UTC epoch seconds (pair with pg.DateAxisItem)
"""

import logging
from typing import Dict, List, Optional, Tuple

import pyqtgraph as pg
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from pivot_levels.models import LineArtifact, LineStyle, TextArtifact
from .registry import Artifact

# Configure logging
logger = logging.getLogger(__name__)

# Host dash patterns -> Qt pen style and optional custom dash pattern
PEN_STYLES: Dict[LineStyle, Tuple[Qt.PenStyle, Optional[List[int]]]] = {
    LineStyle.SOLID: (Qt.PenStyle.SolidLine, None),
    LineStyle.DOTS: (Qt.PenStyle.DotLine, None),
    LineStyle.DOTS_RARE: (Qt.PenStyle.CustomDashLine, [1, 4]),
    LineStyle.DOTS_VERY_RARE: (Qt.PenStyle.CustomDashLine, [1, 8]),
    LineStyle.LINES_DOTS: (Qt.PenStyle.DashDotLine, None),
    LineStyle.LINES: (Qt.PenStyle.DashLine, None),
}

HORIZONTAL_ANCHORS = {'left': 0.0, 'center': 0.5, 'right': 1.0}
VERTICAL_ANCHORS = {'top': 0.0, 'center': 0.5, 'bottom': 1.0}


def make_pen(artifact: LineArtifact):
    """Build the QPen for a line artifact."""
    pen_style, dash = PEN_STYLES.get(artifact.style, (Qt.PenStyle.SolidLine, None))
    return pg.mkPen(
        color=artifact.color.rgb,
        width=artifact.thickness,
        style=pen_style,
        dash=dash,
    )


def text_anchor(artifact: TextArtifact) -> Tuple[float, float]:
    return (
        HORIZONTAL_ANCHORS.get(artifact.horizontal_alignment, 0.0),
        VERTICAL_ANCHORS.get(artifact.vertical_alignment, 0.5),
    )


class PyQtGraphChartRegistry:
    """
    Chart object registry backed by a pg.PlotItem.
    Upserting an existing name replaces its graphics item.
    """

    def __init__(self, plot: pg.PlotItem):
        self.plot = plot
        self._items: Dict[str, pg.GraphicsObject] = {}
        self._artifacts: Dict[str, Artifact] = {}

    def upsert(self, name: str, artifact: Artifact) -> None:
        if name in self._items:
            self.remove(name)

        if isinstance(artifact, LineArtifact):
            item = self._build_line(artifact)
        elif isinstance(artifact, TextArtifact):
            item = self._build_text(artifact)
        else:
            raise TypeError(f"Unsupported chart artifact for '{name}': {type(artifact).__name__}")

        if not artifact.interactive:
            item.setAcceptedMouseButtons(Qt.MouseButton.NoButton)

        self.plot.addItem(item)
        self._items[name] = item
        self._artifacts[name] = artifact

    def remove(self, name: str) -> bool:
        item = self._items.pop(name, None)
        self._artifacts.pop(name, None)
        if item is None:
            return False
        self.plot.removeItem(item)
        return True

    def remove_all_with_prefix(self, prefix: str) -> int:
        to_remove = [name for name in self._items if name.startswith(prefix)]
        for name in to_remove:
            self.remove(name)
        return len(to_remove)

    def names(self) -> List[str]:
        return list(self._items)

    def item(self, name: str):
        return self._items[name]

    def artifact(self, name: str) -> Artifact:
        return self._artifacts[name]

    def _build_line(self, artifact: LineArtifact):
        x = [artifact.start_time.timestamp(), artifact.end_time.timestamp()]
        y = [artifact.price, artifact.price]
        return pg.PlotDataItem(x, y, pen=make_pen(artifact))

    def _build_text(self, artifact: TextArtifact):
        text = pg.TextItem(
            text=artifact.text,
            color=artifact.color.rgb,
            anchor=text_anchor(artifact),
        )
        font = QFont()
        font.setPointSize(artifact.font_size)
        text.setFont(font)
        text.setPos(artifact.time.timestamp(), artifact.price)
        return text
