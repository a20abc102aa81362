# pivot_levels/calculations/windows/__init__.py
"""Day window and label placement"""

from .window_mapper import (
    WindowMapper,
    map_window,
    label_anchor,
    to_utc,
    LABEL_BARS_FROM_END,
)

__all__ = ['WindowMapper', 'map_window', 'label_anchor', 'to_utc', 'LABEL_BARS_FROM_END']
