# pivot_levels/chart/__init__.py
"""Chart object registries and the artifact renderer"""

from .registry import ChartObjectRegistry, InMemoryChartRegistry
from .renderer import ArtifactRenderer, DEFAULT_PREFIX

__all__ = ['ChartObjectRegistry', 'InMemoryChartRegistry', 'ArtifactRenderer', 'DEFAULT_PREFIX']
