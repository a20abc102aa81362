# pivot_levels/calculations/pivots/__init__.py
"""Pivot level calculators"""

from .classic_pivots import PivotCalculator, compute_pivots

__all__ = ['PivotCalculator', 'compute_pivots']
