# pivot_levels/calculations/__init__.py
"""Computational core: pivot arithmetic, day windows, midnight reference"""
