# pivot_levels/tests/__init__.py
