"""
Test package for heatpath.

Makes 'tests' importable so test modules can share tests/grids.py.
"""
