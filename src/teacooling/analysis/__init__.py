"""
Thermal Analysis
================
Closed-form heat balance of a mug of tea.

Note: This package should be pure Python/NumPy and should NOT import matplotlib.
"""
