"""
The VIEW layer draws simulation results with matplotlib.
It reads experiments and never modifies them.
"""
