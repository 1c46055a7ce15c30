"""
Cooling Solver Engine
=====================
Time integration of the thermal model.

Why is this file needed?
------------------------
1. Time-Stepping: It manages the temporal loop (t=0 to t=End) in fixed
   one-second steps.
2. Data Generation: It produces the temperature history stored on each
   experiment.
"""
