"""
The MODEL layer contains pure data structures.
It has NO knowledge of the charting backend (matplotlib).
It deals with the mug, the liquids and the experiments run on them.
"""
