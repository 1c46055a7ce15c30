"""
Configuration & Constants
=========================
This module serves as the central registry for the fixed scenario constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (mug size, pour temperatures, chart
   limits) scattered throughout the code.
2. Reproducibility: The program has no flags or environment variables; every
   run uses exactly these values.

Exports:
    MUG_* : Geometry and mass of the default mug.
    ROOM_TEMPERATURE (float): Ambient temperature in °C.
    MAX_TIME (int): Simulated duration in seconds.
    PLOT_* : Labels and limits of the cooling chart.
    LOG_* , DEBUG: Logging level, format and optional log file.
"""

# Mug (porcelain, filled to the brim)
MUG_HEIGHT: float = 0.095  # m
MUG_RADIUS: float = 0.04  # m
MUG_WEIGHT: float = 0.282  # kg
MUG_VOLUME: float = 364.0  # ml

# Pour
MUG_TEMPERATURE: float = 23.0  # °C, cupboard temperature of the mug
WATER_TEMPERATURE: float = 100.0  # °C, freshly boiled water

# Milk splash
MILK_MASS: float = 0.1  # kg
MILK_TEMPERATURE: float = 4.0  # °C, straight from the fridge

# Room
ROOM_TEMPERATURE: float = 25.0  # °C
HUMIDITY_SATURATED: float = 0.019826  # kg/kg at the liquid surface
HUMIDITY_AIR: float = 0.0147  # kg/kg in the room

# Simulation
MAX_TIME: int = 3600  # s

# Chart
PLOT_TITLE: str = "Tea Temperature"
PLOT_X_LABEL: str = "Time (seconds)"
PLOT_Y_LABEL: str = "Temperature (Celcius)"
PLOT_Y_RANGE: tuple[float, float] = (30.0, 100.0)

# Logging
LOG_LEVEL: str = "INFO"
LOG_FILE: str | None = None
# Raises the level to DEBUG: radiative area per run and the evaporation estimate
DEBUG: bool = False
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
