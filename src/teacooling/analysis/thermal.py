"""
Thermal Model
=============
Pure functions describing how a mug of tea gains and loses heat.

Why is this file needed?
------------------------
1. Mixing: Equilibrium temperature of two bodies brought together (water
   poured into a mug, milk added to tea).
2. Radiation: Stefan-Boltzmann heat loss of the mug to the room.
3. Stepping: Temperature of the liquid after one second of losing heat.
4. Evaporation: Auxiliary estimate of the evaporative heat loss, which the
   time stepping does not use.

Every function accepts plain floats or NumPy arrays. Degenerate inputs
(zero mass, zero volume) are not checked and produce inf/NaN.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from teacooling.model.materials import MILK, WATER
from teacooling.utils import celsius_to_kelvin

if TYPE_CHECKING:
    import numpy.typing as npt

    from teacooling.model.container import Mug

    FloatOrArray = float | npt.NDArray[np.float64]

BOLTZMANN: float = 5.670373e-8
WATER_SPECIFIC_HEAT: float = WATER.specific_heat
EVAPORATION_COEFFICIENT: float = 25.0
LATENT_HEAT_VAPORIZATION: float = 2270.0  # kJ/kg
SECONDS_PER_HOUR: float = 3600.0


def temperature_equilibrium(
    mass1: FloatOrArray,
    temp1: FloatOrArray,
    spec_heat1: FloatOrArray,
    mass2: FloatOrArray,
    temp2: FloatOrArray,
    spec_heat2: FloatOrArray,
) -> FloatOrArray:
    """
    Common final temperature of two bodies in thermal contact.

    Energy conservation: the heat given up by the warmer body equals the
    heat taken by the colder one, so the result is the average of both
    temperatures weighted by thermal mass.

    Args:
        mass1: Mass of the first body in kg.
        temp1: Temperature of the first body in °C.
        spec_heat1: Specific heat capacity of the first body.
        mass2: Mass of the second body in kg.
        temp2: Temperature of the second body in °C.
        spec_heat2: Specific heat capacity of the second body.

    Returns:
        Equilibrium temperature in °C.
    """
    capacity1 = mass1 * spec_heat1
    capacity2 = mass2 * spec_heat2
    return np.divide(capacity1 * temp1 + capacity2 * temp2, capacity1 + capacity2)


def final_temp(mug: Mug, mug_temp: float, water_temp: float) -> float:
    """
    Temperature of the water right after it is poured into the mug.

    Args:
        mug: The mug, its material and the volume of water it holds.
        mug_temp: Temperature of the empty mug in °C.
        water_temp: Temperature of the poured water in °C.

    Returns:
        Equilibrium temperature of water and mug in °C.
    """
    water_weight = mug.volume_litres  # kg
    return temperature_equilibrium(
        water_weight, water_temp, WATER.specific_heat,
        mug.weight, mug_temp, mug.material.specific_heat,
    )


def add_milk(
    volume_litres: float,
    tea_temp: float,
    milk_mass: float = 0.1,
    milk_temp: float = 4.0,
) -> float:
    """Temperature of tea after a splash of milk is stirred in."""
    return temperature_equilibrium(
        volume_litres, tea_temp, WATER.specific_heat,
        milk_mass, milk_temp, MILK.specific_heat,
    )


def power_emitted(
    area: float,
    init_temp: FloatOrArray,
    room_temp: FloatOrArray,
    emissivity: float,
) -> FloatOrArray:
    """
    Total power radiated in kJ/s.

    Uses the Stefan-Boltzmann law with both temperatures shifted to Kelvin.
    The result is negative when the body is colder than the room.

    Args:
        area: Radiating area in m².
        init_temp: Temperature of the radiating body in °C.
        room_temp: Temperature of the surroundings in °C.
        emissivity: Emissivity of the surface (1.0 for a black body).

    Returns:
        Net radiated power.
    """
    temp_4 = celsius_to_kelvin(init_temp) ** 4 - celsius_to_kelvin(room_temp) ** 4
    return temp_4 * BOLTZMANN * area * emissivity


def new_temperature(
    volume: FloatOrArray,
    start_temp: FloatOrArray,
    power_loss: FloatOrArray,
) -> FloatOrArray:
    """
    Temperature of the liquid after losing ``power_loss`` for one second.

    Args:
        volume: Liquid volume in litres, taken as kg of water.
        start_temp: Temperature at the start of the second in °C.
        power_loss: Heat lost during the second (kJ/s).

    Returns:
        Temperature at the end of the second in °C.
    """
    return start_temp - np.divide(power_loss, WATER_SPECIFIC_HEAT * volume)


def evaporation_energy(
    area: FloatOrArray,
    humidity_sat: FloatOrArray,
    humidity_air: FloatOrArray,
) -> FloatOrArray:
    """
    Heat lost through evaporation of the liquid surface.

    Args:
        area: Free liquid surface in m².
        humidity_sat: Saturation humidity at the liquid surface.
        humidity_air: Humidity of the room air.

    Returns:
        Heat loss in kJ/s (kW).
    """
    return (
        LATENT_HEAT_VAPORIZATION * EVAPORATION_COEFFICIENT * area
        * (humidity_sat - humidity_air) / SECONDS_PER_HOUR
    )


def cooling_energy(volume: FloatOrArray, start_temp: FloatOrArray, end_temp: FloatOrArray) -> FloatOrArray:
    """Energy the liquid has to lose to cool from ``start_temp`` to ``end_temp``."""
    return (start_temp - end_temp) * WATER_SPECIFIC_HEAT * volume


def evaporation_cooling_time(energy: FloatOrArray, evaporation_rate: FloatOrArray) -> FloatOrArray:
    """Seconds needed to remove ``energy`` through evaporation alone."""
    return np.divide(energy, evaporation_rate)
