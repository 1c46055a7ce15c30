"""
Tea Scenario
============
The fixed set of experiments the program runs: a cold or pre-warmed mug,
each with or without milk.
"""
from __future__ import annotations

import logging

from teacooling import config
from teacooling.analysis.thermal import add_milk, final_temp
from teacooling.model.container import Mug
from teacooling.model.experiment import Experiment, PlotOptions
from teacooling.solvers.solver import CoolingSolver

logger = logging.getLogger(__name__)

DEFAULT_MUG = Mug(
    height=config.MUG_HEIGHT,
    radius=config.MUG_RADIUS,
    weight=config.MUG_WEIGHT,
    volume=config.MUG_VOLUME,
)


def build_experiments(mug: Mug, room_temp: float = config.ROOM_TEMPERATURE) -> list[Experiment]:
    """
    Derive the initial temperatures by mixing and create one experiment per case.

    The "heated" cup is a mug that was already warmed by a first pour, so its
    temperature is the equilibrium of the first pour.

    Args:
        mug: The mug every experiment uses.
        room_temp: Ambient temperature in °C.

    Returns:
        The experiments in display order.
    """
    init_temp1 = final_temp(mug, config.MUG_TEMPERATURE, config.WATER_TEMPERATURE)
    init_temp2 = final_temp(mug, init_temp1, config.WATER_TEMPERATURE)
    init_temp3 = add_milk(mug.volume_litres, init_temp1, config.MILK_MASS, config.MILK_TEMPERATURE)
    init_temp4 = add_milk(mug.volume_litres, init_temp2, config.MILK_MASS, config.MILK_TEMPERATURE)

    logger.info(
        f"volume: {mug.volume_litres}  init_temp1: {init_temp1}  init_temp2: {init_temp2}"
    )

    return [
        Experiment(init_temp1, room_temp, PlotOptions("Normal Cup", "red")),
        Experiment(init_temp2, room_temp, PlotOptions("Heated Cup", "blue")),
        Experiment(init_temp3, room_temp, PlotOptions("Normal Cup w/ Milk", "green")),
        Experiment(init_temp4, room_temp, PlotOptions("Heated Cup w/ Milk", "purple")),
    ]


def run_scenario(
    max_time: int = config.MAX_TIME,
    room_temp: float = config.ROOM_TEMPERATURE,
    mug: Mug = DEFAULT_MUG,
) -> list[Experiment]:
    """Build and simulate the tea experiments one after another."""
    experiments = build_experiments(mug, room_temp)
    CoolingSolver(mug).solve(experiments, max_time)
    return experiments
