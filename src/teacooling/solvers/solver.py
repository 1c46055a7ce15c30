from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import numpy as np

from teacooling.analysis.thermal import new_temperature, power_emitted

if TYPE_CHECKING:
    import numpy.typing as npt

    from teacooling.model.container import Mug
    from teacooling.model.experiment import Experiment

logger = logging.getLogger(__name__)


def simulate(
    sim_time: int,
    init_temp: float,
    room_temp: float,
    mug: Mug,
    emissivity: float = 1.0,
) -> npt.NDArray[np.float64]:
    """
    Cool the liquid in ``mug`` by radiation with an explicit Euler scheme.

    The step size is fixed to one second and no stability check is made.
    For a mug-sized geometry the scheme is stable; very small volumes or very
    large areas may overshoot.

    Args:
        sim_time: Number of samples to produce (seconds, including t=0).
        init_temp: Liquid temperature at t=0 in °C.
        room_temp: Constant room temperature in °C.
        mug: The mug holding the liquid.
        emissivity: Emissivity of the radiating surface.

    Returns:
        Read-only array of ``sim_time`` temperatures; index 0 is ``init_temp``.
    """
    if sim_time < 1:
        raise ValueError(f"Simulation time must be at least 1 second, got {sim_time}.")

    result = np.empty(sim_time, dtype=np.float64)
    result[0] = init_temp

    total_radiative_area = mug.radiative_area
    volume = mug.volume_litres
    logger.debug(f"Area: {total_radiative_area}m^2  Temp: {init_temp}°C")

    prev_temp = float(init_temp)
    for time in range(1, sim_time):
        power = power_emitted(total_radiative_area, prev_temp, room_temp, emissivity)
        prev_temp = float(new_temperature(volume, prev_temp, power))
        result[time] = prev_temp

    result.flags.writeable = False
    return result


class CoolingSolver:
    """
    Class for the cooling solver of a single mug.
    """

    def __init__(
        self,
        mug: Mug,
        emissivity: float = 1.0,
    ) -> None:
        """
        Initialize the solver with a mug.

        Args:
            mug: The mug every experiment is poured into.
            emissivity: Emissivity of the radiating surface.
        """
        self.mug = mug
        self.emissivity = emissivity

    def solve(self, experiments: Iterable[Experiment], max_time: int) -> None:
        """
        Simulate every experiment in order.

        Args:
            experiments: Experiments to populate.
            max_time: Number of one-second samples per experiment.
        """
        for experiment in experiments:
            logger.info(
                f"Simulating '{experiment.label}' from {experiment.init_temp:.2f}°C "
                f"for {max_time} s"
            )
            experiment.simulate(max_time, self.mug, self.emissivity)
            logger.info(f"'{experiment.label}' ends at {experiment.result[-1]:.2f}°C")
