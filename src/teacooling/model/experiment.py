"""
Experiment Records
==================
One named cooling run: where it starts, the room it cools in, how it is drawn
and, once simulated, its temperature history.

Classes:
    PlotOptions: Display metadata handed to the chart untouched.
    Experiment: A single simulation run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from teacooling.solvers.solver import simulate

if TYPE_CHECKING:
    import numpy.typing as npt

    from teacooling.model.container import Mug


@dataclass(frozen=True)
class PlotOptions:
    label: str
    color: str


@dataclass
class Experiment:
    """
    A cooling experiment.

    The result is empty until ``simulate`` is called and is populated exactly
    once. Index 0 of the result is the initial temperature, each following
    sample is one second later.
    """
    init_temp: float
    room_temp: float
    plot_options: PlotOptions
    result: npt.NDArray[np.float64] = field(
        default_factory=lambda: np.empty(0, dtype=np.float64)
    )

    @property
    def is_simulated(self) -> bool:
        return self.result.size > 0

    @property
    def label(self) -> str:
        return self.plot_options.label

    def simulate(self, max_time: int, mug: Mug, emissivity: float = 1.0) -> None:
        """
        Run the cooling simulation and store its result.

        Args:
            max_time: Number of one-second samples to produce.
            mug: The mug holding the liquid.
            emissivity: Emissivity of the radiating surface.

        Raises:
            RuntimeError: If the experiment has already been simulated.
        """
        if self.is_simulated:
            raise RuntimeError(f"Experiment '{self.label}' has already been simulated.")
        self.result = simulate(max_time, self.init_temp, self.room_temp, mug, emissivity)
