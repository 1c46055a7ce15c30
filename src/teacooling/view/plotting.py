from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt

from teacooling import config

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.figure import Figure

    from teacooling.model.experiment import Experiment


def plot_series(
    max_time: int,
    experiment: Experiment,
) -> tuple[npt.NDArray[np.int64], npt.NDArray[np.float64]]:
    """
    Pair elapsed seconds with the simulated temperatures.

    The seed sample at t=0 is not plotted: x runs from 1 to ``max_time - 1``
    and y is ``result[1:]``.

    Args:
        max_time: Simulated duration in seconds.
        experiment: A simulated experiment.

    Returns:
        Tuple (x, y) of equal length ``max_time - 1``.
    """
    if experiment.result.size != max_time:
        raise ValueError(
            f"Experiment '{experiment.label}' holds {experiment.result.size} samples, "
            f"expected {max_time}."
        )
    time = np.arange(1, max_time, dtype=np.int64)
    return time, experiment.result[1:]


def plot_temps(
    max_time: int,
    experiments: Sequence[Experiment],
    show: bool = True,
) -> Figure:
    """
    Plot the cooling curves of all experiments in one chart.

    Args:
        max_time: Simulated duration in seconds.
        experiments: Simulated experiments, one line each.
        show: Open the plot window.

    Returns:
        The matplotlib figure.
    """
    fig, ax = plt.subplots(figsize=(10, 5), constrained_layout=True)

    for experiment in experiments:
        time, temperatures = plot_series(max_time, experiment)
        ax.plot(
            time, temperatures,
            label=experiment.plot_options.label,
            color=experiment.plot_options.color,
        )

    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.set_title(config.PLOT_TITLE)
    ax.set_xlabel(config.PLOT_X_LABEL)
    ax.set_ylabel(config.PLOT_Y_LABEL)
    ax.set_ylim(*config.PLOT_Y_RANGE)
    ax.legend()

    if show:
        plt.show()
    return fig
