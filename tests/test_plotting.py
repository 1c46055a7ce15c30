import matplotlib.pyplot as plt
import numpy as np
import pytest

from teacooling.model.experiment import Experiment, PlotOptions
from teacooling.view.plotting import plot_series, plot_temps


@pytest.fixture
def experiments(mug):
    runs = [
        Experiment(87.0, 25.0, PlotOptions("Normal Cup", "red")),
        Experiment(90.0, 25.0, PlotOptions("Heated Cup", "blue")),
    ]
    for run in runs:
        run.simulate(100, mug)
    return runs


class TestPlotSeries:

    def test_seed_is_not_plotted(self, experiments):
        time, temperatures = plot_series(100, experiments[0])

        assert len(time) == len(temperatures) == 99
        assert time[0] == 1
        assert time[-1] == 99
        np.testing.assert_array_equal(temperatures, experiments[0].result[1:])

    def test_rejects_mismatched_duration(self, experiments):
        with pytest.raises(ValueError):
            plot_series(200, experiments[0])


class TestPlotTemps:

    def test_figure_layout(self, experiments):
        fig = plot_temps(100, experiments, show=False)
        ax = fig.axes[0]

        assert ax.get_title() == "Tea Temperature"
        assert ax.get_xlabel() == "Time (seconds)"
        assert ax.get_ylabel() == "Temperature (Celcius)"
        assert ax.get_ylim() == (30.0, 100.0)
        plt.close(fig)

    def test_one_line_per_experiment(self, experiments):
        fig = plot_temps(100, experiments, show=False)
        lines = fig.axes[0].get_lines()

        assert [line.get_label() for line in lines] == ["Normal Cup", "Heated Cup"]
        assert [line.get_color() for line in lines] == ["red", "blue"]
        np.testing.assert_array_equal(lines[1].get_ydata(), experiments[1].result[1:])
        plt.close(fig)
