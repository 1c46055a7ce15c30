"""
Application Entry
=================
Runs the tea scenario and opens the cooling chart.
"""
import logging

from teacooling import config
from teacooling.analysis.thermal import cooling_energy, evaporation_cooling_time, evaporation_energy
from teacooling.logging_config import setup_logging
from teacooling.model.scenario import DEFAULT_MUG, run_scenario
from teacooling.view.plotting import plot_temps

logger = logging.getLogger(__name__)


def log_evaporation_estimate() -> None:
    """Report how long evaporation alone would take to cool the tea to room temperature."""
    mug = DEFAULT_MUG
    evap_loss = evaporation_energy(mug.top_surface_area, config.HUMIDITY_SATURATED, config.HUMIDITY_AIR)
    energy = cooling_energy(mug.volume_litres, config.WATER_TEMPERATURE, config.ROOM_TEMPERATURE)
    seconds = evaporation_cooling_time(energy, evap_loss)

    logger.debug(f"temp_reduction_needed: {energy} kJ")
    logger.debug(f"Energy from evaporation per second: {evap_loss} kJ/s")
    logger.debug(f"This will take: {seconds} seconds  ({seconds / 60.0} mins)")


def main() -> None:
    setup_logging(debug=config.DEBUG)

    log_evaporation_estimate()
    experiments = run_scenario(config.MAX_TIME, config.ROOM_TEMPERATURE)

    plot_temps(config.MAX_TIME, experiments)


if __name__ == "__main__":
    main()
