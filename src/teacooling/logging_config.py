"""
Logging Configuration
=====================
Attaches handlers to the 'teacooling' package logger.

The simulation modules only ever call ``logging.getLogger(__name__)``; nothing
reaches the console until ``setup_logging`` has run. Level, format and the
optional log file come from ``teacooling.config``.
"""
from __future__ import annotations

import logging
import sys

from teacooling import config

PACKAGE_LOGGER = "teacooling"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int | str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    level: int | str | None = None,
    log_file: str | None = None,
    debug: bool = False,
) -> logging.Logger:
    """
    Configure console (and optionally file) output of the package logger.

    Args:
        level: Logging level; defaults to ``config.LOG_LEVEL``.
        log_file: Path of a log file; defaults to ``config.LOG_FILE``.
        debug: Force DEBUG, which shows the per-run radiative area and the
               evaporation estimate.

    Returns:
        The configured 'teacooling' logger.
    """
    if debug:
        level = logging.DEBUG
    elif level is None:
        level = config.LOG_LEVEL
    log_file = log_file or config.LOG_FILE

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Repeated calls replace handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.debug(f"Logging at {logging.getLevelName(logger.level)}, file: {log_file}")
    return logger
