import logging

import pytest

from teacooling import config
from teacooling.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("teacooling")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:

    def test_default_level_from_config(self, package_logger):
        logger = setup_logging()

        assert logger is package_logger
        assert logger.level == logging.getLevelName(config.LOG_LEVEL)
        assert len(logger.handlers) == 1

    def test_debug_switch_overrides_level(self, package_logger):
        logger = setup_logging(level=logging.WARNING, debug=True)
        assert logger.level == logging.DEBUG

    def test_does_not_stack_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_debug_records_reach_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "cooling.log"
        setup_logging(log_file=str(log_file), debug=True)
        assert len(package_logger.handlers) == 2

        logging.getLogger("teacooling.solvers.solver").debug("Area: 0.03m^2")
        for handler in package_logger.handlers:
            handler.flush()

        assert "teacooling.solvers.solver - DEBUG - Area: 0.03m^2" in log_file.read_text(encoding="utf-8")

    def test_info_level_drops_diagnostics(self, package_logger, tmp_path):
        log_file = tmp_path / "cooling.log"
        setup_logging(level=logging.INFO, log_file=str(log_file))

        logging.getLogger("teacooling.solvers.solver").debug("Area: 0.03m^2")
        for handler in package_logger.handlers:
            handler.flush()

        assert "Area" not in log_file.read_text(encoding="utf-8")
