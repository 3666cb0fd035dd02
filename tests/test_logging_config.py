"""Tests for the console logging setup."""
import logging

import pytest

from pendulum_chain.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("pendulum_chain")
    saved = (logger.level, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level_and_one_handler(self, package_logger):
        """Test the package logger gets the level and a single stream handler."""
        logger = setup_logging(logging.DEBUG)

        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeat_call_does_not_duplicate(self, package_logger):
        """Test calling setup twice keeps one handler."""
        setup_logging()
        setup_logging(logging.WARNING)

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_module_loggers_propagate(self, package_logger, caplog):
        """Test module loggers such as pendulum_chain.chain reach the package logger."""
        setup_logging(logging.INFO)
        with caplog.at_level(logging.INFO, logger="pendulum_chain"):
            logging.getLogger("pendulum_chain.chain").info("hello")

        assert "hello" in caplog.text
