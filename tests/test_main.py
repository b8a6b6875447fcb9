"""Tests for logging setup and the scripted session."""

import logging

import pytest

from campfire.logging_config import setup_logging
from campfire.main import main


@pytest.fixture
def package_logger():
    logger = logging.getLogger("campfire")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


class TestSetupLogging:
    """Configuring the package logger."""

    def test_console_handler(self, package_logger):
        """One console handler at the requested level."""
        setup_logging(level=logging.DEBUG)
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_repeat_setup(self, package_logger):
        """Calling setup twice does not duplicate handlers."""
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_returns_package_logger(self, package_logger):
        """The configured logger is the parent of every module logger."""
        assert setup_logging() is package_logger
        assert logging.getLogger("campfire.simulation.fire").parent is package_logger

    def test_log_file(self, package_logger, tmp_path):
        """A log file gets its own handler."""
        log_file = tmp_path / "campfire.log"
        setup_logging(log_file=str(log_file))
        assert len(package_logger.handlers) == 2
        package_logger.handlers[1].flush()
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")


class TestMain:
    """The scripted session."""

    def test_short_session(self, package_logger, capsys):
        """A few turns after crafting a bundle."""
        time_alive = main(ticks_per_turn=5, max_turns=3)
        assert time_alive == pytest.approx(115.0)
        output = capsys.readouterr().out
        assert "TEMPERATURE:" in output
        assert "HEATING TWIG" in output
        assert "The fire lasted 115." in output

    def test_runs_until_burnt_out(self, package_logger, capsys):
        """With enough turns the fire dies and the loop stops."""
        time_alive = main(ticks_per_turn=5)
        assert time_alive > 115.0
        assert "The fire lasted" in capsys.readouterr().out
