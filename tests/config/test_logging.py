"""Tests for structlog configuration."""

import json
import logging

import pytest

from petledger.config.logging import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    def test_default_level_warning(self) -> None:
        configure_logging()
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_verbose_level_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_reconfigure_keeps_one_handler(self) -> None:
        configure_logging()
        configure_logging(log_json=True)
        logger = logging.getLogger(LOGGER_NAME)
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    @pytest.mark.parametrize("name", ["sqlalchemy", "pluggy"])
    def test_libraries_quiet(self, name: str) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(name).level == logging.WARNING

    def test_json_lines_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        logging.getLogger("petledger.services.lending").warning("stock low")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "stock low"
        assert record["level"] == "warning"
        assert record["logger"] == "petledger.services.lending"
