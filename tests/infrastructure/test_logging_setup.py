"""Tests for logging configuration."""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from patternplayground.config.schemas import LoggingConfig
from patternplayground.infrastructure.logging.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging(LoggingConfig(level="WARNING"))


@pytest.mark.unit
class TestLoggingSetup:
    """Test cases for setup_logging."""

    def test_root_level_follows_config(self):
        setup_logging(LoggingConfig(level="debug"))

        assert logging.getLogger().level == logging.DEBUG

    def test_stdout_destination_uses_single_stream_handler(self):
        setup_logging(LoggingConfig(destination="stdout"))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert not isinstance(handlers[0], RotatingFileHandler)

    def test_file_destination_writes_json(self, tmp_path):
        log_file = tmp_path / "nested" / "playground.log"
        setup_logging(LoggingConfig(level="INFO", destination="file", file_path=str(log_file)))

        get_logger("tests.logging").info("maze created", rooms=2)
        logging.getLogger("tests.stdlib").warning("plain record")
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        events = {record["event"]: record for record in records}
        assert events["maze created"]["rooms"] == 2
        assert events["maze created"]["level"] == "info"
        assert events["plain record"]["logger"] == "tests.stdlib"

    def test_both_destinations(self, tmp_path):
        setup_logging(LoggingConfig(destination="both", file_path=str(tmp_path / "x.log")))

        handler_types = {type(h) for h in logging.getLogger().handlers}
        assert RotatingFileHandler in handler_types
        assert logging.StreamHandler in handler_types
