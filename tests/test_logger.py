"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from suntrack.config import LoggingConfig
from suntrack.logger import get_logger, setup_logger


class TestSetupLogger:
    def test_console_only(self):
        logger = setup_logger(LoggingConfig(level="DEBUG"), name="suntrack-test-console")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "suntrack.log"
        logger = setup_logger(LoggingConfig(file=log_file), name="suntrack-test-file")
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)

        logger.info("sun path written")
        for handler in logger.handlers:
            handler.flush()
        assert "sun path written" in log_file.read_text(encoding="utf-8")

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_repeated_setup_replaces_handlers(self):
        setup_logger(LoggingConfig(), name="suntrack-test-repeat")
        logger = setup_logger(LoggingConfig(), name="suntrack-test-repeat")
        assert len(logger.handlers) == 1


class TestGetLogger:
    def test_module_logger_propagates_to_package(self):
        logger = get_logger("suntrack.sampler")
        assert logger.name == "suntrack.sampler"
        assert not logger.handlers
        assert logging.getLogger("suntrack").handlers
