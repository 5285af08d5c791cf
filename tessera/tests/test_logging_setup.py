"""
Tests for logging configuration.
"""

import logging

import pytest

from ..logging_setup import setup_logging, HANDLER_NAME


@pytest.fixture
def root_logger():
    """Root logger restored to its original handlers and level afterwards."""
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def named_handlers(logger):
    return [h for h in logger.handlers if h.get_name() == HANDLER_NAME]


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_adds_one_named_handler(self, root_logger):
        """Repeated setup does not stack handlers."""
        setup_logging("INFO")
        setup_logging("INFO")

        assert len(named_handlers(root_logger)) == 1

    def test_explicit_level(self, root_logger):
        setup_logging("debug")
        assert root_logger.level == logging.DEBUG

    def test_level_from_environment(self, root_logger, monkeypatch):
        monkeypatch.setenv("TESSERA_LOG_LEVEL", "WARNING")
        setup_logging()
        assert root_logger.level == logging.WARNING

    def test_invalid_level_rejected(self, root_logger):
        with pytest.raises(ValueError):
            setup_logging("chatty")
