"""Tests for logging configuration."""

import logging

from dish_assistant.app_logging import configure_logging


def test_configure_logging_installs_one_handler() -> None:
    logger = logging.getLogger("dish_assistant")
    logger.handlers.clear()

    configure_logging()
    configure_logging()

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_configure_logging_applies_level() -> None:
    logger = configure_logging("debug")

    assert logger.name == "dish_assistant"
    assert logger.level == logging.DEBUG

    configure_logging("INFO")
    assert logger.level == logging.INFO
