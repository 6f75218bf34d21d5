"""Logging configuration helpers."""

import logging

_LOGGER_NAME = "dish_assistant"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Configure the package logger once and return it.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
