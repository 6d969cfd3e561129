"""Logging configuration for the marketplace package."""

import logging
import sys

from marketplace.infrastructure.config.settings import Settings

LOGGER_NAME = "marketplace"


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Modules log through ``logging.getLogger(__name__)``, so everything under
    ``marketplace.*`` goes through this handler. Calling it again replaces
    the handler instead of stacking a second one.

    Args:
        settings: Provides log_level and log_format

    Returns:
        The configured package logger
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.log_format))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    logger.propagate = False

    return logger
