"""
Logging configuration module.

Initializes global logging settings based on the current environment configuration.
"""

import logging
import sys

from app.config import settings


def configure_logging(level: str | None = None):
    """
    Configure the root logger using the log level specified in the settings.

    Sets a standardized format for log messages, including timestamp, logger name,
    log level, and the actual message. Output goes to standard output.

    Args:
        level (str, optional): Overrides the level from the settings.
    """
    level = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
