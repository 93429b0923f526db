"""
Logging Configuration
Sets up the package logger for the command line.
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> None:
    """
    Configures the logger for the 'numlens' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        stream: Target stream, defaults to stderr so that stdout only carries the conversion.
    """
    logger = logging.getLogger("numlens")
    logger.setLevel(level)

    # Repeated setup (tests, embedding) must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging initialized.")
