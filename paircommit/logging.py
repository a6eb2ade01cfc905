"""Logging configuration.

Uses standard library logging. Debug records go to stderr so they never mix
with the prompts and the commit output.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the paircommit logger.

    Args:
        verbose: Log at DEBUG level instead of WARNING.

    Returns:
        The configured 'paircommit' logger.
    """
    logger = logging.getLogger("paircommit")

    # Remove any existing handlers to avoid duplicate logs when re-configuring.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
