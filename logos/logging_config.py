"""
Console logging shared by the API server and the CLI.

All loggers live under the ``logos`` namespace; only that namespace is
configured, so embedding applications keep control of the root logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug=False):
    """Attach a stdout handler to the ``logos`` logger.

    Calling it again only updates the level.

    Args:
        debug: Log at DEBUG instead of INFO

    Returns:
        The package logger
    """
    logger = logging.getLogger("logos")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
        logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logger


def get_logger(name):
    """Logger for a module, e.g. ``get_logger("morphology")`` -> ``logos.morphology``."""
    return logging.getLogger(f"logos.{name}")
