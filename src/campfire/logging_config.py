"""
Logging Configuration
=====================
Every module logs through `logging.getLogger(__name__)`, so all records of
the package hang off the 'campfire' logger configured here.

Levels used by the package:
    DEBUG: Per-item transitions inside a tick (catching fire, going out,
        burning up) and craft polling.
    INFO: Fire construction and death, crafts started, finished or cancelled.
    WARNING: Rejected operations that raise (non-flammable fuel, ticking a
        dead fire, crafting without ingredients).

Usage:
    setup_logging(logging.DEBUG, log_file="campfire.log")
"""
import logging
import sys
from typing import List, Optional

PACKAGE_LOGGER = "campfire"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'campfire' namespace. Safe to call again:
    handlers from a previous call are replaced, not stacked.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file. Overwritten each run.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
