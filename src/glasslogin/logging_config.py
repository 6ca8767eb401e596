"""
Logging Setup
=============
One call at startup routes every `glasslogin.*` module logger to stdout
(and, on request, to a file). Widgets log lifecycle events at INFO and
per-paint work such as backdrop re-blurs at DEBUG.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the package logger.

    Calling it again replaces the previous handlers instead of stacking them.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Optional path; the file is truncated on every launch.
    """
    logger = logging.getLogger("glasslogin")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
