import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(name: Optional[str] = "rlgrammar", level: Optional[str] = None) -> logging.Logger:
    """
    Sets up a stdout logger. The level comes from `level`, else the LOG_LEVEL
    environment variable, and falls back to WARNING.
    """
    level_str = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    log_level = getattr(logging, level_str, logging.WARNING)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers = []  # Clear existing handlers
    logger.addHandler(console_handler)
    return logger
