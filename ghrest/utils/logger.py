import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at DEBUG
NOISY_LOGGERS = ("httpx", "httpcore")


def create_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Create (or fetch) a named logger with a single console handler.

    Args:
        name: Logger name, usually the module or component name
        level: Logging level name. Defaults to GITHUB_LOG_LEVEL or INFO
    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    level_name = (level or os.getenv("GITHUB_LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
