"""Logging for the URL shortener client.

Every module logs under the "url_shortener" logger, so one call to
setup_logging controls the client, the resolver and the task manager.
"""

import logging
import sys
from typing import Optional

from config import Config

LOGGER_NAME = "url_shortener"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the shared logger, or a child of it for a module name"""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(
    config: Optional[Config] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Attach handlers to the shared logger.

    Args:
        config: Source of LOG_LEVEL when no explicit level is given
        level: Logging level name, overrides config
        log_file: Optional log file path

    Returns:
        The configured "url_shortener" logger
    """
    if level is None:
        level = (config or Config()).LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = get_logger()
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
