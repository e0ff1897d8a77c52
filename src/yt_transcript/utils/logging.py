import logging
import os
import sys
import colorlog
from typing import Dict, Optional

from ..core.config import config

# Define log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

# Log format comes from configuration (LOG_FORMAT / LOG_DATE_FORMAT)
DEFAULT_LOG_FORMAT = config.logging.format
DEFAULT_DATE_FORMAT = config.logging.date_format

# The CLI writes the transcript to stdout, so logs stay quiet unless asked for
DEFAULT_LOG_LEVEL = "WARNING"

# Keep track of configured loggers
CONFIGURED_LOGGERS: Dict[str, logging.Logger] = {}

def setup_logger(name: str, log_level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """
    Set up a logger with colorful console output on stderr.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    log_level = log_level.upper()

    # Create logger
    logger = logging.getLogger(name)

    # Ensure log_level is valid
    if log_level in LOG_LEVELS:
        logger.setLevel(LOG_LEVELS[log_level])
    else:
        logger.setLevel(logging.WARNING)
        logger.warning(f"Invalid log level: {log_level}. Using WARNING instead.")

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # stdout is reserved for transcript output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logger.level)

    # Define color scheme
    colors = {
        'DEBUG': 'cyan',
        'INFO': 'green',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'CRITICAL': 'red,bg_white',
    }

    # Create formatter with colors
    formatter = colorlog.ColoredFormatter(
        "%(log_color)s" + DEFAULT_LOG_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
        log_colors=colors
    )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Handlers live on each named logger, don't double-print through the root
    logger.propagate = False

    CONFIGURED_LOGGERS[name] = logger
    return logger

def get_log_level() -> str:
    """Get the log level from environment variable or use default."""
    return os.environ.get("LOG_LEVEL", config.logging.level or DEFAULT_LOG_LEVEL).upper()

def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the specified name and log level.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    if log_level is None:
        log_level = get_log_level()

    return setup_logger(name, log_level)

def set_log_level(log_level: str) -> None:
    """Change the level of every logger configured so far (used by ``--verbose``)."""
    level = LOG_LEVELS.get(log_level.upper(), logging.WARNING)
    for logger in CONFIGURED_LOGGERS.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
