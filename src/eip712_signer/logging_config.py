"""
Logging configuration for eip712_signer

The library itself never installs handlers; applications opt in by calling
setup_logging().
"""

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER = "eip712_signer"

LOG_FORMAT = "%(asctime)s - %(levelname)-8s %(name)s %(filename)s:%(lineno)d %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    logger_name: Optional[str] = PACKAGE_LOGGER,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach a single console handler to the package logger (or the root
    logger when logger_name is None).

    Args:
        level: Logging level (default: INFO)
        logger_name: Logger to configure
        stream: Output stream (default: stdout)

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Calling twice must not duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package namespace"""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
