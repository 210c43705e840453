"""
Logging configuration for the Reddit listing client.

The package logs through loguru but stays disabled until the application
opts in, either with ``logger.enable("reddit_listing")`` or by calling
``setup_logging``.
"""

import sys
from typing import Optional

from loguru import logger

PACKAGE_NAME = "reddit_listing"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    log_level: str = "INFO",
    colorize: bool = True,
    log_file: Optional[str] = None,
    debug: bool = False,
) -> None:
    """
    Set up logging for scripts that use the client.

    Replaces all existing loguru handlers, so libraries should not call this.

    Args:
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR)
        colorize: Colorize console output
        log_file: Optional path of a daily rotated log file
        debug: Include backtraces and variable values in tracebacks
    """
    logger.remove()
    logger.enable(PACKAGE_NAME)

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=log_level,
        colorize=colorize,
        backtrace=debug,
        diagnose=debug
    )

    if log_file:
        logger.add(
            log_file,
            format=LOG_FORMAT,
            level=log_level,
            rotation="1 day",
            retention="30 days",
            compression="gz",
            backtrace=False,
            diagnose=False
        )

    logger.info(f"Logging initialized with level: {log_level}")
