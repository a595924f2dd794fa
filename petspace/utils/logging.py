"""Centralized logging configuration for petspace."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False
) -> None:
    """
    Configure global logging sinks.

    Room and participant events are plain INFO messages, so the console sink
    prints only the message text.

    Args:
        level: Minimum level for console output (default: INFO)
        log_file: Optional path for a persistent log file
        verbose: If True, set console level to DEBUG
    """
    # Remove default loguru sink
    logger.remove()

    console_level = "DEBUG" if verbose else level

    logger.add(
        sys.stderr,
        level=console_level,
        format="<level>{message}</level>",
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="1 week",
            compression="zip",
        )

    logger.debug(f"Logging initialized. Console level: {console_level}, File: {log_file}")
