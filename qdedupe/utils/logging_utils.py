"""Logging utilities for question clustering."""

import logging
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging for clustering runs.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR), case-insensitive
        log_file: Optional file to write logs to in addition to stderr

    Raises:
        ValueError: If level is not one of LOG_LEVELS

    """
    if str(level).upper() not in LOG_LEVELS:
        raise ValueError(f"Logging level must be one of {LOG_LEVELS}, got {level!r}")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    """
    return logging.getLogger(name)
