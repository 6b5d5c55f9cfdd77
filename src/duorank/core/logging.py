"""
Centralized logging configuration for the duorank package.

All package loggers live under the ``duorank`` namespace so a single call to
:func:`setup_logging` controls the engine, the ingester and the CLI.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path

ROOT_LOGGER_NAME = "duorank"

_FORMATS = {
    "simple": "%(levelname)s: %(message)s",
    "json": '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}',
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
}


def setup_logging(
    level: str | int = logging.INFO,
    log_file: str | Path | None = None,
    format_style: str = "detailed",
) -> logging.Logger:
    """Set up logging for the duorank package.

    Args:
        level: Logging level name or number. Defaults to logging.INFO.
        log_file: Optional file to also write logs to. Defaults to None.
        format_style: "simple", "detailed" or "json". Unknown styles fall
            back to "detailed".

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(
        _FORMATS.get(format_style, _FORMATS["detailed"])
    )

    # stdout carries the rankings table, so logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component of the package.

    Args:
        name: Component name, usually ``__name__``. Names already inside the
            package namespace are used as-is.

    Returns:
        Logger instance for the component.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


@contextmanager
def log_timing(
    logger: logging.Logger, operation: str, level: int = logging.INFO
):
    """Context manager to log the timing of operations.

    Args:
        logger: Logger to use for timing messages.
        operation: Description of the operation being timed.
        level: Logging level for timing messages. Defaults to logging.INFO.

    Examples:
        >>> logger = get_logger(__name__)
        >>> with log_timing(logger, "ranking players"):
        ...     ranks, records = rank_players(tournaments, 2024, config)
    """
    start_time = time.time()
    logger.log(level, f"Starting {operation}")

    try:
        yield
        elapsed_time = time.time() - start_time
        logger.log(level, f"Completed {operation} in {elapsed_time:.2f}s")
    except Exception as exception:
        elapsed_time = time.time() - start_time
        logger.error(
            f"Failed {operation} after {elapsed_time:.2f}s: {exception}"
        )
        raise
