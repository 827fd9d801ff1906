"""
Logging configuration using loguru.

Library modules log through ``loguru.logger`` directly and never add sinks.
Applications call setup_logging() (or setup_logging_from_config()) once at
startup to decide where those messages go.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from daybook.core.config import Config


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru with console and optional file output.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level.upper(),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}",
            rotation=rotation,
            retention=retention,
        )


def setup_logging_from_config(config: Config) -> None:
    """Configure logging from the ``logging`` section of a Config."""
    setup_logging(
        level=config.get("logging.level", "WARNING") or "WARNING",
        log_file=config.get("logging.file") or None,
    )
