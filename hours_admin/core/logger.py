"""Logger configuration for the restaurant hours admin."""

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_ROTATION = "10 MB"
LOG_FILE_RETENTION = "7 days"


def setup_logger(level: str = "INFO", log_file: str | None = None) -> None:
    """Send logs to stderr and, when log_file is set, to a rotating file.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file; parent directories are created
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message} | {extra}",
            level=level,
            rotation=LOG_FILE_ROTATION,
            retention=LOG_FILE_RETENTION,
            encoding="utf-8",
        )

    logger.debug(f"Logger initialized with level={level}")
