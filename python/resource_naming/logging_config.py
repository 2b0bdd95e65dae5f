"""
Logging configuration for resource_naming.

The library never installs handlers on import; modules only create loggers
under the "resource_naming" namespace and emit DEBUG records. Applications
that want to see them call setup_logging().

File logs go to <log_dir>/resource-naming-YYYY-MM-DD.log (new file each day).
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "resource_naming"


class FlushingHandler(logging.handlers.TimedRotatingFileHandler):
    """Handler that flushes after every emit for immediate visibility."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    backup_count: int = 30,  # Keep 30 days of logs
    console: bool = False,
) -> logging.Logger:
    """
    Set up logging for resource_naming.

    Calling this more than once never adds duplicate handlers.

    Args:
        log_dir: Directory for daily-rotated log files (None: no file logging)
        level: Logging level (default: INFO)
        backup_count: Number of daily backup files to keep (default: 30 days)
        console: If True, also log to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    has_file_handler = any(
        isinstance(h, logging.handlers.TimedRotatingFileHandler)
        for h in logger.handlers
    )
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    )

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_dir is not None and not has_file_handler:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"resource-naming-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = FlushingHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Log file: {log_file}")
        logger.info(f"Log level: {logging.getLevelName(level)}")

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a resource_naming logger.

    Args:
        name: Logger name, either "resource_naming" or a dotted child of it

    Returns:
        Logger instance
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
