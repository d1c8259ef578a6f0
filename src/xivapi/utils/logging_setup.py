"""Logging configuration with optional file rotation.

The library itself only creates module loggers; applications that want
console or file output call `setup_logging()` once at startup.

Log Level Precedence (deterministic resolution order):
1. Explicit parameter (log_level argument to setup_logging)
2. Environment variable (APP_LOG_LEVEL)
3. Config defaults (config.app.log_level)
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import get_config

logger = logging.getLogger(__name__)

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: str | None = None) -> str:
    """Resolve the effective log level name using the precedence order."""
    if log_level:
        return log_level.upper()
    env_level = os.environ.get("APP_LOG_LEVEL")
    if env_level:
        return env_level.upper()
    return get_config().app.log_level


def setup_logging(
    log_level: str | None = None,
    log_file: str | Path | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Configure root logging with a console handler and optional file output.

    Args:
        log_level: Explicit logging level override (highest priority).
        log_file: Optional path of a rotating log file.
        max_bytes: Rotation threshold for the log file.
        backup_count: Number of rotated files to keep.
    """
    resolved_level = resolve_log_level(log_level)
    numeric_level = getattr(logging, resolved_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)
        logger.info("Logging to file: %s", log_path)

    logger.info("Logging configured with level: %s", resolved_level)
