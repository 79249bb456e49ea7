"""
Logging configuration for the vending machine.

This module provides a centralized logging setup with support for:
- Console output with colored formatting
- Optional file rotation with size limits
- Optional remote logging to Loki
"""

import logging
import time
from logging.handlers import RotatingFileHandler
from typing import Final, Optional

import colorlog
import httpx

from vending.configs import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_LOG_FORMAT,
    LOG_BACKUP_COUNT,
    LOGGER_APP,
    LOKI_TIMEOUT,
    MAX_LOG_FILE_SIZE,
)
from vending.infrastructure.settings import get_settings


# =============================================================================
# Color Configuration
# =============================================================================

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


# =============================================================================
# Loki Integration
# =============================================================================

def send_to_loki(url: str, level: str, message: str, app: str) -> None:
    """
    Send a log entry to Loki.

    Args:
        url: Loki push endpoint.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        message: Log message.
        app: Application name for Loki labels.
    """
    log_entry = {
        "streams": [
            {
                "stream": {"level": level, "app": app},
                "values": [[str(int(time.time() * 1e9)), message]],
            }
        ]
    }
    headers = {"Content-Type": "application/json"}
    with httpx.Client() as client:
        client.post(url, json=log_entry, headers=headers, timeout=LOKI_TIMEOUT)


class LokiHandler(logging.Handler):
    """
    Logging handler that pushes records to Loki.

    Attributes:
        url: Loki push endpoint.
        app: Application name for Loki labels.
    """

    def __init__(self, url: str, app: str) -> None:
        super().__init__()
        self.url = url
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            send_to_loki(self.url, record.levelname.upper(), message, self.app)
        except Exception:
            self.handleError(record)


# =============================================================================
# Logger Factory
# =============================================================================

def get_logger(
    name: str,
    app: str = LOGGER_APP,
    log_file: Optional[str] = None,
    level: int = logging.DEBUG,
    loki_url: Optional[str] = None,
) -> logging.Logger:
    """
    Create and configure a logger.

    A colored console handler is always attached. File and Loki handlers
    are attached only when their destinations are given.

    Args:
        name: Logger name.
        app: Application name for Loki labels.
        log_file: Path to a rotating log file.
        level: Logging level (default: DEBUG).
        loki_url: Loki push endpoint.

    Returns:
        Configured logger instance.
    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger_instance.handlers:
        return logger_instance

    console_formatter = colorlog.ColoredFormatter(
        f"%(name)s | %(log_color)s%(asctime)s | %(levelname)s | "
        f"%(funcName)s:%(lineno)d | %(message)s",
        datefmt=DEFAULT_DATE_FORMAT,
        log_colors=LOG_COLORS,
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)
    logger_instance.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        logger_instance.addHandler(file_handler)

    if loki_url:
        loki_handler = LokiHandler(loki_url, app)
        loki_handler.setLevel(level)
        loki_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt=DEFAULT_DATE_FORMAT,
            )
        )
        logger_instance.addHandler(loki_handler)

    return logger_instance


# =============================================================================
# Default Logger Instance
# =============================================================================

_log_settings = get_settings().logging

logger = get_logger(
    name=_log_settings.name,
    app=_log_settings.app,
    log_file=_log_settings.log_file,
    level=_log_settings.level,
    loki_url=_log_settings.loki_url,
)
