"""
Configuration constants for the vending machine.

This module provides the build-time defaults used by the settings layer
and the logger factory: seed stock levels, logger identity and formats.
"""

import logging
from typing import Final


# =============================================================================
# Stock Configuration
# =============================================================================

DEFAULT_COIN_STOCK: Final[int] = 5
DEFAULT_PRODUCT_STOCK: Final[int] = 5


# =============================================================================
# Logging Configuration
# =============================================================================

LOGGER_NAME: Final[str] = "VENDING_MACHINE"
LOGGER_APP: Final[str] = "vending_machine"
LOG_LEVEL: Final[int] = logging.INFO

DEFAULT_LOG_FORMAT: Final[str] = (
    "%(name)s | %(asctime)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s"
)
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
MAX_LOG_FILE_SIZE: Final[int] = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT: Final[int] = 3
LOKI_TIMEOUT: Final[float] = 2.0
