"""
Application settings.

Provides typed, immutable configuration sections aggregated into a single
process-wide settings object.
"""

from dataclasses import dataclass, field
from typing import Optional

from vending.configs import (
    DEFAULT_COIN_STOCK,
    DEFAULT_PRODUCT_STOCK,
    LOGGER_APP,
    LOGGER_NAME,
    LOG_LEVEL,
)


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class MachineSettings:
    """Initial stock levels applied when a machine is constructed."""

    initial_coin_stock: int = DEFAULT_COIN_STOCK
    initial_product_stock: int = DEFAULT_PRODUCT_STOCK

    def __post_init__(self) -> None:
        if self.initial_coin_stock < 0 or self.initial_product_stock < 0:
            raise ValueError("Initial stock cannot be negative")


@dataclass(frozen=True)
class LoggingSettings:
    """
    Logger configuration.

    Attributes:
        name: Logger name.
        app: Application label sent to Loki.
        level: Logging level.
        log_file: Rotating log file path, or None to log to console only.
        loki_url: Loki push endpoint, or None to disable remote logging.
    """

    name: str = LOGGER_NAME
    app: str = LOGGER_APP
    level: int = LOG_LEVEL
    log_file: Optional[str] = None
    loki_url: Optional[str] = None


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    machine: MachineSettings = field(default_factory=MachineSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call rebuilds defaults."""
    global _settings
    _settings = None
