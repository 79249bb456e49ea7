"""
Infrastructure layer - Configuration and external concerns.

Contains:
- Settings
"""

from .settings import (
    LoggingSettings,
    MachineSettings,
    Settings,
    get_settings,
    reset_settings,
)


__all__ = [
    "LoggingSettings",
    "MachineSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
