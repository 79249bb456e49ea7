"""
Application layer - Application services and use cases.

Contains:
- Vending service
- Command handlers
"""

from .command_handler import CommandHandler, CommandResponse
from .vending_service import VendingService


__all__ = [
    "VendingService",
    "CommandHandler",
    "CommandResponse",
]
