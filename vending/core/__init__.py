"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces
- Value Objects
"""

from .exceptions import (
    VendingMachineError,
    TransactionError,
    SoldOutError,
    NotFullPaidError,
    InsufficientChangeError,
    NoProductSelectedError,
)
from .interfaces import VendingMachine
from .value_objects import (
    Coin,
    Product,
    MachinePhase,
    Bucket,
    MachineStats,
)


__all__ = [
    # Exceptions
    "VendingMachineError",
    "TransactionError",
    "SoldOutError",
    "NotFullPaidError",
    "InsufficientChangeError",
    "NoProductSelectedError",
    # Interfaces
    "VendingMachine",
    # Value Objects
    "Coin",
    "Product",
    "MachinePhase",
    "Bucket",
    "MachineStats",
]
