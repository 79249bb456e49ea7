"""
Coin-operated vending machine.

Purchase transaction engine: select a product, insert coins, then collect
the product with exact change or refund the deposit.
"""

from .core import (
    Bucket,
    Coin,
    InsufficientChangeError,
    MachinePhase,
    MachineStats,
    NoProductSelectedError,
    NotFullPaidError,
    Product,
    SoldOutError,
    VendingMachine,
    VendingMachineError,
)
from .domain import Inventory, TransactionStateMachine, get_change
from .application import VendingService


__version__ = "0.1.0"

__all__ = [
    "Bucket",
    "Coin",
    "InsufficientChangeError",
    "Inventory",
    "MachinePhase",
    "MachineStats",
    "NoProductSelectedError",
    "NotFullPaidError",
    "Product",
    "SoldOutError",
    "TransactionStateMachine",
    "VendingMachine",
    "VendingMachineError",
    "VendingService",
    "get_change",
]
