"""
Domain layer - Business logic and domain models.

Contains:
- Inventory counters
- Change making
- Purchase transaction state machine
"""

from .inventory import Inventory
from .change_maker import get_change, has_sufficient_change
from .transaction_state_machine import (
    TransactionStateMachine,
    TransactionContext,
)


__all__ = [
    # Inventory
    "Inventory",
    # Change Making
    "get_change",
    "has_sufficient_change",
    # Transaction State
    "TransactionStateMachine",
    "TransactionContext",
]
