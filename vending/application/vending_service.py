"""
Vending Service - Application service for hosts that share a machine.

Serialises every operation on a transaction state machine behind a lock
so a host can expose one machine to several threads.
"""

import threading
from typing import Any, Optional

from vending.application.command_handler import CommandHandler
from vending.core.value_objects import Bucket, Coin, MachineStats, Product
from vending.domain.transaction_state_machine import TransactionStateMachine
from vending.infrastructure.settings import Settings, get_settings
from vending.loggers import logger


class VendingService:
    """
    Thread-safe facade over a single vending machine.

    Operations keep the machine's signatures and raise the same
    exceptions; only one runs at a time.
    """

    def __init__(
        self,
        machine: Optional[TransactionStateMachine] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            machine: Machine to wrap. Built from settings when omitted.
            settings: Application settings (default: global settings).
        """
        self._settings = settings or get_settings()
        self._machine = machine or TransactionStateMachine(self._settings.machine)
        self._lock = threading.Lock()
        self._command_handler: Optional[CommandHandler] = None

    @property
    def machine(self) -> TransactionStateMachine:
        """Get the wrapped machine."""
        return self._machine

    # =========================================================================
    # Transaction Operations
    # =========================================================================

    def select_item_and_get_price(self, product: Product) -> int:
        with self._lock:
            return self._machine.select_item_and_get_price(product)

    def insert_coin(self, coin: Coin) -> None:
        with self._lock:
            self._machine.insert_coin(coin)

    def collect_item_and_change(self) -> Bucket[Product, list[Coin]]:
        with self._lock:
            return self._machine.collect_item_and_change()

    def refund(self) -> list[Coin]:
        with self._lock:
            return self._machine.refund()

    def reset(self) -> None:
        with self._lock:
            self._machine.reset()

    def stats(self) -> MachineStats:
        with self._lock:
            return self._machine.stats()

    # =========================================================================
    # Command Dispatch
    # =========================================================================

    def handle(self, command: str, command_id: Optional[int] = None, **data: Any) -> dict[str, Any]:
        """
        Run a named command and return a response dictionary.

        Args:
            command: Command name (select, insert, collect, refund, reset, stats).
            command_id: Optional caller-side identifier echoed in the response.
            **data: Command arguments.

        Returns:
            Response dictionary, see ``CommandResponse``.
        """
        if self._command_handler is None:
            self._command_handler = CommandHandler(self)

        logger.debug(f"Handling command '{command}' with {data}")
        return self._command_handler.execute(
            {"command": command, "command_id": command_id, "data": data}
        )
