"""
Interfaces for the vending machine.

Defines the contract every purchase transaction engine exposes to its host.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .value_objects import Bucket, Coin, Product


class VendingMachine(ABC):
    """
    Abstract base class for vending machines.

    Implementations serve one transaction at a time: select a product,
    insert coins, then either collect the product with change or refund.
    """

    @abstractmethod
    def select_item_and_get_price(self, product: Product) -> int:
        """
        Select a product for the current transaction.

        Args:
            product: Product to buy.

        Returns:
            Product price in cents.

        Raises:
            SoldOutError: If the product has no units left.
        """
        ...

    @abstractmethod
    def insert_coin(self, coin: Coin) -> None:
        """Deposit a coin toward the current transaction."""
        ...

    @abstractmethod
    def collect_item_and_change(self) -> Bucket[Product, list[Coin]]:
        """
        Dispense the selected product and the change owed.

        Raises:
            NotFullPaidError: If the balance is below the price.
            InsufficientChangeError: If change cannot be formed.
        """
        ...

    @abstractmethod
    def refund(self) -> list[Coin]:
        """
        Abort the transaction and return the deposited amount.

        Raises:
            InsufficientChangeError: If the balance cannot be formed.
        """
        ...

    @abstractmethod
    def reset(self) -> None:
        """Empty all inventories and zero the sales counter."""
        ...
