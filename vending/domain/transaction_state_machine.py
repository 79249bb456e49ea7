"""
Transaction State Machine - Manages the purchase transaction lifecycle.

A transaction moves from IDLE to SELECTED when a product is chosen and
returns to IDLE when the product is collected or the deposit refunded.
Failed operations leave the machine exactly as it was before the call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vending.core.exceptions import (
    InsufficientChangeError,
    NoProductSelectedError,
    NotFullPaidError,
    SoldOutError,
)
from vending.core.interfaces import VendingMachine
from vending.core.value_objects import Bucket, Coin, MachinePhase, MachineStats, Product
from vending.domain.change_maker import get_change, has_sufficient_change
from vending.domain.inventory import Inventory
from vending.infrastructure.settings import MachineSettings, get_settings
from vending.loggers import logger


def _dollars(cents: int) -> str:
    return f"${cents / 100:.2f}"


# =============================================================================
# Transaction Context
# =============================================================================


@dataclass
class TransactionContext:
    """
    Context for the open transaction.

    Holds the selection and the amount deposited since the last boundary.
    """

    current_product: Optional[Product] = None
    current_balance: int = 0

    @property
    def phase(self) -> MachinePhase:
        """Get the phase implied by the selection."""
        if self.current_product is None:
            return MachinePhase.IDLE
        return MachinePhase.SELECTED

    @property
    def change_due(self) -> int:
        """Get the overpayment for the selected product."""
        if self.current_product is None:
            return 0
        return max(0, self.current_balance - self.current_product.price)

    @property
    def remaining_amount(self) -> int:
        """Get the amount still owed for the selected product."""
        if self.current_product is None:
            return 0
        return max(0, self.current_product.price - self.current_balance)

    def clear(self) -> None:
        """Return to a transaction boundary."""
        self.current_product = None
        self.current_balance = 0


# =============================================================================
# Transaction State Machine
# =============================================================================


class TransactionStateMachine(VendingMachine):
    """
    Coin-operated vending machine serving one transaction at a time.

    Owns the coin and product inventories and the lifetime sales counter.
    Coins enter the cash box as soon as they are inserted, so they can be
    paid back as change in the same transaction.

    Not thread-safe; see ``VendingService`` for a serialised wrapper.
    """

    def __init__(self, settings: Optional[MachineSettings] = None) -> None:
        """
        Initialize the machine with seeded stock.

        Args:
            settings: Initial stock levels (default: application settings).
        """
        self._settings = settings or get_settings().machine
        self._coin_inventory: Inventory[Coin] = Inventory()
        self._product_inventory: Inventory[Product] = Inventory()
        self._total_sales = 0
        self._context = TransactionContext()
        self._initialize()

    def _initialize(self) -> None:
        for coin in Coin:
            self._coin_inventory.put(coin, self._settings.initial_coin_stock)
        for product in Product:
            self._product_inventory.put(product, self._settings.initial_product_stock)

        logger.debug(
            f"Machine stocked: coins={self._coin_inventory}, "
            f"products={self._product_inventory}"
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def context(self) -> TransactionContext:
        """Get the open transaction context."""
        return self._context

    @property
    def phase(self) -> MachinePhase:
        """Get the current transaction phase."""
        return self._context.phase

    @property
    def current_product(self) -> Optional[Product]:
        """Get the selected product, if any."""
        return self._context.current_product

    @property
    def current_balance(self) -> int:
        """Get the amount deposited in the open transaction, in cents."""
        return self._context.current_balance

    @property
    def total_sales(self) -> int:
        """Get the accumulated price of collected products, in cents."""
        return self._total_sales

    @property
    def coin_inventory(self) -> Inventory[Coin]:
        """Get the cash box."""
        return self._coin_inventory

    @property
    def product_inventory(self) -> Inventory[Product]:
        """Get the product shelves."""
        return self._product_inventory

    # =========================================================================
    # Transaction Operations
    # =========================================================================

    def select_item_and_get_price(self, product: Product) -> int:
        if not self._product_inventory.has(product):
            logger.warning(f"Selection rejected, {product.display_name} is sold out")
            raise SoldOutError(product=product.name)

        previous = self._context.current_product
        if previous is not None and previous is not product:
            logger.warning(
                f"Selection changed from {previous.display_name} to {product.display_name}, "
                f"balance {_dollars(self._context.current_balance)} carried over"
            )

        self._context.current_product = product
        logger.info(f"Selected {product.display_name} for {_dollars(product.price)}")
        return product.price

    def insert_coin(self, coin: Coin) -> None:
        if not isinstance(coin, Coin):
            raise TypeError(f"Expected a Coin, got {type(coin).__name__}")

        self._context.current_balance += coin.denomination
        self._coin_inventory.add(coin)

        logger.info(
            f"Coin inserted: {coin.name}. "
            f"Balance: {_dollars(self._context.current_balance)}"
        )

    def collect_item_and_change(self) -> Bucket[Product, list[Coin]]:
        product = self._context.current_product
        if product is None:
            logger.warning("Collect requested with no product selected")
            raise NoProductSelectedError("No product selected")

        balance = self._context.current_balance
        remaining = self._context.remaining_amount
        if remaining > 0:
            logger.warning(f"{product.display_name} not fully paid, remaining {_dollars(remaining)}")
            raise NotFullPaidError(
                f"Price not full paid, remaining : {remaining}",
                remaining=remaining,
                price=product.price,
                balance=balance,
            )

        change_amount = self._context.change_due
        if not has_sufficient_change(change_amount, self._coin_inventory):
            logger.warning(f"Cannot form change of {_dollars(change_amount)}")
            raise InsufficientChangeError(
                "Not Sufficient change in Inventory",
                amount=change_amount,
            )

        self._product_inventory.deduct(product)
        self._total_sales += product.price
        change = self._dispense(change_amount)
        self._context.clear()

        logger.info(
            f"Sold {product.display_name} for {_dollars(product.price)}, "
            f"change {_dollars(change_amount)}: {[c.name for c in change]}"
        )
        return Bucket(product, change)

    def refund(self) -> list[Coin]:
        balance = self._context.current_balance
        refund = self._dispense(balance)
        self._context.clear()

        if balance:
            logger.info(f"Refunded {_dollars(balance)}: {[c.name for c in refund]}")
        return refund

    def reset(self) -> None:
        self._coin_inventory.clear()
        self._product_inventory.clear()
        self._total_sales = 0
        self._context.clear()
        logger.info("Machine reset, inventories emptied")

    def _dispense(self, amount: int) -> list[Coin]:
        """Pick coins for ``amount`` and take them out of the cash box."""
        coins = get_change(amount, self._coin_inventory)
        for coin in coins:
            self._coin_inventory.deduct(coin)
        return coins

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def stats(self) -> MachineStats:
        """Get a snapshot of sales, the open transaction and stock."""
        return MachineStats(
            total_sales=self._total_sales,
            current_balance=self._context.current_balance,
            current_product=self._context.current_product,
            phase=self._context.phase,
            coin_inventory={c.name: self._coin_inventory.get_quantity(c) for c in self._coin_inventory},
            product_inventory={p.name: self._product_inventory.get_quantity(p) for p in self._product_inventory},
        )

    def print_stats(self) -> None:
        """Log sales and inventory levels."""
        logger.info(f"Total Sales : {_dollars(self._total_sales)}")
        logger.info(f"Current Item Inventory : {self._product_inventory}")
        logger.info(f"Current Cash Inventory : {self._coin_inventory}")
