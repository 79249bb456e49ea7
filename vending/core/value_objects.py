"""
Value Objects for the vending machine.

Immutable objects that represent values in the domain.
Value objects are compared by value, not by identity.

All monetary amounts are integers in cents, the value of the smallest coin.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, Iterator, Optional, TypeVar


# =============================================================================
# Catalogs
# =============================================================================


class Coin(Enum):
    """Accepted coin denominations, valued in cents."""

    PENNY = 1
    NICKLE = 5
    DIME = 10
    QUARTER = 25

    @property
    def denomination(self) -> int:
        """Get the coin value in cents."""
        return self.value

    @classmethod
    def descending(cls) -> list["Coin"]:
        """Get all coins ordered by denomination, largest first."""
        return sorted(cls, key=lambda coin: coin.denomination, reverse=True)

    @classmethod
    def from_name(cls, name: str) -> "Coin":
        """
        Look up a coin by member name, ignoring case.

        Raises:
            ValueError: If no coin has that name.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown coin: {name}") from None


class Product(Enum):
    """Products available for sale, priced in cents."""

    COKE = ("Coke", 25)
    PEPSI = ("Pepsi", 35)
    SODA = ("Soda", 45)

    def __init__(self, display_name: str, price: int) -> None:
        self.display_name = display_name
        self.price = price

    @classmethod
    def from_name(cls, name: str) -> "Product":
        """
        Look up a product by member name, ignoring case.

        Raises:
            ValueError: If no product has that name.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown product: {name}") from None


class MachinePhase(Enum):
    """Phases of a purchase transaction."""

    IDLE = auto()       # No product selected, no balance
    SELECTED = auto()   # Product chosen, accepting coins


# =============================================================================
# Result Pair
# =============================================================================


F = TypeVar("F")
S = TypeVar("S")


@dataclass(frozen=True)
class Bucket(Generic[F, S]):
    """
    Two-element result of a successful purchase.

    Unpacks positionally: ``product, change = bucket``.

    Attributes:
        first: The dispensed product.
        second: The coins returned as change.
    """

    first: F
    second: S

    def __iter__(self) -> Iterator[Any]:
        return iter((self.first, self.second))


# =============================================================================
# Diagnostics
# =============================================================================


@dataclass(frozen=True)
class MachineStats:
    """
    Point-in-time snapshot of a machine for diagnostics.

    Attributes:
        total_sales: Accumulated price of collected products, in cents.
        current_balance: Cents deposited in the open transaction.
        current_product: Selected product, if any.
        phase: Transaction phase.
        coin_inventory: Coin counts keyed by coin name.
        product_inventory: Product counts keyed by product name.
    """

    total_sales: int = 0
    current_balance: int = 0
    current_product: Optional[Product] = None
    phase: MachinePhase = MachinePhase.IDLE
    coin_inventory: dict[str, int] = field(default_factory=dict)
    product_inventory: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_sales": self.total_sales,
            "current_balance": self.current_balance,
            "current_product": self.current_product.name if self.current_product else None,
            "phase": self.phase.name.lower(),
            "coin_inventory": dict(self.coin_inventory),
            "product_inventory": dict(self.product_inventory),
        }
