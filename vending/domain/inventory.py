"""
Inventory - Counted stock over a closed set of keys.

Used for both the coin cash box and the product shelves.
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar


K = TypeVar("K", bound=Hashable)


class Inventory(Generic[K]):
    """
    Multiset counter mapping each key to a non-negative count.

    ``add`` and ``deduct`` expect the key to be initialised first through
    ``put`` or ``clear``. Deducting from an empty slot is a caller bug,
    callers guard with ``has`` before deducting.
    """

    def __init__(self) -> None:
        self._counts: dict[K, int] = {}

    def put(self, key: K, quantity: int) -> None:
        """
        Set the count for a key.

        Args:
            key: Inventory key.
            quantity: New count, must be non-negative.
        """
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        self._counts[key] = quantity

    def add(self, key: K) -> None:
        """Increment the count for a key by one."""
        self._counts[key] = self._counts.get(key, 0) + 1

    def deduct(self, key: K) -> None:
        """Decrement the count for a key by one."""
        assert self.has(key), f"Cannot deduct {key}: none left in inventory"
        self._counts[key] -= 1

    def has(self, key: K) -> bool:
        """Check whether at least one unit of a key is in stock."""
        return self._counts.get(key, 0) > 0

    def get_quantity(self, key: K) -> int:
        """Get the count for a key, zero when unknown."""
        return self._counts.get(key, 0)

    def clear(self) -> None:
        """Zero every known key."""
        for key in self._counts:
            self._counts[key] = 0

    def copy(self) -> Inventory[K]:
        """Get an independent copy of this inventory."""
        clone: Inventory[K] = Inventory()
        clone._counts = dict(self._counts)
        return clone

    def to_dict(self) -> dict[K, int]:
        """Get a snapshot of all counts."""
        return dict(self._counts)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __iter__(self) -> Iterator[K]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __str__(self) -> str:
        items = ", ".join(
            f"{getattr(key, 'name', key)}={count}" for key, count in self._counts.items()
        )
        return f"Inventory{{{items}}}"

    def __repr__(self) -> str:
        return f"Inventory({self._counts!r})"
