"""
Change Maker - Decomposes an amount into coins from the cash box.

Greedy largest-first selection. Greedy is exact only for canonical coin
systems such as {1, 5, 10, 25}; a catalog like {1, 10, 20, 25} can make it
report missing change when a combination exists, and would need a
coin-limited dynamic programming search instead.
"""

from vending.core.exceptions import InsufficientChangeError
from vending.core.value_objects import Coin
from vending.domain.inventory import Inventory


def get_change(amount: int, coin_inventory: Inventory[Coin]) -> list[Coin]:
    """
    Pick coins summing exactly to ``amount``.

    Works on a scratch copy of the counts, so coins already picked in this
    call are no longer available and the caller's inventory is untouched.

    Args:
        amount: Amount in cents.
        coin_inventory: Cash box to draw from.

    Returns:
        Coins in the order they were picked, largest first.

    Raises:
        ValueError: If amount is negative.
        InsufficientChangeError: If the amount cannot be formed.
    """
    if amount < 0:
        raise ValueError(f"Change amount cannot be negative: {amount}")

    change: list[Coin] = []
    available = coin_inventory.copy()
    balance = amount
    denominations = Coin.descending()

    while balance > 0:
        coin = next(
            (c for c in denominations if c.denomination <= balance and available.has(c)),
            None,
        )
        if coin is None:
            raise InsufficientChangeError(amount=amount, remaining=balance)

        change.append(coin)
        available.deduct(coin)
        balance -= coin.denomination

    return change


def has_sufficient_change(amount: int, coin_inventory: Inventory[Coin]) -> bool:
    """Check whether ``amount`` can be paid out of ``coin_inventory``."""
    try:
        get_change(amount, coin_inventory)
    except InsufficientChangeError:
        return False
    return True
