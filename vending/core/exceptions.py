"""
Custom exceptions for the vending machine.

Provides a hierarchy of typed exceptions for the failures a purchase
transaction can surface to its caller.
"""

from typing import Any, Optional


class VendingMachineError(Exception):
    """Base exception for all vending machine errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for host responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Transaction Errors
# =============================================================================


class TransactionError(VendingMachineError):
    """Base exception for purchase transaction errors."""

    pass


class SoldOutError(TransactionError):
    """Selected product has no units left."""

    def __init__(
        self,
        message: str = "Sold Out, Please buy another item",
        product: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.product = product
        if product:
            self.details["product"] = product


class NotFullPaidError(TransactionError):
    """Current balance does not cover the selected product's price."""

    def __init__(
        self,
        message: str,
        remaining: int = 0,
        price: int = 0,
        balance: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.remaining = remaining
        self.details["remaining"] = remaining
        self.details["price"] = price
        self.details["balance"] = balance


class InsufficientChangeError(TransactionError):
    """Coin inventory cannot form the required amount exactly."""

    def __init__(
        self,
        message: str = "Not Sufficient Change, Please try another product",
        amount: int = 0,
        remaining: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.amount = amount
        self.details["amount"] = amount
        self.details["remaining"] = remaining


class NoProductSelectedError(TransactionError):
    """Collect was requested before any product was selected."""

    pass
