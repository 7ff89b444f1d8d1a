"""
Value Objects for the vending machine.

Immutable objects that represent results and reports in the domain.
Coin mappings handed out by these objects are copies, never views of
ledger or tray state.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator, Mapping, Optional


CoinCounts = dict[int, int]


def format_coins(coins: Mapping[int, int], currency: str = "RUB") -> str:
    """
    Render a coin mapping in descending denomination order.

    Example: ``{5: 1, 10: 2}`` becomes ``"10 RUB x2, 5 RUB x1"``.

    Args:
        coins: Mapping of denomination to count.
        currency: Currency label appended to each denomination.

    Returns:
        Comma separated description, empty for an empty mapping.
    """
    return ", ".join(
        f"{denomination} {currency} x{count}"
        for denomination, count in sorted(coins.items(), reverse=True)
    )


def coins_value(coins: Mapping[int, int]) -> int:
    """Total face value of a coin mapping."""
    return sum(denomination * count for denomination, count in coins.items())


# =============================================================================
# Enums
# =============================================================================


class PurchaseFailure(Enum):
    """Reason a purchase was rejected."""

    PRODUCT_NOT_FOUND = auto()
    OUT_OF_STOCK = auto()
    INSUFFICIENT_FUNDS = auto()
    CHANGE_UNAVAILABLE = auto()


# =============================================================================
# Purchase Result Value Object
# =============================================================================


@dataclass(frozen=True)
class PurchaseResult:
    """
    Result of a purchase attempt.

    Unpacks to the ``(success, message, change)`` triple so callers can
    treat it as a plain tuple.

    Attributes:
        success: Whether the purchase was committed.
        message: Human-readable outcome.
        change: Coins to dispense, ``None`` when the purchase failed.
        product_name: Name of the dispensed product.
        failure: Reason for a rejected purchase.
    """

    success: bool
    message: str = ""
    change: Optional[CoinCounts] = None
    product_name: Optional[str] = None
    failure: Optional[PurchaseFailure] = None

    @classmethod
    def completed(cls, product_name: str, change: Mapping[int, int]) -> "PurchaseResult":
        """Create a result for a committed purchase."""
        return cls(
            success=True,
            message=f"You received: {product_name}.",
            change=dict(change),
            product_name=product_name,
        )

    @classmethod
    def failed(cls, failure: PurchaseFailure, message: str) -> "PurchaseResult":
        """Create a failed result."""
        return cls(success=False, message=message, failure=failure)

    @property
    def change_amount(self) -> int:
        """Total value of the dispensed change."""
        return coins_value(self.change) if self.change else 0

    def __iter__(self) -> Iterator[Any]:
        return iter((self.success, self.message, self.change))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for command responses."""
        result: dict[str, Any] = {
            "success": self.success,
            "message": self.message,
        }
        if self.change is not None:
            result["change"] = dict(self.change)
        if self.product_name:
            result["product"] = self.product_name
        if self.failure:
            result["failure"] = self.failure.name.lower()
        return result


# =============================================================================
# Bank Report Value Object
# =============================================================================


@dataclass(frozen=True)
class BankReport:
    """
    Snapshot of the coin bank.

    Attributes:
        holdings: Count per denomination, zero entries included.
        total: Total face value of the holdings.
        currency: Currency label for rendering.
    """

    holdings: CoinCounts = field(default_factory=dict)
    total: int = 0
    currency: str = "RUB"

    def __str__(self) -> str:
        """Render as ``"100 RUB x5, ..., 1 RUB x20 = 1360 RUB"``."""
        return f"{format_coins(self.holdings, self.currency)} = {self.total} {self.currency}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "holdings": dict(self.holdings),
            "total": self.total,
            "currency": self.currency,
        }
