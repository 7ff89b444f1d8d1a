"""
Interfaces (Protocols) for the vending machine.

Defines contracts for the coin bank and the admin gate using
Python's Protocol for structural subtyping (duck typing with type hints).
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from vending_machine.core.value_objects import BankReport


# =============================================================================
# Cash Interfaces
# =============================================================================


@runtime_checkable
class CoinBank(Protocol):
    """Protocol for the machine-owned coin reserve."""

    @property
    def denominations(self) -> tuple[int, ...]:
        """Configured denominations, largest first."""
        ...

    def total(self) -> int:
        """Total face value of the held coins."""
        ...

    def deposit(self, amounts: Mapping[int, int]) -> None:
        """Add coins of recognized denominations."""
        ...

    def withdraw(self, amounts: Mapping[int, int]) -> bool:
        """
        Remove coins, all or nothing.

        Returns:
            True if every requested count was available and removed.
        """
        ...

    def make_change(self, amount: int) -> Optional[dict[int, int]]:
        """
        Propose a disbursement for the amount without mutating holdings.

        Returns:
            Breakdown of nonzero counts, or None if none was found.
        """
        ...

    def snapshot(self) -> dict[int, int]:
        """Independent copy of the holdings."""
        ...

    def clear(self) -> None:
        """Reset every count to zero."""
        ...

    def report(self, currency: str = "RUB") -> BankReport:
        """Holdings with their total, for display."""
        ...


# =============================================================================
# Access Interfaces
# =============================================================================


@runtime_checkable
class Authorizer(Protocol):
    """Protocol for admin access checks."""

    def authorize(self, secret: str) -> bool:
        """
        Check an admin secret.

        Args:
            secret: Secret supplied by the operator.

        Returns:
            True if access is granted.
        """
        ...
