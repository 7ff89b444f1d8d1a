"""
Coin compartments - per-denomination coin counts.

Base storage shared by the machine bank and the customer tray.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from vending_machine.core.exceptions import ConfigurationError, InvalidDenominationError


def normalize_denominations(denominations: Iterable[int]) -> tuple[int, ...]:
    """
    Validate a denomination set and sort it largest first.

    Args:
        denominations: Face values accepted by the machine.

    Returns:
        Distinct denominations in descending order.

    Raises:
        InvalidDenominationError: If a value is not a positive integer.
        ConfigurationError: If the set is empty or has duplicates.
    """
    values = list(denominations)
    if not values:
        raise ConfigurationError("At least one denomination is required")

    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDenominationError(
                f"Denomination must be a positive integer: {value!r}",
                denomination=value,
            )

    if len(set(values)) != len(values):
        raise ConfigurationError(
            "Duplicate denominations",
            details={"denominations": values},
        )

    return tuple(sorted(values, reverse=True))


class CoinCompartment:
    """
    Count of coins per configured denomination.

    Every configured denomination has an entry, and no entry is negative.
    The total value is always recomputed from the counts.
    """

    def __init__(
        self,
        denominations: Iterable[int],
        initial: Optional[Mapping[int, int]] = None,
    ) -> None:
        """
        Initialize the compartment.

        Args:
            denominations: Face values this compartment holds.
            initial: Optional starting counts per denomination.

        Raises:
            ConfigurationError: If the denominations or starting counts are invalid.
        """
        self._denominations = normalize_denominations(denominations)
        self._coins: dict[int, int] = {d: 0 for d in self._denominations}

        for denomination, count in (initial or {}).items():
            if denomination not in self._coins:
                raise InvalidDenominationError(
                    f"Unknown denomination in seed: {denomination!r}",
                    denomination=denomination,
                )
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ConfigurationError(
                    f"Seed count must be a non-negative integer: {count!r}",
                    details={"denomination": denomination, "count": count},
                )
            self._coins[denomination] = count

    @property
    def denominations(self) -> tuple[int, ...]:
        """Configured denominations, largest first."""
        return self._denominations

    def accepts(self, denomination: int) -> bool:
        """Check if a denomination is configured."""
        return denomination in self._coins

    def count(self, denomination: int) -> int:
        """Number of coins held for a denomination (0 if not configured)."""
        return self._coins.get(denomination, 0)

    def total(self) -> int:
        """Total face value of the held coins."""
        return sum(d * c for d, c in self._coins.items())

    def snapshot(self) -> dict[int, int]:
        """Independent copy of the counts, zero entries included."""
        return dict(self._coins)

    def nonzero(self) -> dict[int, int]:
        """Independent copy of the counts, zero entries pruned."""
        return {d: c for d, c in self._coins.items() if c > 0}

    def is_empty(self) -> bool:
        """Check if no coins are held."""
        return not any(self._coins.values())

    def clear(self) -> None:
        """Reset every count to zero."""
        for denomination in self._denominations:
            self._coins[denomination] = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._coins!r})"
