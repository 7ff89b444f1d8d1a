"""
Denominated Ledger - the machine-owned coin bank.

Tracks coin counts per denomination, validates deposits and withdrawals
against those counts and proposes change from the coins on hand.
"""

from __future__ import annotations

from typing import Mapping, Optional

from vending_machine.core.value_objects import BankReport
from vending_machine.domain.coins import CoinCompartment
from vending_machine.loggers import logger


class DenominatedLedger(CoinCompartment):
    """
    Coin reserve of the machine.

    Change is computed greedily: largest denomination first, as many coins
    as fit and are available. The greedy pass can miss a plan that a full
    search would find (e.g. 6 from ``{4: 1, 3: 2}``); callers must read
    ``None`` as "no greedy plan", not "no plan exists".
    """

    def deposit(self, amounts: Mapping[int, int]) -> None:
        """
        Add coins to the ledger.

        Unrecognized denominations and non-positive counts are ignored.

        Args:
            amounts: Count per denomination to add.
        """
        for denomination, count in amounts.items():
            if not self.accepts(denomination) or count <= 0:
                if count:
                    logger.debug(f"Deposit ignored: {denomination} x{count}")
                continue
            self._coins[denomination] += count

    def withdraw(self, amounts: Mapping[int, int]) -> bool:
        """
        Remove coins from the ledger, all or nothing.

        Args:
            amounts: Count per denomination to remove.

        Returns:
            True if every requested count was held and has been removed.
            False leaves the ledger unchanged.
        """
        for denomination, count in amounts.items():
            if count < 0 or self._coins.get(denomination, 0) < count:
                logger.debug(
                    f"Withdraw rejected: {denomination} x{count}, "
                    f"held {self._coins.get(denomination, 0)}"
                )
                return False

        for denomination, count in amounts.items():
            if count:
                self._coins[denomination] -= count
        return True

    def make_change(self, amount: int) -> Optional[dict[int, int]]:
        """
        Propose coins for an amount without touching the holdings.

        Args:
            amount: Amount to disburse.

        Returns:
            Count per denomination (nonzero entries only) summing to the
            amount, ``{}`` for zero, or None if the greedy pass fails.
        """
        if amount < 0:
            return None

        plan: dict[int, int] = {}
        remaining = amount

        for denomination in self._denominations:
            use = min(remaining // denomination, self._coins[denomination])
            if use > 0:
                plan[denomination] = use
                remaining -= use * denomination

        if remaining != 0:
            logger.debug(f"No change plan for {amount}: {remaining} left over")
            return None

        return plan

    def report(self, currency: str = "RUB") -> BankReport:
        """Build a report of the current holdings."""
        return BankReport(holdings=self.snapshot(), total=self.total(), currency=currency)
