"""
Coin Tray - coins inserted by the customer but not yet owned by the machine.
"""

from __future__ import annotations

from vending_machine.domain.coins import CoinCompartment


class CoinTray(CoinCompartment):
    """Customer-facing holding area for inserted coins."""

    def insert(self, denomination: int, count: int) -> bool:
        """
        Add coins to the tray.

        Args:
            denomination: Face value of the coins.
            count: Number of coins.

        Returns:
            True if the coins were accepted. Unknown denominations and
            non-positive counts are ignored.
        """
        if not self.accepts(denomination) or count <= 0:
            return False
        self._coins[denomination] += count
        return True

    def balance(self) -> int:
        """Total value of the inserted coins."""
        return self.total()

    def take_all(self) -> dict[int, int]:
        """Empty the tray and return what it held (nonzero entries only)."""
        held = self.nonzero()
        self.clear()
        return held
