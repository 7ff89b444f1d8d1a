"""
Domain layer - Business logic and domain models.

Contains:
- Coin bank and customer tray
- Product catalog
- Purchase coordination
"""

from .coins import (
    CoinCompartment,
    normalize_denominations,
)
from .ledger import DenominatedLedger
from .tray import CoinTray
from .catalog import (
    Product,
    ProductCatalog,
)
from .coordinator import TransactionCoordinator


__all__ = [
    # Coins
    "CoinCompartment",
    "normalize_denominations",
    "DenominatedLedger",
    "CoinTray",
    # Catalog
    "Product",
    "ProductCatalog",
    # Transactions
    "TransactionCoordinator",
]
