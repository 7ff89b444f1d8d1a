"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces (Protocols)
- Value Objects
"""

from .exceptions import (
    VendingMachineError,
    ConfigurationError,
    InvalidDenominationError,
    AuthorizationError,
    CommandError,
    UnknownCommandError,
    InvalidArgumentError,
)
from .interfaces import (
    Authorizer,
    CoinBank,
)
from .value_objects import (
    BankReport,
    CoinCounts,
    PurchaseFailure,
    PurchaseResult,
    coins_value,
    format_coins,
)


__all__ = [
    # Exceptions
    "VendingMachineError",
    "ConfigurationError",
    "InvalidDenominationError",
    "AuthorizationError",
    "CommandError",
    "UnknownCommandError",
    "InvalidArgumentError",
    # Interfaces
    "Authorizer",
    "CoinBank",
    # Value Objects
    "BankReport",
    "CoinCounts",
    "PurchaseFailure",
    "PurchaseResult",
    "coins_value",
    "format_coins",
]
