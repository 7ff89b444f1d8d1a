"""
Configuration constants for the vending machine.

This module provides the factory defaults for the coin set, the seed
bank and catalog, the admin gate and logging.
"""

from typing import Final


# =============================================================================
# Currency Configuration
# =============================================================================

CURRENCY: Final[str] = "RUB"

DENOMINATIONS: Final[tuple[int, ...]] = (1, 2, 5, 10, 50, 100)


# =============================================================================
# Seed Data
# =============================================================================

BANK_SEED: Final[dict[int, int]] = {
    1: 20,
    2: 20,
    5: 20,
    10: 20,
    50: 10,
    100: 5,
}

# (name, price, quantity)
PRODUCT_SEED: Final[tuple[tuple[str, int, int], ...]] = (
    ("Water", 45, 10),
    ("Juice", 60, 8),
    ("Chocolate", 75, 5),
    ("Chips", 50, 6),
)


# =============================================================================
# Admin Configuration
# =============================================================================

ADMIN_PIN: Final[str] = "1234"


# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL: Final[str] = "INFO"
LOKI_APP: Final[str] = "vending_machine"


# =============================================================================
# Environment Variables
# =============================================================================

ENV_ADMIN_PIN: Final[str] = "VENDING_ADMIN_PIN"
ENV_LOG_LEVEL: Final[str] = "VENDING_LOG_LEVEL"
ENV_LOG_FILE: Final[str] = "VENDING_LOG_FILE"
ENV_LOKI_URL: Final[str] = "VENDING_LOKI_URL"
