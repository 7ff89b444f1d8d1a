"""
Application settings.

Provides typed configuration sections with environment variable overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping, Optional

from vending_machine import configs


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class MachineSettings:
    """Coin set and seed data for a new machine."""

    denominations: tuple[int, ...] = configs.DENOMINATIONS
    bank_seed: Mapping[int, int] = field(default_factory=lambda: dict(configs.BANK_SEED))
    product_seed: tuple[tuple[str, int, int], ...] = configs.PRODUCT_SEED
    currency: str = configs.CURRENCY


@dataclass(frozen=True)
class AdminSettings:
    """Admin gate settings."""

    pin: str = configs.ADMIN_PIN


@dataclass(frozen=True)
class LoggingSettings:
    """Logging destinations."""

    level: str = configs.LOG_LEVEL
    log_file: Optional[str] = None
    loki_url: Optional[str] = None
    loki_app: str = configs.LOKI_APP


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    machine: MachineSettings = field(default_factory=MachineSettings)
    admin: AdminSettings = field(default_factory=AdminSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from defaults overridden by environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Settings instance.
        """
        env = os.environ if environ is None else environ
        return cls(
            admin=AdminSettings(pin=env.get(configs.ENV_ADMIN_PIN, configs.ADMIN_PIN)),
            logging=LoggingSettings(
                level=env.get(configs.ENV_LOG_LEVEL, configs.LOG_LEVEL).upper(),
                log_file=env.get(configs.ENV_LOG_FILE) or None,
                loki_url=env.get(configs.ENV_LOKI_URL) or None,
            ),
        )


# =============================================================================
# Settings Singleton
# =============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    return Settings.from_env()
