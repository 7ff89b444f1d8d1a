"""
Infrastructure layer - Configuration.

Contains:
- Settings sections and the settings singleton
"""

from .settings import (
    AdminSettings,
    LoggingSettings,
    MachineSettings,
    Settings,
    get_settings,
)


__all__ = [
    "AdminSettings",
    "LoggingSettings",
    "MachineSettings",
    "Settings",
    "get_settings",
]
