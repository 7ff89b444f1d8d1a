"""
Application layer - Application services and use cases.

Contains:
- Admin authorization
- API facade
- Command handler
- Interactive console
"""

from .authorization import AdminSession, PinAuthorizer
from .api_facade import VendingMachineFacade
from .command_handler import CommandHandler, CommandResponse
from .console import VendingConsole


__all__ = [
    "AdminSession",
    "PinAuthorizer",
    "VendingMachineFacade",
    "CommandHandler",
    "CommandResponse",
    "VendingConsole",
]
