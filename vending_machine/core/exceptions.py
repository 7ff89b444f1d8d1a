"""
Custom exceptions for the vending machine.

Business failures (insufficient funds, undispensable change, unknown
product) are reported through return values. These exceptions cover the
boundaries: machine construction, command parsing and the admin gate.
"""

from typing import Any, Optional


class VendingMachineError(Exception):
    """Base exception for all vending machine errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for command responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(VendingMachineError):
    """Invalid machine configuration or seed data."""

    pass


class InvalidDenominationError(ConfigurationError):
    """A denomination is not a positive integer or is not configured."""

    def __init__(
        self,
        message: str,
        denomination: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.denomination = denomination
        if denomination is not None:
            self.details["denomination"] = denomination


# =============================================================================
# Access Errors
# =============================================================================


class AuthorizationError(VendingMachineError):
    """Admin operation attempted without a valid session."""

    pass


# =============================================================================
# Command Errors
# =============================================================================


class CommandError(VendingMachineError):
    """Base exception for command routing errors."""

    pass


class UnknownCommandError(CommandError):
    """Command name is not registered."""

    def __init__(self, message: str, command: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if command is not None:
            self.details["command"] = command


class InvalidArgumentError(CommandError):
    """Command argument is missing or malformed."""

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument
        if argument is not None:
            self.details["argument"] = argument
