"""
Admin authorization.

The coordinator performs no access checks; admin operations are gated here.
"""

from __future__ import annotations

import hmac

from vending_machine.core.exceptions import AuthorizationError
from vending_machine.core.interfaces import Authorizer
from vending_machine.loggers import logger


class PinAuthorizer:
    """Grants access to holders of a fixed PIN."""

    def __init__(self, pin: str) -> None:
        self._pin = pin

    def authorize(self, secret: str) -> bool:
        """Compare the secret with the PIN in constant time."""
        return hmac.compare_digest(secret.encode("utf-8"), self._pin.encode("utf-8"))


class AdminSession:
    """
    Admin session state.

    Admin operations may only run between a successful ``login`` and
    the next ``logout``.
    """

    def __init__(self, authorizer: Authorizer) -> None:
        """
        Initialize a locked session.

        Args:
            authorizer: Check used to unlock the session.
        """
        self._authorizer = authorizer
        self._unlocked = False

    @property
    def is_unlocked(self) -> bool:
        """Check if admin operations are allowed."""
        return self._unlocked

    def login(self, secret: str) -> bool:
        """
        Unlock the session.

        Returns:
            True if the secret was accepted.
        """
        self._unlocked = self._authorizer.authorize(secret)
        if self._unlocked:
            logger.info("Admin session opened")
        else:
            logger.warning("Admin access denied")
        return self._unlocked

    def logout(self) -> None:
        """Lock the session."""
        if self._unlocked:
            logger.info("Admin session closed")
        self._unlocked = False

    def require(self) -> None:
        """
        Ensure the session is unlocked.

        Raises:
            AuthorizationError: If the session is locked.
        """
        if not self._unlocked:
            raise AuthorizationError("Admin access required")
