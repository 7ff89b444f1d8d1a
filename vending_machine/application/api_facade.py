"""
API Facade - Unified interface for the vending machine.

Wraps the transaction coordinator and the admin gate, returning plain
dictionaries with ``success``, ``message`` and ``data`` keys.
"""

from __future__ import annotations

from typing import Any, Optional

from vending_machine.application.authorization import AdminSession, PinAuthorizer
from vending_machine.core.interfaces import Authorizer
from vending_machine.core.value_objects import format_coins
from vending_machine.domain.coordinator import TransactionCoordinator
from vending_machine.infrastructure.settings import Settings, get_settings
from vending_machine.loggers import logger


class VendingMachineFacade:
    """
    Facade for the vending machine API.

    Customer operations are always available. Admin operations require
    an unlocked admin session and raise AuthorizationError otherwise.
    """

    def __init__(
        self,
        coordinator: TransactionCoordinator,
        authorizer: Authorizer,
    ) -> None:
        """
        Initialize the facade.

        Args:
            coordinator: Machine session to drive.
            authorizer: Check for admin access.
        """
        self._coordinator = coordinator
        self._session = AdminSession(authorizer)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "VendingMachineFacade":
        """
        Build a seeded machine from settings.

        Args:
            settings: Settings to use, the application settings if omitted.
        """
        settings = settings or get_settings()
        machine = settings.machine
        coordinator = TransactionCoordinator.create(
            machine.denominations,
            machine.bank_seed,
            machine.product_seed,
            currency=machine.currency,
        )
        logger.info(
            f"Machine ready: {len(coordinator.products())} products, "
            f"bank {coordinator.bank.total()} {coordinator.currency}"
        )
        return cls(coordinator, PinAuthorizer(settings.admin.pin))

    @property
    def coordinator(self) -> TransactionCoordinator:
        return self._coordinator

    @property
    def is_admin(self) -> bool:
        """Check if the admin session is unlocked."""
        return self._session.is_unlocked

    # =========================================================================
    # Customer Operations
    # =========================================================================

    def list_products(self) -> dict[str, Any]:
        """List all products in insertion order."""
        products = self._coordinator.products()
        return {
            "success": True,
            "message": "\n".join(str(p) for p in products),
            "data": [p.to_dict() for p in products],
        }

    def denominations(self) -> dict[str, Any]:
        """List the accepted denominations, smallest first."""
        values = sorted(self._coordinator.denominations)
        currency = self._coordinator.currency
        return {
            "success": True,
            "message": "Accepted: " + ", ".join(f"{d} {currency}" for d in values),
            "data": values,
        }

    def insert_coin(self, denomination: int, count: int) -> dict[str, Any]:
        """Insert coins into the tray."""
        accepted = self._coordinator.insert_coin(denomination, count)
        balance = self._coordinator.balance()
        return {
            "success": accepted,
            "message": f"Balance: {balance} {self._coordinator.currency}",
            "data": {"balance": balance},
        }

    def balance(self) -> dict[str, Any]:
        """Get the value of the inserted coins."""
        balance = self._coordinator.balance()
        return {
            "success": True,
            "message": f"Balance: {balance} {self._coordinator.currency}",
            "data": {"balance": balance},
        }

    def purchase(self, product_id: int) -> dict[str, Any]:
        """Buy a product with the inserted coins."""
        result = self._coordinator.purchase(product_id)
        message = result.message
        if result.success and result.change:
            message += f" Change: {format_coins(result.change, self._coordinator.currency)}"
        return {
            "success": result.success,
            "message": message,
            "data": result.to_dict(),
        }

    def cancel(self) -> dict[str, Any]:
        """Return the inserted coins."""
        returned = self._coordinator.cancel()
        if returned:
            message = f"Returned: {format_coins(returned, self._coordinator.currency)}"
        else:
            message = "Nothing to return."
        return {
            "success": True,
            "message": message,
            "data": {"returned": returned},
        }

    # =========================================================================
    # Admin Session
    # =========================================================================

    def admin_login(self, pin: str) -> dict[str, Any]:
        """Unlock admin operations."""
        if self._session.login(pin):
            return {"success": True, "message": "Admin mode."}
        return {"success": False, "message": "Access denied."}

    def admin_logout(self) -> dict[str, Any]:
        """Lock admin operations."""
        self._session.logout()
        return {"success": True, "message": "Admin mode closed."}

    # =========================================================================
    # Admin Operations
    # =========================================================================

    def add_product(self, name: str, price: int, quantity: int) -> dict[str, Any]:
        """Add a product to the catalog."""
        self._session.require()
        product = self._coordinator.add_product(name, price, quantity)
        return {
            "success": True,
            "message": "Added.",
            "data": product.to_dict(),
        }

    def restock(self, product_id: int, amount: int) -> dict[str, Any]:
        """Add units to a product."""
        self._session.require()
        ok = self._coordinator.restock(product_id, amount)
        return {"success": ok, "message": "Done." if ok else "Error."}

    def reprice(self, product_id: int, price: int) -> dict[str, Any]:
        """Change the price of a product."""
        self._session.require()
        ok = self._coordinator.reprice(product_id, price)
        return {"success": ok, "message": "Done." if ok else "Error."}

    def bank_report(self) -> dict[str, Any]:
        """Get the coin bank holdings."""
        self._session.require()
        report = self._coordinator.bank_report()
        return {
            "success": True,
            "message": str(report),
            "data": report.to_dict(),
        }

    def collect_cash(self) -> dict[str, Any]:
        """Empty the coin bank."""
        self._session.require()
        total = self._coordinator.collect_cash()
        return {
            "success": True,
            "message": f"Handed to admin: {total} {self._coordinator.currency}",
            "data": {"collected": total},
        }
