"""
Transaction Coordinator - purchase flow between the tray, the bank and the catalog.

A purchase either commits completely or leaves every piece of state as it
was. Change feasibility is checked against the bank's holdings before the
tray is deposited, and nothing is mutated until every check has passed.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Mapping, Optional

from vending_machine.core.interfaces import CoinBank
from vending_machine.core.value_objects import (
    BankReport,
    PurchaseFailure,
    PurchaseResult,
    format_coins,
)
from vending_machine.domain.catalog import Product, ProductCatalog
from vending_machine.domain.ledger import DenominatedLedger
from vending_machine.domain.tray import CoinTray
from vending_machine.loggers import logger


class TransactionCoordinator:
    """
    Vending machine session.

    Owns the customer tray and drives purchases against the bank and the
    catalog. Each instance is independent; there is no shared machine state.
    """

    def __init__(
        self,
        bank: CoinBank,
        catalog: Optional[ProductCatalog] = None,
        currency: str = "RUB",
    ) -> None:
        """
        Initialize the coordinator.

        Args:
            bank: Coin reserve used for deposits and change.
            catalog: Product catalog, empty if omitted.
            currency: Currency label for messages and reports.
        """
        self._bank = bank
        self._catalog = catalog if catalog is not None else ProductCatalog()
        self._tray = CoinTray(bank.denominations)
        self._currency = currency

    @classmethod
    def create(
        cls,
        denominations: Iterable[int],
        bank_seed: Optional[Mapping[int, int]] = None,
        products: Iterable[tuple[str, int, int]] = (),
        currency: str = "RUB",
    ) -> "TransactionCoordinator":
        """
        Build a machine from a denomination set and seed data.

        Args:
            denominations: Legal denominations.
            bank_seed: Starting coin counts for the bank.
            products: ``(name, price, quantity)`` tuples added in order.
            currency: Currency label.

        Raises:
            ConfigurationError: If any of the seed data is invalid.
        """
        coordinator = cls(DenominatedLedger(denominations, bank_seed), currency=currency)
        for name, price, quantity in products:
            coordinator.add_product(name, price, quantity)
        return coordinator

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def bank(self) -> CoinBank:
        """The machine's coin reserve."""
        return self._bank

    @property
    def tray(self) -> CoinTray:
        """The customer's inserted coins."""
        return self._tray

    @property
    def denominations(self) -> tuple[int, ...]:
        """Legal denominations, largest first."""
        return self._bank.denominations

    @property
    def currency(self) -> str:
        return self._currency

    # =========================================================================
    # Customer Operations
    # =========================================================================

    def products(self) -> list[Product]:
        """Copies of all products in insertion order."""
        return [replace(product) for product in self._catalog]

    def insert_coin(self, denomination: int, count: int) -> bool:
        """
        Put coins into the tray.

        Unknown denominations and non-positive counts are ignored.

        Returns:
            True if the coins were added to the tray.
        """
        accepted = self._tray.insert(denomination, count)
        if accepted:
            logger.debug(f"Inserted {denomination} x{count}. Balance: {self.balance()}")
        return accepted

    def balance(self) -> int:
        """Value of the coins currently in the tray."""
        return self._tray.balance()

    def cancel(self) -> dict[int, int]:
        """
        Return every inserted coin and empty the tray.

        Returns:
            Nonzero tray contents, ``{}`` if the tray was empty.
        """
        returned = self._tray.take_all()
        if returned:
            logger.info(f"Transaction cancelled. Returned: {format_coins(returned, self._currency)}")
        return returned

    def purchase(self, product_id: int) -> PurchaseResult:
        """
        Buy one unit of a product with the coins in the tray.

        Args:
            product_id: Id of the product.

        Returns:
            PurchaseResult with the change to dispense on success. On any
            failure the tray, the bank and the stock are untouched.
        """
        product = self._catalog.get(product_id)
        if product is None:
            return self._reject(PurchaseFailure.PRODUCT_NOT_FOUND, "Product not found.")

        if not product.in_stock:
            return self._reject(PurchaseFailure.OUT_OF_STOCK, "Out of stock.")

        balance = self.balance()
        if balance < product.price:
            return self._reject(
                PurchaseFailure.INSUFFICIENT_FUNDS,
                f"Insufficient funds. Need {product.price} {self._currency}.",
            )

        change_amount = balance - product.price
        change_plan = {} if change_amount == 0 else self._bank.make_change(change_amount)
        if change_plan is None:
            return self._reject(PurchaseFailure.CHANGE_UNAVAILABLE, "Cannot dispense change.")

        # Commit
        self._bank.deposit(self._tray.take_all())
        if change_plan:
            self._bank.withdraw(change_plan)
        product.take_one()

        logger.info(
            f"Sold {product.name} for {product.price} {self._currency}. "
            f"Paid: {balance}, change: {change_amount}"
        )
        return PurchaseResult.completed(product.name, change_plan)

    def _reject(self, failure: PurchaseFailure, message: str) -> PurchaseResult:
        logger.warning(f"Purchase rejected: {message}")
        return PurchaseResult.failed(failure, message)

    # =========================================================================
    # Admin Operations
    # =========================================================================

    def add_product(self, name: str, price: int, quantity: int) -> Product:
        """
        Add a product to the catalog.

        Raises:
            ConfigurationError: If the price or quantity is invalid.
        """
        product = self._catalog.add(name, price, quantity)
        logger.info(f"Product added: {product}")
        return replace(product)

    def restock(self, product_id: int, amount: int) -> bool:
        """
        Add units to a product.

        Returns:
            False if the product is unknown or the amount is not positive.
        """
        product = self._catalog.get(product_id)
        if product is None or amount <= 0:
            return False
        product.restock(amount)
        logger.info(f"Restocked {product.name} by {amount}. Now: {product.quantity}")
        return True

    def reprice(self, product_id: int, new_price: int) -> bool:
        """
        Replace the price of a product.

        Returns:
            False if the product is unknown or the price is not positive.
        """
        product = self._catalog.get(product_id)
        if product is None or new_price <= 0:
            return False
        product.reprice(new_price)
        logger.info(f"Repriced {product.name} to {new_price} {self._currency}")
        return True

    def bank_report(self) -> BankReport:
        """Current bank holdings and their total."""
        return self._bank.report(self._currency)

    def collect_cash(self) -> int:
        """
        Empty the bank.

        Returns:
            Total value that was in the bank.
        """
        total = self._bank.total()
        self._bank.clear()
        logger.info(f"Cash collected: {total} {self._currency}")
        return total
