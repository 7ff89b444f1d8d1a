"""
Unit tests for the transaction coordinator.

Covers the purchase flow, its all-or-nothing failure paths, the tray
operations and the admin operations.
"""

import pytest

from vending_machine.core.exceptions import ConfigurationError
from vending_machine.core.interfaces import CoinBank
from vending_machine.core.value_objects import PurchaseFailure
from vending_machine.domain.coordinator import TransactionCoordinator


def machine_state(coordinator, product_id=1):
    """Capture bank, tray and stock for before/after comparisons."""
    product = next((p for p in coordinator.products() if p.id == product_id), None)
    return (
        coordinator.bank.snapshot(),
        coordinator.tray.snapshot(),
        product.quantity if product else None,
    )


# =============================================================================
# Purchase Commit Tests
# =============================================================================


class TestPurchaseCommit:
    """Tests for successful purchases."""

    def test_purchase_with_change(self, coordinator):
        """Test paying 20 for a 15 item returns one five."""
        coordinator.insert_coin(10, 2)
        assert coordinator.balance() == 20

        result = coordinator.purchase(1)

        assert result.success is True
        assert result.change == {5: 1}
        assert result.product_name == "Gum"
        assert coordinator.bank.snapshot() == {100: 0, 50: 0, 10: 7, 5: 4, 2: 0, 1: 0}
        assert coordinator.tray.is_empty()
        assert coordinator.balance() == 0
        assert coordinator.products()[0].quantity == 2

    def test_result_unpacks_to_triple(self, coordinator):
        """Test the result can be unpacked as (success, message, change)."""
        coordinator.insert_coin(10, 2)
        success, message, change = coordinator.purchase(1)
        assert success is True
        assert message == "You received: Gum."
        assert change == {5: 1}

    def test_exact_payment(self, coordinator):
        """Test exact payment needs no change and banks the tray."""
        coordinator.insert_coin(10, 1)
        coordinator.insert_coin(5, 1)

        result = coordinator.purchase(1)

        assert result.success is True
        assert result.change == {}
        assert result.change_amount == 0
        assert coordinator.bank.count(10) == 6
        assert coordinator.bank.count(5) == 6

    def test_exact_payment_with_empty_bank(self, denominations):
        """Test exact payment succeeds even when the bank is empty."""
        machine = TransactionCoordinator.create(denominations, {}, [("Tea", 7, 1)])
        machine.insert_coin(5, 1)
        machine.insert_coin(2, 1)

        assert machine.purchase(1).success is True
        assert machine.bank.total() == 7

    def test_bank_total_grows_by_price(self, coordinator):
        """Test the bank keeps exactly the price after a sale."""
        before = coordinator.bank.total()
        coordinator.insert_coin(50, 1)

        result = coordinator.purchase(1)

        assert result.success is True
        assert result.change == {10: 3, 5: 1}
        assert coordinator.bank.total() == before + 15


# =============================================================================
# Purchase Failure Tests
# =============================================================================


class TestPurchaseFailures:
    """Tests that every rejected purchase leaves the machine untouched."""

    def test_product_not_found(self, coordinator):
        """Test an unknown product id is rejected."""
        coordinator.insert_coin(10, 2)
        before = machine_state(coordinator)

        result = coordinator.purchase(99)

        assert result.success is False
        assert result.failure == PurchaseFailure.PRODUCT_NOT_FOUND
        assert result.change is None
        assert machine_state(coordinator) == before

    def test_out_of_stock(self, denominations):
        """Test a product with no units is rejected."""
        machine = TransactionCoordinator.create(denominations, {5: 5}, [("Gum", 15, 0)])
        machine.insert_coin(10, 2)
        before = machine_state(machine)

        result = machine.purchase(1)

        assert result.failure == PurchaseFailure.OUT_OF_STOCK
        assert machine_state(machine) == before

    def test_insufficient_funds(self, coordinator):
        """Test a balance below the price is rejected with the price."""
        coordinator.insert_coin(10, 1)
        before = machine_state(coordinator)

        result = coordinator.purchase(1)

        assert result.failure == PurchaseFailure.INSUFFICIENT_FUNDS
        assert "15" in result.message
        assert machine_state(coordinator) == before

    def test_cannot_dispense_change(self, denominations):
        """Test change of 3 without ones or twos is rejected."""
        machine = TransactionCoordinator.create(denominations, {10: 5}, [("Gum", 17, 3)])
        machine.insert_coin(10, 2)
        before = machine_state(machine)

        result = machine.purchase(1)

        assert result.success is False
        assert result.failure == PurchaseFailure.CHANGE_UNAVAILABLE
        assert result.message == "Cannot dispense change."
        assert machine_state(machine) == before
        assert machine.balance() == 20

    def test_change_ignores_inserted_coins(self, denominations):
        """Test change comes from the bank before the tray is deposited."""
        machine = TransactionCoordinator.create(denominations, {}, [("Gum", 10, 3)])
        machine.insert_coin(10, 1)
        machine.insert_coin(5, 1)

        result = machine.purchase(1)

        assert result.failure == PurchaseFailure.CHANGE_UNAVAILABLE
        assert machine.tray.snapshot()[5] == 1

    def test_greedy_limitation_reported_as_unavailable(self):
        """Test a plan greedy cannot find is reported as unavailable."""
        machine = TransactionCoordinator.create((1, 3, 4), {4: 1, 3: 2}, [("Gum", 2, 1)])
        machine.insert_coin(4, 2)

        assert machine.purchase(1).failure == PurchaseFailure.CHANGE_UNAVAILABLE

    def test_retry_after_failure(self, coordinator):
        """Test coins left in the tray can complete a later purchase."""
        coordinator.insert_coin(10, 1)
        assert coordinator.purchase(1).success is False
        coordinator.insert_coin(5, 1)
        assert coordinator.purchase(1).success is True


# =============================================================================
# Tray Operation Tests
# =============================================================================


class TestTrayOperations:
    """Tests for inserting coins, balance and cancel."""

    def test_insert_does_not_touch_bank(self, coordinator):
        """Test inserted coins stay out of the bank."""
        before = coordinator.bank.snapshot()
        assert coordinator.insert_coin(100, 1) is True
        assert coordinator.bank.snapshot() == before

    def test_insert_invalid_is_noop(self, coordinator):
        """Test invalid coins leave the balance unchanged."""
        assert coordinator.insert_coin(3, 1) is False
        assert coordinator.insert_coin(10, 0) is False
        assert coordinator.balance() == 0

    def test_cancel_returns_coins_once(self, coordinator):
        """Test cancel returns the coins and a second cancel returns nothing."""
        coordinator.insert_coin(10, 2)
        coordinator.insert_coin(1, 1)
        assert coordinator.cancel() == {10: 2, 1: 1}
        assert coordinator.cancel() == {}
        assert coordinator.balance() == 0

    def test_cancel_empty_tray(self, coordinator):
        """Test cancel on an empty tray changes nothing."""
        before = machine_state(coordinator)
        assert coordinator.cancel() == {}
        assert machine_state(coordinator) == before


# =============================================================================
# Admin Operation Tests
# =============================================================================


class TestAdminOperations:
    """Tests for catalog and cash administration."""

    def test_add_product_sequential_ids(self, coordinator):
        """Test new products get the next id in order."""
        product = coordinator.add_product("Soda", 30, 4)
        assert product.id == 2
        assert [p.name for p in coordinator.products()] == ["Gum", "Soda"]

    def test_add_product_invalid_price_raises(self, coordinator):
        """Test a non-positive price is rejected."""
        with pytest.raises(ConfigurationError):
            coordinator.add_product("Free", 0, 1)

    def test_products_are_copies(self, coordinator):
        """Test the product listing cannot alter the catalog."""
        coordinator.products()[0].quantity = 100
        assert coordinator.products()[0].quantity == 3

    def test_restock(self, coordinator):
        """Test restocking adds units."""
        assert coordinator.restock(1, 5) is True
        assert coordinator.products()[0].quantity == 8

    @pytest.mark.parametrize("product_id,amount", [(99, 5), (1, 0), (1, -2)])
    def test_restock_rejected(self, coordinator, product_id, amount):
        """Test restock fails for unknown ids and non-positive amounts."""
        assert coordinator.restock(product_id, amount) is False
        assert coordinator.products()[0].quantity == 3

    def test_reprice(self, coordinator):
        """Test repricing replaces the price."""
        assert coordinator.reprice(1, 20) is True
        assert coordinator.products()[0].price == 20

    @pytest.mark.parametrize("product_id,price", [(99, 20), (1, 0), (1, -1)])
    def test_reprice_rejected(self, coordinator, product_id, price):
        """Test reprice fails for unknown ids and non-positive prices."""
        assert coordinator.reprice(product_id, price) is False
        assert coordinator.products()[0].price == 15

    def test_bank_report(self, coordinator):
        """Test the report reflects the bank."""
        report = coordinator.bank_report()
        assert report.total == 75
        assert report.holdings[10] == 5

    def test_collect_cash(self, coordinator):
        """Test collecting returns the total and empties the bank."""
        assert coordinator.collect_cash() == 75
        assert coordinator.bank.total() == 0
        assert coordinator.collect_cash() == 0


# =============================================================================
# Construction Tests
# =============================================================================


class TestConstruction:
    """Tests for building machines."""

    def test_instances_are_independent(self, denominations):
        """Test two machines share no state."""
        first = TransactionCoordinator.create(denominations, {5: 1}, [("Gum", 5, 1)])
        second = TransactionCoordinator.create(denominations, {5: 1}, [("Gum", 5, 1)])

        first.insert_coin(5, 1)
        first.purchase(1)

        assert second.bank.count(5) == 1
        assert second.products()[0].quantity == 1
        assert second.balance() == 0

    def test_invalid_seed_raises(self, denominations):
        """Test bad seed data fails at construction."""
        with pytest.raises(ConfigurationError):
            TransactionCoordinator.create(denominations, {3: 1})

    def test_built_around_coin_bank(self, ledger):
        """Test a coordinator runs on any CoinBank and reports through it."""
        assert isinstance(ledger, CoinBank)
        coordinator = TransactionCoordinator(ledger)
        coordinator.add_product("Gum", 15, 1)

        coordinator.insert_coin(10, 2)
        assert coordinator.purchase(1).change == {5: 1}

        report = coordinator.bank_report()
        assert report.total == ledger.total() == 90
        assert str(report) == (
            "100 RUB x0, 50 RUB x0, 10 RUB x7, 5 RUB x4, 2 RUB x0, 1 RUB x0 = 90 RUB"
        )
