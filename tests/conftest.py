"""
Pytest fixtures for vending machine tests.
"""

import pytest

from vending_machine.application.api_facade import VendingMachineFacade
from vending_machine.application.command_handler import CommandHandler
from vending_machine.domain.coordinator import TransactionCoordinator
from vending_machine.domain.ledger import DenominatedLedger
from vending_machine.infrastructure.settings import Settings


DENOMINATIONS = (1, 2, 5, 10, 50, 100)


@pytest.fixture
def denominations():
    """Default coin set."""
    return DENOMINATIONS


@pytest.fixture
def ledger():
    """Bank holding only tens and fives."""
    return DenominatedLedger(DENOMINATIONS, {10: 5, 5: 5})


@pytest.fixture
def coordinator():
    """Machine with a small bank and one product priced 15."""
    return TransactionCoordinator.create(
        DENOMINATIONS,
        {10: 5, 5: 5},
        [("Gum", 15, 3)],
    )


@pytest.fixture
def facade():
    """Machine seeded with the factory defaults."""
    return VendingMachineFacade.from_settings(Settings())


@pytest.fixture
def handler(facade):
    """Command handler bound to the seeded machine."""
    return CommandHandler(facade)
