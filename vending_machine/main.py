"""
Vending Machine - Main entry point.

Builds a seeded machine from the environment settings and runs the
interactive console.
"""

from vending_machine.application.api_facade import VendingMachineFacade
from vending_machine.application.command_handler import CommandHandler
from vending_machine.application.console import VendingConsole
from vending_machine.infrastructure.settings import get_settings
from vending_machine.loggers import logger


def main() -> None:
    """Run the vending machine console."""
    settings = get_settings()
    facade = VendingMachineFacade.from_settings(settings)
    console = VendingConsole(CommandHandler(facade))

    try:
        console.run()
    except KeyboardInterrupt:
        logger.info("Application stopped by user")


if __name__ == "__main__":
    main()
