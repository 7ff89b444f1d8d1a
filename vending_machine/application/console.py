"""
Interactive text console for the vending machine.

Menu choices are translated into commands for the command handler.
Numeric input is validated here; a non-numeric entry returns to the menu
without reaching the machine.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from vending_machine.application.command_handler import CommandHandler


MAIN_MENU = (
    "1. List products",
    "2. Insert coins",
    "3. Buy product",
    "4. Cancel and return coins",
    "5. Balance",
    "6. Admin mode",
    "0. Exit",
)

ADMIN_MENU = (
    "1. Add product",
    "2. Restock product",
    "3. Change price",
    "4. Coin bank",
    "5. Collect cash",
    "0. Exit",
)


class VendingConsole:
    """Customer menu with a PIN-gated admin submenu."""

    def __init__(
        self,
        handler: CommandHandler,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        """
        Initialize the console.

        Args:
            handler: Command handler bound to a machine facade.
            input_func: Reads a line after showing a prompt.
            output_func: Writes a line.
        """
        self._handler = handler
        self._input = input_func
        self._output = output_func

    def run(self) -> None:
        """Run the main menu until the user exits or input ends."""
        actions: dict[str, Callable[[], None]] = {
            "1": self._show_products,
            "2": self._insert_coins,
            "3": self._buy,
            "4": self._cancel,
            "5": self._balance,
            "6": self._admin,
        }
        try:
            while True:
                self._output("")
                for line in MAIN_MENU:
                    self._output(line)
                choice = self._input("Choice: ").strip()
                self._output("")
                if choice == "0":
                    break
                action = actions.get(choice)
                if action:
                    action()
        except EOFError:
            pass

    # =========================================================================
    # Helpers
    # =========================================================================

    def _command(self, command: str, **data: Any) -> dict[str, Any]:
        response = self._handler.dispatch(command, **data)
        if response.get("message"):
            self._output(response["message"])
        return response

    def _read_int(self, prompt: str) -> Optional[int]:
        raw = self._input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    # =========================================================================
    # Customer Menu
    # =========================================================================

    def _show_products(self) -> None:
        self._command("list_products")

    def _insert_coins(self) -> None:
        self._command("denominations")
        denomination = self._read_int("Denomination: ")
        if denomination is None:
            return
        count = self._read_int("Count: ")
        if count is None:
            return
        self._command("insert_coin", denomination=denomination, count=count)

    def _buy(self) -> None:
        self._show_products()
        product_id = self._read_int("Product id: ")
        if product_id is None:
            return
        self._command("purchase", product_id=product_id)

    def _cancel(self) -> None:
        self._command("cancel")

    def _balance(self) -> None:
        self._command("balance")

    # =========================================================================
    # Admin Menu
    # =========================================================================

    def _admin(self) -> None:
        pin = self._input("PIN: ")
        if not self._command("admin_login", pin=pin)["success"]:
            return

        actions: dict[str, Callable[[], None]] = {
            "1": self._add_product,
            "2": self._restock,
            "3": self._reprice,
            "4": lambda: self._command("bank_report"),
            "5": lambda: self._command("collect_cash"),
        }
        try:
            while True:
                self._output("")
                for line in ADMIN_MENU:
                    self._output(line)
                choice = self._input("Choice: ").strip()
                if choice == "0":
                    break
                action = actions.get(choice)
                if action:
                    action()
        finally:
            self._handler.dispatch("admin_logout")

    def _add_product(self) -> None:
        name = self._input("Name: ").strip()
        price = self._read_int("Price: ")
        if price is None:
            return
        quantity = self._read_int("Quantity: ")
        if quantity is None:
            return
        self._command("add_product", name=name, price=price, quantity=quantity)

    def _restock(self) -> None:
        self._show_products()
        product_id = self._read_int("Id: ")
        if product_id is None:
            return
        amount = self._read_int("Units to add: ")
        if amount is None:
            return
        self._command("restock", product_id=product_id, amount=amount)

    def _reprice(self) -> None:
        self._show_products()
        product_id = self._read_int("Id: ")
        if product_id is None:
            return
        price = self._read_int("New price: ")
        if price is None:
            return
        self._command("reprice", product_id=product_id, price=price)
