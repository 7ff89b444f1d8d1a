"""
Command Handler - Routes named commands to facade methods.

Provides command routing with argument validation and error handling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from vending_machine.core.exceptions import (
    InvalidArgumentError,
    UnknownCommandError,
    VendingMachineError,
)
from vending_machine.loggers import logger


# Type alias for command handlers
CommandHandlerFunc = Callable[..., dict[str, Any]]


@dataclass
class CommandResponse:
    """
    Standardized response for command execution.

    Attributes:
        command_id: The ID of the executed command.
        success: Whether the command succeeded.
        message: Human-readable message.
        data: Optional response data.
    """

    command_id: Optional[int] = None
    success: bool = False
    message: Optional[str] = None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the response to a dictionary."""
        return {
            "command_id": self.command_id,
            "success": self.success,
            "message": self.message,
            "data": self.data,
        }


@dataclass
class CommandDefinition:
    """
    Definition of a command.

    Attributes:
        name: Command name.
        handler: Handler function.
        required_args: Argument names mapped to the type they are coerced to.
        description: Human-readable description.
    """

    name: str
    handler: CommandHandlerFunc
    required_args: dict[str, type] = field(default_factory=dict)
    description: str = ""


class CommandHandler:
    """
    Routes commands to their appropriate handlers.

    Commands are dictionaries of the form
    ``{"command": name, "command_id": id, "data": {arg: value}}``.
    """

    def __init__(self, api: Any) -> None:
        """
        Initialize the command handler.

        Args:
            api: The VendingMachineFacade instance.
        """
        self._api = api
        self._commands: dict[str, CommandDefinition] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        """Register all default command handlers."""
        # Customer commands
        self.register("list_products", self._api.list_products, {}, "List products")
        self.register("denominations", self._api.denominations, {}, "List accepted coins")
        self.register(
            "insert_coin",
            self._api.insert_coin,
            {"denomination": int, "count": int},
            "Insert coins",
        )
        self.register("balance", self._api.balance, {}, "Show inserted amount")
        self.register(
            "purchase",
            self._api.purchase,
            {"product_id": int},
            "Buy a product",
        )
        self.register("cancel", self._api.cancel, {}, "Return inserted coins")

        # Admin session
        self.register("admin_login", self._api.admin_login, {"pin": str}, "Enter admin mode")
        self.register("admin_logout", self._api.admin_logout, {}, "Leave admin mode")

        # Admin commands
        self.register(
            "add_product",
            self._api.add_product,
            {"name": str, "price": int, "quantity": int},
            "Add a product",
        )
        self.register(
            "restock",
            self._api.restock,
            {"product_id": int, "amount": int},
            "Restock a product",
        )
        self.register(
            "reprice",
            self._api.reprice,
            {"product_id": int, "price": int},
            "Change a product price",
        )
        self.register("bank_report", self._api.bank_report, {}, "Show coin bank")
        self.register("collect_cash", self._api.collect_cash, {}, "Empty coin bank")

    def register(
        self,
        command_name: str,
        handler: CommandHandlerFunc,
        required_args: dict[str, type],
        description: str = "",
    ) -> None:
        """
        Register a command handler.

        Args:
            command_name: The name of the command.
            handler: The handler function.
            required_args: Argument names mapped to their types.
            description: Human-readable description.
        """
        self._commands[command_name] = CommandDefinition(
            name=command_name,
            handler=handler,
            required_args=required_args,
            description=description,
        )

    def get_available_commands(self) -> list[dict[str, Any]]:
        """Get list of available commands with their descriptions."""
        return [
            {
                "name": cmd.name,
                "required_args": list(cmd.required_args),
                "description": cmd.description,
            }
            for cmd in self._commands.values()
        ]

    def _parse_args(
        self,
        definition: CommandDefinition,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Extract and coerce the command arguments.

        Raises:
            InvalidArgumentError: If an argument is missing or malformed.
        """
        kwargs: dict[str, Any] = {}
        for arg, arg_type in definition.required_args.items():
            value = data.get(arg)
            if value is None:
                raise InvalidArgumentError(f"Missing required argument: {arg}", argument=arg)
            try:
                kwargs[arg] = self._coerce(value, arg_type)
            except (TypeError, ValueError):
                raise InvalidArgumentError(
                    f"Invalid value for {arg}: {value!r}",
                    argument=arg,
                ) from None
        return kwargs

    @staticmethod
    def _coerce(value: Any, arg_type: type) -> Any:
        """
        Convert a raw argument to its declared type.

        Integers are taken as-is or parsed from strings; floats and
        booleans are rejected instead of truncated.

        Raises:
            TypeError: If the value has an unsupported type.
            ValueError: If a string does not parse.
        """
        if arg_type is int:
            if isinstance(value, bool):
                raise TypeError(f"Boolean is not an integer: {value!r}")
            if isinstance(value, int):
                return value
            if isinstance(value, str):
                return int(value.strip())
            raise TypeError(f"Expected an integer: {value!r}")
        return arg_type(value.strip() if isinstance(value, str) else value)

    def dispatch(self, command: str, **data: Any) -> dict[str, Any]:
        """Execute a command by name with keyword arguments."""
        return self.execute({"command": command, "data": data})

    def execute(self, command_data: dict[str, Any]) -> dict[str, Any]:
        """
        Execute a command based on command data.

        Args:
            command_data: Dictionary containing 'command', 'command_id', and 'data'.

        Returns:
            Response dictionary with execution result.
        """
        command = command_data.get("command")
        command_id = command_data.get("command_id")
        data = command_data.get("data", {}) or {}

        response = CommandResponse(command_id=command_id)

        try:
            definition = self._commands.get(command)
            if definition is None:
                raise UnknownCommandError(f"Unknown command: {command}", command=command)

            kwargs = self._parse_args(definition, data)
            result = definition.handler(**kwargs)

            if isinstance(result, dict):
                response.success = result.get("success", False)
                response.message = result.get("message")
                response.data = result.get("data")
            else:
                response.success = True
                response.data = result

        except VendingMachineError as e:
            logger.warning(f"Command '{command}' rejected: {e.message}")
            response.message = e.message
            response.data = e.to_dict()
        except Exception as e:
            logger.exception(f"Error executing command '{command}': {e}")
            response.message = f"Error: {e}"

        return response.to_dict()
