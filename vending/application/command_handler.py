"""
Command Handler - Routes named commands to vending service operations.

Provides command routing with argument validation and error conversion,
so a host transport can drive a machine with plain dictionaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from vending.core.exceptions import VendingMachineError
from vending.core.value_objects import Coin, Product
from vending.loggers import logger


# Type alias for command handlers
CommandHandlerFunc = Callable[..., Any]


@dataclass
class CommandResponse:
    """
    Standardized response for command execution.

    Attributes:
        command_id: The ID of the executed command.
        success: Whether the command succeeded.
        message: Human-readable message.
        data: Optional response data.
        error: Error code when the command failed.
        details: Error details when the command failed.
    """

    command_id: Optional[int] = None
    success: bool = False
    message: Optional[str] = None
    data: Any = None
    error: Optional[str] = None
    details: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the response to a dictionary."""
        result = {
            "command_id": self.command_id,
            "success": self.success,
            "message": self.message,
            "data": self.data,
        }
        if self.error:
            result["error"] = self.error
            result["details"] = self.details or {}
        return result


@dataclass
class CommandDefinition:
    """
    Definition of a command.

    Attributes:
        name: Command name.
        handler: Handler function.
        required_args: List of required argument names.
        description: Human-readable description.
    """

    name: str
    handler: CommandHandlerFunc
    required_args: list[str]
    description: str = ""


def _as_product(value: Any) -> Product:
    if isinstance(value, Product):
        return value
    return Product.from_name(str(value))


def _as_coin(value: Any) -> Coin:
    if isinstance(value, Coin):
        return value
    return Coin.from_name(str(value))


class CommandHandler:
    """
    Routes commands to their appropriate handlers.

    Each command maps onto exactly one operation of the vending service.
    """

    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"

    def __init__(self, service: Any) -> None:
        """
        Initialize the command handler.

        Args:
            service: The VendingService instance.
        """
        self._service = service
        self._commands: dict[str, CommandDefinition] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        """Register all default command handlers."""
        self.register("select", self._select, ["product"], "Select a product and get its price")
        self.register("insert", self._insert, ["coin"], "Insert a coin")
        self.register("collect", self._collect, [], "Collect the product and change")
        self.register("refund", self._refund, [], "Abort and refund the deposit")
        self.register("reset", self._reset, [], "Empty all inventories")
        self.register("stats", self._stats, [], "Get sales and inventory levels")

    def register(
        self,
        command_name: str,
        handler: CommandHandlerFunc,
        required_args: list[str],
        description: str = "",
    ) -> None:
        """
        Register a command handler.

        Args:
            command_name: The name of the command.
            handler: The handler function.
            required_args: List of required argument names.
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
                "required_args": cmd.required_args,
                "description": cmd.description,
            }
            for cmd in self._commands.values()
        ]

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

        if command not in self._commands:
            logger.warning(f"Unknown command: {command}")
            response.message = f"Unknown command: {command}"
            response.error = self.UNKNOWN_COMMAND
            return response.to_dict()

        definition = self._commands[command]
        kwargs = {arg: data.get(arg) for arg in definition.required_args}

        missing = [arg for arg in definition.required_args if kwargs.get(arg) is None]
        if missing:
            response.message = f"Missing required arguments: {missing}"
            response.error = self.INVALID_ARGUMENTS
            return response.to_dict()

        try:
            message, result = definition.handler(**kwargs)
        except VendingMachineError as e:
            logger.warning(f"Command '{command}' failed: {e.message}")
            response.message = e.message
            response.error = e.code
            response.details = e.details
            return response.to_dict()
        except ValueError as e:
            response.message = str(e)
            response.error = self.INVALID_ARGUMENTS
            return response.to_dict()

        response.success = True
        response.message = message
        response.data = result
        return response.to_dict()

    # =========================================================================
    # Command Implementations
    # =========================================================================

    def _select(self, product: Any) -> tuple[str, dict[str, Any]]:
        selected = _as_product(product)
        price = self._service.select_item_and_get_price(selected)
        return f"Selected {selected.display_name}", {"product": selected.name, "price": price}

    def _insert(self, coin: Any) -> tuple[str, dict[str, Any]]:
        inserted = _as_coin(coin)
        self._service.insert_coin(inserted)
        return f"Inserted {inserted.name}", {"coin": inserted.name}

    def _collect(self) -> tuple[str, dict[str, Any]]:
        product, change = self._service.collect_item_and_change()
        return (
            f"Enjoy your {product.display_name}",
            {"product": product.name, "change": [c.name for c in change]},
        )

    def _refund(self) -> tuple[str, dict[str, Any]]:
        coins = self._service.refund()
        return "Refunded", {"refund": [c.name for c in coins]}

    def _reset(self) -> tuple[str, None]:
        self._service.reset()
        return "Machine reset", None

    def _stats(self) -> tuple[str, dict[str, Any]]:
        return "Machine stats", self._service.stats().to_dict()
