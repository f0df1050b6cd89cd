from __future__ import annotations

"""
Shared tool interface.

Tools implement a small protocol so the extension can describe them to the host
and dispatch calls by name.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from ridekick_research.context import ToolContext


class ToolInputError(ValueError):
    """
    Raised when a tool is called with a missing or invalid argument.

    The error is raised before any data is fetched.
    """

    pass


class ToolNotFoundError(LookupError):
    """Raised when a tool name is not registered with the extension."""

    pass


@dataclass(frozen=True)
class ToolDefinition:
    """
    Tool description registered with the host.

    Attributes:
        name:
            Unique tool name.
        description:
            Human-readable description shown to the host and its agents.
        input_schema:
            JSON-Schema object describing the arguments.
    """

    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


class Tool(Protocol):
    """
    Interface for an extension tool.

    Implementations are expected to:
    - Provide a `name` used by the host to call the tool.
    - Provide a `description` for the host's tool listing.
    - Describe their arguments with a JSON-Schema object.
    """

    name: str
    description: str

    def input_schema(self) -> dict[str, Any]:
        """
        Describe the tool arguments.

        Returns:
            A JSON-Schema object.
        """

    async def run(self, args: Mapping[str, Any], context: ToolContext) -> dict[str, Any]:
        """
        Execute the tool.

        Args:
            args:
                Flat argument mapping.
            context:
                Tool execution context.

        Returns:
            Structured result.
        """


def definition_of(tool: Tool) -> ToolDefinition:
    """Build the host-facing definition of a tool."""

    return ToolDefinition(name=tool.name, description=tool.description, input_schema=tool.input_schema())


def project_property() -> dict[str, Any]:
    """Schema entry for the common `project` argument."""

    return {
        "type": "string",
        "description": "Project to search (default: ridekick)",
        "default": "ridekick",
    }


def optional_str(args: Mapping[str, Any], key: str) -> str | None:
    """
    Read an optional string argument.

    Returns:
        The value, or None if it is missing or empty.

    Raises:
        ToolInputError:
            If the value is present but not a string.
    """

    value = args.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ToolInputError(f"{key} must be a string")
    return value


def required_str(args: Mapping[str, Any], key: str) -> str:
    """
    Read a required string argument.

    Raises:
        ToolInputError:
            If the value is missing, empty, or not a string.
    """

    value = optional_str(args, key)
    if value is None:
        raise ToolInputError(f"{key} is required")
    return value


def optional_int(args: Mapping[str, Any], key: str, default: int) -> int:
    """
    Read an optional integer argument.

    Missing values and zero fall back to `default`. Numeric strings (as passed
    on the command line) are accepted.

    Raises:
        ToolInputError:
            If the value cannot be interpreted as an integer.
    """

    value = args.get(key)
    if value is None or value == "" or value == 0:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ToolInputError(f"{key} must be a number")

    try:
        return int(value) or default
    except (ValueError, OverflowError):
        # Unparsable strings, NaN and infinity
        raise ToolInputError(f"{key} must be a number") from None


def optional_bool(args: Mapping[str, Any], key: str) -> bool:
    """Read an optional boolean flag. Strings like `true`/`yes`/`1` count as True."""

    value = args.get(key)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)
