"""Immutable tool registry.

The registry maps each ToolName to its Tool. It is built once and handed to
the ConversationDriver; nothing in the package keeps a global tool table.
"""

import logging
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from toolchat.errors import ToolRegistryError
from toolchat.tools.builtin import Clock, builtin_tools
from toolchat.tools.types import Tool, ToolName

logger = logging.getLogger(__name__)


class ToolRegistry:
    """A fixed, read-only collection of tools keyed by ToolName."""

    def __init__(self, tools: Iterable[Tool]) -> None:
        """Initialize the registry.

        Args:
            tools: Tools to register, in the order their declarations are sent

        Raises:
            ToolRegistryError: If two tools share a name
        """
        table: dict[ToolName, Tool] = {}
        for tool in tools:
            if tool.name in table:
                raise ToolRegistryError(f"Duplicate tool: {tool.name.value}")
            table[tool.name] = tool
        self._tools: Mapping[ToolName, Tool] = MappingProxyType(table)
        logger.debug(f"ToolRegistry initialized with tools: {self.names()}")

    def lookup(self, name: str | ToolName) -> Tool | None:
        """Find a tool by name.

        Returns:
            The Tool, or None if the name is not registered
        """
        tool_name = name if isinstance(name, ToolName) else ToolName.parse(name)
        if tool_name is None:
            return None
        return self._tools.get(tool_name)

    def invoke(
        self, name: str | ToolName, arguments: Mapping[str, Any] | str | None
    ) -> str | None:
        """Run a tool by name.

        Args:
            name: Tool name as sent by the model
            arguments: Raw arguments as sent by the model

        Returns:
            The tool's result text, or None if no tool has that name

        Raises:
            ToolArgumentsError: If the arguments fail validation
        """
        tool = self.lookup(name)
        if tool is None:
            return None
        return tool.invoke(arguments)

    def declarations(self) -> list[dict[str, Any]]:
        """Tool declarations in Ollama format, in registration order."""
        return [tool.declaration.to_ollama() for tool in self._tools.values()]

    def names(self) -> list[str]:
        return [name.value for name in self._tools]

    def __contains__(self, name: object) -> bool:
        if isinstance(name, (str, ToolName)):
            return self.lookup(name) is not None
        return False

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


def default_registry(clock: Clock | None = None) -> ToolRegistry:
    """Build the registry of built-in tools.

    Args:
        clock: Optional clock passed to get_current_time

    Returns:
        ToolRegistry holding one tool per ToolName member

    Raises:
        ToolRegistryError: If a ToolName member has no implementation
    """
    registry = ToolRegistry(builtin_tools(clock=clock))

    missing = [name.value for name in ToolName if name not in registry]
    if missing:
        raise ToolRegistryError(f"No implementation for tools: {', '.join(missing)}")

    return registry
