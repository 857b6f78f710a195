"""Data types for the tool registry.

This module defines the closed set of tool names, the declaration types sent
to the model with every request, and the Tool record binding a declaration to
its typed argument model and handler.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from toolchat.errors import ToolArgumentsError


class ToolName(str, Enum):
    """Names of all tools the model may call."""

    GET_CURRENT_WEATHER = "get_current_weather"
    GET_CURRENT_TIME = "get_current_time"

    @classmethod
    def parse(cls, name: str) -> "ToolName | None":
        """Return the member for ``name``, or None if it is not a known tool."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class ToolParameter:
    """A single parameter in a tool declaration."""

    name: str
    type: str
    description: str
    enum: tuple[str, ...] = ()
    required: bool = False

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum:
            schema["enum"] = list(self.enum)
        return schema


@dataclass(frozen=True)
class ToolDeclaration:
    """Static description of a tool, sent to the model with every request."""

    name: ToolName
    description: str
    parameters: tuple[ToolParameter, ...] = field(default_factory=tuple)

    def to_ollama(self) -> dict[str, Any]:
        """Render the declaration in Ollama's function-calling format.

        Returns:
            Dict of the form {"type": "function", "function": {...}} with a
            JSON-Schema style "parameters" object.
        """
        return {
            "type": "function",
            "function": {
                "name": self.name.value,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {p.name: p.to_schema() for p in self.parameters},
                    "required": [p.name for p in self.parameters if p.required],
                },
            },
        }


ToolHandler = Callable[[Any], str]


@dataclass(frozen=True)
class Tool:
    """A registered tool: declaration, typed arguments and implementation.

    Attributes:
        declaration: What the model is told about the tool
        arguments_model: Pydantic model the raw call arguments are validated against
        handler: Function taking a validated arguments_model instance and
                 returning the result text
    """

    declaration: ToolDeclaration
    arguments_model: type[BaseModel]
    handler: ToolHandler

    @property
    def name(self) -> ToolName:
        return self.declaration.name

    def parse_arguments(self, arguments: Mapping[str, Any] | str | None) -> BaseModel:
        """Validate raw call arguments against the tool's argument model.

        Args:
            arguments: Arguments as sent by the model. Usually a mapping, but
                       some models send a JSON-encoded string or nothing at all.

        Returns:
            Validated arguments_model instance

        Raises:
            ToolArgumentsError: If the arguments do not match the declared schema
        """
        try:
            if isinstance(arguments, str):
                return self.arguments_model.model_validate_json(arguments)
            return self.arguments_model.model_validate(dict(arguments or {}))
        except (ValidationError, TypeError, ValueError) as e:
            raise ToolArgumentsError(self.name.value, str(e)) from e

    def invoke(self, arguments: Mapping[str, Any] | str | None) -> str:
        """Validate arguments and run the handler."""
        return self.handler(self.parse_arguments(arguments))
