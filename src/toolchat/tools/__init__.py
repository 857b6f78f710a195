"""Tool declarations, typed arguments, and the immutable tool registry.

This package defines the tools the model may call, validates call arguments
against each tool's declared schema, and dispatches calls by ToolName.
"""

from toolchat.tools.builtin import (
    TimeArguments,
    WeatherArguments,
    get_current_time,
    get_current_weather,
)
from toolchat.tools.registry import ToolRegistry, default_registry
from toolchat.tools.types import Tool, ToolDeclaration, ToolName, ToolParameter

__all__ = [
    "Tool",
    "ToolDeclaration",
    "ToolName",
    "ToolParameter",
    "ToolRegistry",
    "default_registry",
    "TimeArguments",
    "WeatherArguments",
    "get_current_time",
    "get_current_weather",
]
