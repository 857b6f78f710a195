"""Data types for conversation transcripts.

This module defines one dataclass per message role plus the ToolCall record
carried by assistant messages.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _new_id() -> str:
    return uuid.uuid4().hex[:10]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class ToolCall:
    """A function call requested by the model."""

    name: str
    arguments: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_ollama(cls, data: dict[str, Any]) -> "ToolCall":
        """Parse a tool call in Ollama format.

        Args:
            data: {"function": {"name": "...", "arguments": {...}}}

        Returns:
            ToolCall instance
        """
        function = data.get("function") or {}
        return cls(
            name=function.get("name", ""),
            arguments=function.get("arguments") or {},
        )

    def to_ollama(self) -> dict[str, Any]:
        return {"function": {"name": self.name, "arguments": self.arguments}}


@dataclass
class UserMessage:
    """A message from the user."""

    role: str = "user"
    content: str = ""
    message_id: str = field(default_factory=_new_id)
    timestamp: str = field(default_factory=_now)

    def __post_init__(self) -> None:
        """Validate role is always 'user'."""
        self.role = "user"


@dataclass
class SystemMessage:
    """A system prompt message."""

    role: str = "system"
    content: str = ""
    message_id: str = field(default_factory=_new_id)
    timestamp: str = field(default_factory=_now)

    def __post_init__(self) -> None:
        """Validate role is always 'system'."""
        self.role = "system"


@dataclass
class AssistantMessage:
    """A response from the LLM assistant."""

    role: str = "assistant"
    content: str = ""
    model: str = ""
    message_id: str = field(default_factory=_new_id)
    timestamp: str = field(default_factory=_now)
    eval_count: int | None = None
    prompt_eval_count: int | None = None
    tool_calls: list[ToolCall] | None = None

    def __post_init__(self) -> None:
        """Validate role is always 'assistant'."""
        self.role = "assistant"


@dataclass
class ToolMessage:
    """A tool execution result."""

    role: str = "tool"
    tool_name: str = ""
    content: str = ""
    message_id: str = field(default_factory=_new_id)
    timestamp: str = field(default_factory=_now)

    def __post_init__(self) -> None:
        """Validate role is always 'tool'."""
        self.role = "tool"


# Union type for all message types
Message = UserMessage | SystemMessage | AssistantMessage | ToolMessage
