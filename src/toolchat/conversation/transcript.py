"""Transcript class holding the ordered message history of a conversation.

This module provides:
- The append-only Transcript resent to the model on every request
- Conversion of messages to and from Ollama's message format
- The console rendering printed after each turn
"""

import json
import logging
from typing import Any, Iterator

from toolchat.conversation.types import (
    AssistantMessage,
    Message,
    ToolCall,
    ToolMessage,
)

logger = logging.getLogger(__name__)


def message_from_ollama(data: dict[str, Any], model: str = "") -> AssistantMessage:
    """Convert an Ollama response message to an AssistantMessage.

    Args:
        data: The "message" part of an Ollama chat response
        model: Model that produced the message

    Returns:
        AssistantMessage with tool_calls set only if the model requested any
    """
    raw_calls = data.get("tool_calls") or []
    tool_calls = [ToolCall.from_ollama(call) for call in raw_calls]
    return AssistantMessage(
        content=data.get("content") or "",
        model=model,
        tool_calls=tool_calls or None,
    )


def message_to_ollama(message: Message) -> dict[str, Any]:
    """Convert a transcript message to Ollama's message format."""
    ollama_msg: dict[str, Any] = {
        "role": message.role,
        "content": message.content,
    }

    if isinstance(message, AssistantMessage) and message.tool_calls:
        ollama_msg["tool_calls"] = [call.to_ollama() for call in message.tool_calls]
    elif isinstance(message, ToolMessage) and message.tool_name:
        ollama_msg["tool_name"] = message.tool_name

    return ollama_msg


class Transcript:
    """Ordered, append-only sequence of conversation messages.

    Insertion order matters: the transcript is the prompt sent to the model.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def add_message(self, message: Message) -> None:
        """Append a message to the end of the transcript.

        Args:
            message: The message to add
        """
        self._messages.append(message)
        logger.debug(
            f"Appended {message.role} message ({len(self._messages)} in transcript)"
        )

    def to_ollama(self) -> list[dict[str, Any]]:
        return [message_to_ollama(message) for message in self._messages]

    def format(self) -> str:
        """Render the transcript for the console.

        Messages carrying tool calls are shown as JSON, all others as
        role and content.

        Returns:
            "Conversation:" header followed by one "- ..." line per message
        """
        lines = []
        for message in self._messages:
            if isinstance(message, AssistantMessage) and message.tool_calls:
                calls = json.dumps([call.to_ollama() for call in message.tool_calls])
                lines.append(f"- {message.role} tool calls: {calls}\n")
            else:
                lines.append(f"- {message.role}: {message.content}\n")
        return "Conversation:\n" + "".join(lines)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]
