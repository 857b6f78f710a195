"""Conversation transcript and the tool-call round-trip driver."""

from toolchat.conversation.driver import ChatClient, ConversationDriver
from toolchat.conversation.transcript import (
    Transcript,
    message_from_ollama,
    message_to_ollama,
)
from toolchat.conversation.types import (
    AssistantMessage,
    Message,
    SystemMessage,
    ToolCall,
    ToolMessage,
    UserMessage,
)

__all__ = [
    # Core classes
    "ChatClient",
    "ConversationDriver",
    "Transcript",
    # Message types
    "Message",
    "UserMessage",
    "SystemMessage",
    "AssistantMessage",
    "ToolMessage",
    "ToolCall",
    # Conversion helpers
    "message_from_ollama",
    "message_to_ollama",
]
