"""toolchat: tool-calling conversation demo for local Ollama models.

This package drives an Ollama chat endpoint through a canned conversation and
lets the model call a small set of built-in tools via function calling.
"""

from toolchat.conversation import ConversationDriver, Transcript
from toolchat.tools import ToolRegistry, default_registry

__version__ = "0.1.0"

__all__ = [
    "ConversationDriver",
    "ToolRegistry",
    "Transcript",
    "default_registry",
    "__version__",
]
