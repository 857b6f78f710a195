"""Ollama client wrapper and integration layer.

This package provides the async client used to send non-streaming chat
requests, with tool declarations, to the Ollama API.
"""

from toolchat.ollama.client import OllamaClient

__all__ = ["OllamaClient"]
