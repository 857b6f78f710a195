"""Pytest configuration and shared fixtures for toolchat tests.

This module provides common fixtures used across all test modules,
including a fixed clock, a tool registry and a scripted chat client.
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import AsyncMock

import pytest

from toolchat.config import ToolChatSettings
from toolchat.tools import default_registry

MST = timezone(timedelta(hours=-7), "MST")
FIXED_NOW = datetime(2024, 1, 7, 14, 5, 9, tzinfo=MST)


def ollama_response(
    content: str = "",
    tool_calls: list[dict[str, Any]] | None = None,
    model: str = "qwen2.5-coder:latest",
) -> dict[str, Any]:
    """Build a non-streaming Ollama chat response dict."""
    message: dict[str, Any] = {"role": "assistant", "content": content}
    if tool_calls is not None:
        message["tool_calls"] = tool_calls
    return {
        "model": model,
        "created_at": "2024-01-07T21:05:09Z",
        "message": message,
        "done": True,
        "eval_count": 12,
        "prompt_eval_count": 80,
    }


def tool_call(name: str, **arguments: Any) -> dict[str, Any]:
    """Build a tool call in Ollama format."""
    return {"function": {"name": name, "arguments": arguments}}


@pytest.fixture
def test_settings():
    """Create test settings independent of the environment.

    Returns:
        ToolChatSettings: Settings instance configured for testing.
    """
    return ToolChatSettings(
        ollama_host="http://localhost:11434",
        model="qwen2.5-coder:latest",
        system_prompt="You are a test assistant.",
        unknown_tool_policy="skip",
        log_level="DEBUG",
    )


@pytest.fixture
def fixed_clock():
    """A clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def registry(fixed_clock):
    """The built-in tool registry with a fixed clock."""
    return default_registry(clock=fixed_clock)


@pytest.fixture
def chat_client():
    """A chat client whose responses are scripted per test.

    Set ``chat_client.chat.side_effect`` to a list of response dicts.
    """
    client = AsyncMock()
    client.chat = AsyncMock()
    return client
