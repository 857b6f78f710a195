"""Async Ollama client wrapper.

This module provides an async wrapper around the ollama.AsyncClient for
sending non-streaming chat requests with tool declarations. The client is
created once at startup and reused for the whole conversation.
"""

import logging
from typing import Any

import ollama

logger = logging.getLogger(__name__)


class OllamaClient:
    """Async client for interacting with Ollama API.

    Attributes:
        host: The Ollama server URL (e.g., "http://localhost:11434")
        _client: The underlying ollama.AsyncClient instance
    """

    def __init__(self, host: str) -> None:
        """Initialize the Ollama client.

        Args:
            host: The Ollama server URL
        """
        self.host = host
        self._client = ollama.AsyncClient(host=host)
        logger.info(f"OllamaClient initialized with host: {host}")

    async def check_connection(self) -> bool:
        """Check if the Ollama server is reachable.

        Returns:
            bool: True if connection is successful, False otherwise
        """
        try:
            # Try to list models as a connectivity check
            await self._client.list()
            logger.debug("Ollama connection check: successful")
            return True
        except Exception as e:
            logger.warning(f"Ollama connection check failed: {e}")
            return False

    async def chat(
        self,
        model: str,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Send a non-streaming chat request to Ollama.

        Args:
            model: The model name to use for the chat
            messages: The full transcript in Ollama format:
                      [{"role": "user", "content": "..."}, ...]
            tools: Tool declarations the model may call

        Returns:
            dict: The chat response. Contains:
                  - model: str - The model name
                  - message: dict - role, content and optional tool_calls
                  - done: bool
                  - eval_count, prompt_eval_count, etc.

        Raises:
            Exception: If the Ollama API request fails
        """
        try:
            logger.debug(
                f"Sending chat request to model {model}: "
                f"{len(messages)} messages, {len(tools or [])} tools"
            )

            response = await self._client.chat(
                model=model,
                messages=messages,
                tools=tools,
                stream=False,
            )

            # Convert the response to a dict if it's not already
            if hasattr(response, "model_dump"):
                response_dict = response.model_dump()
            elif isinstance(response, dict):
                response_dict = response
            else:
                response_dict = vars(response)

            logger.debug(
                f"Received response: done={response_dict.get('done')}, "
                f"tool_calls={bool((response_dict.get('message') or {}).get('tool_calls'))}"
            )
            return response_dict

        except Exception as e:
            logger.error(f"Chat request failed: {e}")
            raise

    async def close(self) -> None:
        """Close the client and clean up resources.

        ollama.AsyncClient keeps an httpx.AsyncClient internally; close it
        if the installed version exposes it.
        """
        inner = getattr(self._client, "_client", None)
        if inner is not None and hasattr(inner, "aclose"):
            await inner.aclose()
        logger.debug("OllamaClient closed")
