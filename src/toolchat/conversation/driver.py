"""ConversationDriver: the tool-call round-trip loop.

For each user turn the driver appends the user message, asks the model for a
reply, runs any tool calls the reply carries through the ToolRegistry, and
asks the model once more so it can answer with the tool results in context.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Iterable, Literal, Protocol

from toolchat.conversation.transcript import Transcript, message_from_ollama
from toolchat.conversation.types import (
    AssistantMessage,
    SystemMessage,
    ToolCall,
    ToolMessage,
    UserMessage,
)
from toolchat.errors import ToolArgumentsError, UnknownToolError
from toolchat.tools import ToolRegistry

logger = logging.getLogger(__name__)

UnknownToolPolicy = Literal["skip", "error"]
TurnCallback = Callable[[Transcript], Awaitable[None] | None]


class ChatClient(Protocol):
    """The chat API the driver talks to. OllamaClient satisfies this."""

    async def chat(
        self,
        model: str,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]: ...


class ConversationDriver:
    """Runs a single conversation against a chat API with tool support.

    The driver owns its Transcript for its whole lifetime. Requests are sent
    one at a time; transport failures propagate to the caller.
    """

    def __init__(
        self,
        client: ChatClient,
        registry: ToolRegistry,
        model: str,
        system_prompt: str | None = None,
        unknown_tool_policy: UnknownToolPolicy = "skip",
    ) -> None:
        """Initialize the driver.

        Args:
            client: Chat API client
            registry: Tools the model may call
            model: Model name sent with every request
            system_prompt: Optional system message placed first in the transcript
            unknown_tool_policy: "skip" drops calls to unregistered tools,
                                 "error" raises UnknownToolError
        """
        self.client = client
        self.registry = registry
        self.model = model
        self.unknown_tool_policy = unknown_tool_policy
        self.transcript = Transcript()

        if system_prompt:
            self.transcript.add_message(SystemMessage(content=system_prompt))

    async def _request(self) -> AssistantMessage:
        """Send the transcript to the model and append its reply."""
        response = await self.client.chat(
            model=self.model,
            messages=self.transcript.to_ollama(),
            tools=self.registry.declarations(),
        )

        message = message_from_ollama(
            response.get("message") or {}, model=response.get("model") or self.model
        )
        message.eval_count = response.get("eval_count")
        message.prompt_eval_count = response.get("prompt_eval_count")

        # Appended even when it only carries tool calls
        self.transcript.add_message(message)
        return message

    def process_tool_calls(self, tool_calls: Iterable[ToolCall]) -> list[ToolMessage]:
        """Execute tool calls and build their result messages.

        Args:
            tool_calls: Calls from an assistant message, in the order requested

        Returns:
            One ToolMessage per call to a registered tool, in call order.
            Calls with invalid arguments produce a ToolMessage holding a JSON
            error object.

        Raises:
            UnknownToolError: If a call names an unregistered tool and the
                              policy is "error"
        """
        results: list[ToolMessage] = []

        for call in tool_calls:
            if call.name not in self.registry:
                if self.unknown_tool_policy == "error":
                    raise UnknownToolError(call.name)
                logger.warning(f"Skipping call to unknown tool: {call.name}")
                continue

            logger.info(f"Calling tool {call.name} with arguments {call.arguments}")
            try:
                content = self.registry.invoke(call.name, call.arguments)
            except ToolArgumentsError as e:
                logger.warning(str(e))
                content = json.dumps({"error": str(e)})

            results.append(ToolMessage(tool_name=call.name, content=content or ""))

        return results

    async def send(self, text: str) -> AssistantMessage:
        """Run one user turn.

        Args:
            text: The user's message

        Returns:
            The last assistant message appended during the turn
        """
        self.transcript.add_message(UserMessage(content=text))

        response = await self._request()

        if response.tool_calls:
            for tool_message in self.process_tool_calls(response.tool_calls):
                self.transcript.add_message(tool_message)

            # Roundtrip the tool results so the model can answer the question
            response = await self._request()

        return response

    async def run(
        self, user_messages: Iterable[str], on_turn: TurnCallback | None = None
    ) -> Transcript:
        """Send each user message in order, carrying the transcript forward.

        Args:
            user_messages: Messages to send, one turn each
            on_turn: Optional callback invoked with the transcript after each turn

        Returns:
            The final transcript
        """
        for text in user_messages:
            await self.send(text)
            if on_turn is not None:
                result = on_turn(self.transcript)
                if result is not None:
                    await result
        return self.transcript
