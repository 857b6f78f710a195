"""Exception types raised by toolchat.

Transport failures from the Ollama client are not wrapped; they propagate
as raised by the ``ollama`` library.
"""


class ToolChatError(Exception):
    """Base class for all toolchat errors."""


class ToolRegistryError(ToolChatError):
    """Raised when a tool registry is built with duplicate or missing tools."""


class ToolArgumentsError(ToolChatError):
    """Raised when a tool call's arguments fail validation.

    Attributes:
        tool_name: Name of the tool whose arguments were rejected
        detail: Human-readable description of the validation failure
    """

    def __init__(self, tool_name: str, detail: str) -> None:
        self.tool_name = tool_name
        self.detail = detail
        super().__init__(f"Invalid arguments for tool '{tool_name}': {detail}")


class UnknownToolError(ToolChatError):
    """Raised when the model calls a tool that is not registered."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")
