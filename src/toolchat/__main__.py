"""CLI entry point for toolchat.

This module provides the command-line interface for running the canned
tool-calling conversation. It can be invoked as `toolchat` (via the script
entry point) or `python -m toolchat`.
"""

import argparse
import asyncio
import logging
import sys

from toolchat import __version__
from toolchat.config import ToolChatSettings
from toolchat.conversation import ConversationDriver, Transcript
from toolchat.ollama import OllamaClient
from toolchat.scenario import USER_MESSAGES
from toolchat.tools import default_registry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toolchat",
        description="Run a tool-calling conversation against a local Ollama model",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"toolchat {__version__}",
    )

    parser.add_argument(
        "--ollama-host",
        type=str,
        default=None,
        help="Ollama server URL (default: http://localhost:11434, can be set via TOOLCHAT_OLLAMA_HOST)",
    )

    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model to chat with (default: qwen2.5-coder:latest, can be set via TOOLCHAT_MODEL)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via TOOLCHAT_LOG_LEVEL)",
    )

    parser.add_argument(
        "--unknown-tools",
        type=str,
        default=None,
        choices=["skip", "error"],
        help="What to do when the model calls an unregistered tool "
        "(default: skip, can be set via TOOLCHAT_UNKNOWN_TOOL_POLICY)",
    )

    parser.add_argument(
        "messages",
        nargs="*",
        help="User messages to send instead of the built-in conversation",
    )

    return parser


def settings_from_args(args: argparse.Namespace) -> ToolChatSettings:
    """Build settings, CLI args override environment variables."""
    settings_kwargs = {}
    if args.ollama_host is not None:
        settings_kwargs["ollama_host"] = args.ollama_host
    if args.model is not None:
        settings_kwargs["model"] = args.model
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level
    if args.unknown_tools is not None:
        settings_kwargs["unknown_tool_policy"] = args.unknown_tools

    return ToolChatSettings(**settings_kwargs)


def print_transcript(transcript: Transcript) -> None:
    print(transcript.format())


async def run_conversation(settings: ToolChatSettings, user_messages: list[str]) -> None:
    """Run the conversation to completion.

    Args:
        settings: Resolved configuration
        user_messages: Messages to send, one turn each
    """
    client = OllamaClient(host=settings.ollama_host)

    connected = await client.check_connection()
    if connected:
        logger.info("Successfully connected to Ollama")
    else:
        logger.warning("Could not connect to Ollama - check if server is running")

    driver = ConversationDriver(
        client=client,
        registry=default_registry(),
        model=settings.model,
        system_prompt=settings.system_prompt,
        unknown_tool_policy=settings.unknown_tool_policy,
    )

    try:
        await driver.run(user_messages, on_turn=print_transcript)
    finally:
        await client.close()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the toolchat CLI.

    Parses command-line arguments, configures logging and runs the
    conversation. Failures from Ollama are not caught.

    Returns:
        0 on success
    """
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    asyncio.run(run_conversation(settings, args.messages or list(USER_MESSAGES)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
