"""Configuration module for toolchat using pydantic-settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from toolchat.scenario import SYSTEM_PROMPT


class ToolChatSettings(BaseSettings):
    """Main configuration settings for toolchat.

    All settings can be overridden via environment variables with the TOOLCHAT_ prefix.
    For example, TOOLCHAT_OLLAMA_HOST will override the ollama_host setting.
    """

    # Ollama
    ollama_host: str = "http://localhost:11434"
    model: str = "qwen2.5-coder:latest"

    # Conversation
    system_prompt: str = SYSTEM_PROMPT
    unknown_tool_policy: Literal["skip", "error"] = "skip"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="TOOLCHAT_")
