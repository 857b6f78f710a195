"""Canned conversation played by the toolchat CLI."""

SYSTEM_PROMPT = (
    "You are an easy going AI Agent named Geoff. You use an informal and "
    "conversational style. If you don't know an answer to a question, you will "
    "use your tools to try to get an answer."
)

USER_MESSAGES: tuple[str, ...] = (
    "What time is it?",
    "No, tell me the time informally, as if we are in the same room together.",
    "What day of the week is it?",
    "What's the weather forecast for today in Calgary?",
)
