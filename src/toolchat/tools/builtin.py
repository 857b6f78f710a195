"""Built-in tools: a fake weather lookup and a wall clock reading."""

import json
import logging
from datetime import datetime
from functools import partial
from typing import Callable, Literal

from pydantic import BaseModel, ConfigDict

from toolchat.tools.types import Tool, ToolDeclaration, ToolName, ToolParameter

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class WeatherArguments(BaseModel):
    """Arguments for get_current_weather."""

    model_config = ConfigDict(extra="ignore")

    location: str = "your area"
    format: Literal["celsius", "fahrenheit"]


class TimeArguments(BaseModel):
    """Arguments for get_current_time. The location is accepted but unused."""

    model_config = ConfigDict(extra="ignore")

    location: str | None = None


def local_now() -> datetime:
    """Read the wall clock as a timezone-aware local datetime."""
    return datetime.now().astimezone()


def get_current_weather(args: WeatherArguments) -> str:
    # Demo stub, no network lookup
    return (
        f"It is sunny and snowing in {args.location}, "
        f"with a temperature of 32 {args.format}"
    )


def get_current_time(args: TimeArguments, clock: Clock = local_now) -> str:
    """Return the current local time as a JSON object.

    Every field is derived from a single clock read so they cannot disagree.

    Args:
        args: Validated tool arguments
        clock: Source of the current time, must return an aware datetime

    Returns:
        JSON string with the fields timestamp (epoch milliseconds), timeString,
        dateString, timezoneOffset (minutes, UTC minus local), dayOfWeek
        (0 = Sunday), dayOfMonth, hours, minutes and seconds.
    """
    now = clock()
    if args.location:
        logger.debug(f"get_current_time ignores location: {args.location}")

    offset = now.utcoffset()
    offset_minutes = int(offset.total_seconds() // 60) if offset is not None else 0

    return json.dumps(
        {
            "timestamp": int(now.timestamp() * 1000),
            "timeString": now.strftime("%H:%M:%S GMT%z (%Z)"),
            "dateString": now.strftime("%a %b %d %Y"),
            "timezoneOffset": -offset_minutes,
            "dayOfWeek": now.isoweekday() % 7,
            "dayOfMonth": now.day,
            "hours": now.hour,
            "minutes": now.minute,
            "seconds": now.second,
        }
    )


WEATHER_DECLARATION = ToolDeclaration(
    name=ToolName.GET_CURRENT_WEATHER,
    description="Get the current weather",
    parameters=(
        ToolParameter(
            name="location",
            type="string",
            description="The location to get the weather for, e.g. San Francisco, CA",
        ),
        ToolParameter(
            name="format",
            type="string",
            description="The format to return the weather in, e.g. 'celsius' or 'fahrenheit'",
            enum=("celsius", "fahrenheit"),
            required=True,
        ),
    ),
)

TIME_DECLARATION = ToolDeclaration(
    name=ToolName.GET_CURRENT_TIME,
    description="Get the current time for a location",
    parameters=(
        ToolParameter(
            name="location",
            type="string",
            description="The optional location to get the time for, e.g. San Francisco, CA",
        ),
    ),
)


def builtin_tools(clock: Clock | None = None) -> list[Tool]:
    """Build the built-in tools.

    Args:
        clock: Optional clock for get_current_time (default: local wall clock)

    Returns:
        List of Tool instances, one per ToolName member
    """
    return [
        Tool(
            declaration=WEATHER_DECLARATION,
            arguments_model=WeatherArguments,
            handler=get_current_weather,
        ),
        Tool(
            declaration=TIME_DECLARATION,
            arguments_model=TimeArguments,
            handler=partial(get_current_time, clock=clock or local_now),
        ),
    ]
