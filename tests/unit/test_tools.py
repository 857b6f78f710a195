"""Unit tests for the built-in tools and tool declarations."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from tests.conftest import FIXED_NOW, MST
from toolchat.errors import ToolArgumentsError
from toolchat.tools import (
    TimeArguments,
    ToolDeclaration,
    ToolName,
    ToolParameter,
    WeatherArguments,
    get_current_time,
    get_current_weather,
)
from toolchat.tools.builtin import TIME_DECLARATION, WEATHER_DECLARATION, builtin_tools


class TestGetCurrentWeather:
    """Tests for the weather stub."""

    def test_embeds_location_and_format(self):
        args = WeatherArguments(location="Calgary", format="celsius")

        result = get_current_weather(args)

        assert result == (
            "It is sunny and snowing in Calgary, with a temperature of 32 celsius"
        )

    def test_location_defaults(self):
        args = WeatherArguments(format="fahrenheit")

        result = get_current_weather(args)

        assert "your area" in result
        assert result.endswith("32 fahrenheit")


class TestGetCurrentTime:
    """Tests for the clock tool."""

    def test_payload_has_nine_fields(self):
        payload = json.loads(get_current_time(TimeArguments(), clock=lambda: FIXED_NOW))

        assert set(payload) == {
            "timestamp",
            "timeString",
            "dateString",
            "timezoneOffset",
            "dayOfWeek",
            "dayOfMonth",
            "hours",
            "minutes",
            "seconds",
        }

    def test_payload_values(self):
        payload = json.loads(get_current_time(TimeArguments(), clock=lambda: FIXED_NOW))

        assert payload["timestamp"] == int(FIXED_NOW.timestamp() * 1000)
        assert payload["timeString"] == "14:05:09 GMT-0700 (MST)"
        assert payload["dateString"] == "Sun Jan 07 2024"
        assert payload["timezoneOffset"] == 420
        assert payload["dayOfWeek"] == 0
        assert payload["dayOfMonth"] == 7
        assert payload["hours"] == 14
        assert payload["minutes"] == 5
        assert payload["seconds"] == 9

    def test_fields_agree_with_timestamp(self):
        """All fields describe the instant given by the timestamp field."""
        payload = json.loads(get_current_time(TimeArguments()))

        offset = timedelta(minutes=-payload["timezoneOffset"])
        reference = datetime.fromtimestamp(
            payload["timestamp"] / 1000, tz=timezone(offset)
        )

        assert reference.hour == payload["hours"]
        assert reference.minute == payload["minutes"]
        assert reference.second == payload["seconds"]
        assert reference.day == payload["dayOfMonth"]
        assert reference.isoweekday() % 7 == payload["dayOfWeek"]

    def test_clock_read_once(self):
        calls = []

        def clock():
            calls.append(1)
            return FIXED_NOW

        get_current_time(TimeArguments(location="Calgary"), clock=clock)

        assert len(calls) == 1

    def test_monday_is_day_one(self):
        monday = datetime(2024, 1, 1, 0, 0, 0, tzinfo=MST)

        payload = json.loads(get_current_time(TimeArguments(), clock=lambda: monday))

        assert payload["dayOfWeek"] == 1
        assert payload["dateString"] == "Mon Jan 01 2024"

    def test_east_of_utc_offset_is_negative(self):
        cet = timezone(timedelta(hours=1), "CET")
        now = datetime(2024, 1, 7, 9, 0, 0, tzinfo=cet)

        payload = json.loads(get_current_time(TimeArguments(), clock=lambda: now))

        assert payload["timezoneOffset"] == -60


class TestDeclarations:
    """Tests for tool declarations sent to the model."""

    def test_weather_declaration_format(self):
        declaration = WEATHER_DECLARATION.to_ollama()

        assert declaration["type"] == "function"
        function = declaration["function"]
        assert function["name"] == "get_current_weather"
        assert function["description"] == "Get the current weather"
        assert function["parameters"]["type"] == "object"
        assert function["parameters"]["properties"]["format"]["enum"] == [
            "celsius",
            "fahrenheit",
        ]
        assert function["parameters"]["required"] == ["format"]

    def test_time_declaration_has_no_required_parameters(self):
        function = TIME_DECLARATION.to_ollama()["function"]

        assert function["name"] == "get_current_time"
        assert "location" in function["parameters"]["properties"]
        assert function["parameters"]["required"] == []

    def test_parameter_without_enum(self):
        param = ToolParameter(name="q", type="string", description="Query")

        assert param.to_schema() == {"type": "string", "description": "Query"}

    def test_declaration_without_parameters(self):
        declaration = ToolDeclaration(
            name=ToolName.GET_CURRENT_TIME, description="Time"
        ).to_ollama()

        assert declaration["function"]["parameters"] == {
            "type": "object",
            "properties": {},
            "required": [],
        }


class TestArgumentValidation:
    """Tests for Tool.parse_arguments."""

    @pytest.fixture
    def weather_tool(self):
        return builtin_tools()[0]

    def test_valid_arguments(self, weather_tool):
        args = weather_tool.parse_arguments({"location": "Calgary", "format": "celsius"})

        assert isinstance(args, WeatherArguments)
        assert args.location == "Calgary"

    def test_extra_arguments_ignored(self, weather_tool):
        args = weather_tool.parse_arguments(
            {"location": "Calgary", "format": "celsius", "units": "metric"}
        )

        assert args.format == "celsius"

    def test_json_string_arguments(self, weather_tool):
        args = weather_tool.parse_arguments('{"format": "fahrenheit"}')

        assert args.format == "fahrenheit"

    def test_missing_required_argument(self, weather_tool):
        with pytest.raises(ToolArgumentsError) as exc_info:
            weather_tool.parse_arguments({"location": "Calgary"})

        assert exc_info.value.tool_name == "get_current_weather"
        assert "format" in exc_info.value.detail

    def test_value_outside_enum(self, weather_tool):
        with pytest.raises(ToolArgumentsError):
            weather_tool.parse_arguments({"format": "kelvin"})

    def test_none_arguments_for_optional_only_tool(self):
        time_tool = builtin_tools(clock=lambda: FIXED_NOW)[1]

        args = time_tool.parse_arguments(None)

        assert isinstance(args, TimeArguments)
        assert args.location is None


class TestToolName:
    """Tests for ToolName parsing."""

    def test_parse_known(self):
        assert ToolName.parse("get_current_time") is ToolName.GET_CURRENT_TIME

    def test_parse_unknown(self):
        assert ToolName.parse("get_stock_price") is None
