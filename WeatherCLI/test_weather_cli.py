"""Tests for the interactive loop and entry point."""
import io
from unittest.mock import patch

import pytest
from config import ConfigError, Settings
from weather_cli import FAREWELL, PROMPT, get_city_input, main, weather_loop
from weather_data import WeatherData
from weather_provider import WeatherProviderBase


class MockProvider(WeatherProviderBase):
    """Mock weather provider for testing."""

    def __init__(self, error=None):
        self.error = error
        self.cities = []

    def fetch(self, city):
        self.cities.append(city)
        if self.error:
            return WeatherData.failed(city.strip().title(), self.error)
        return WeatherData(city=city.strip().title(), temperature=18.0, humidity=70,
                           description="light rain", wind_speed=4.0)


class ScriptedInput:
    """Feeds lines to the loop and records every prompt shown."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        line = self.lines.pop(0)
        if isinstance(line, Exception):
            raise line
        return line


def test_get_city_input_trims():
    read = ScriptedInput("  paris  \n")
    assert get_city_input(read) == "paris"
    assert read.prompts == [PROMPT]


def test_get_city_input_read_error_is_empty():
    read = ScriptedInput(OSError("stdin closed"))
    assert get_city_input(read) == ""


def test_get_city_input_undecodable_bytes_is_empty():
    read = ScriptedInput(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"))
    assert get_city_input(read) == ""


def test_loop_undecodable_input_reprompts():
    provider = MockProvider()
    read = ScriptedInput(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), "q")
    out = io.StringIO()

    weather_loop(provider, read, out)

    assert len(read.prompts) == 2
    assert provider.cities == []
    assert out.getvalue() == FAREWELL + "\n"


def test_get_city_input_end_of_input():
    assert get_city_input(ScriptedInput()) is None


def test_loop_quits_without_further_prompts():
    provider = MockProvider()
    read = ScriptedInput("q", "london")
    out = io.StringIO()

    weather_loop(provider, read, out)

    assert read.prompts == [PROMPT]
    assert provider.cities == []
    assert out.getvalue() == FAREWELL + "\n"


def test_loop_empty_input_reprompts_without_fetching():
    provider = MockProvider()
    read = ScriptedInput("", "   ", "q")

    weather_loop(provider, read, io.StringIO())

    assert len(read.prompts) == 3
    assert provider.cities == []


def test_loop_fetches_and_displays_trimmed_city():
    provider = MockProvider()
    read = ScriptedInput("  paris  ", "q")
    out = io.StringIO()

    weather_loop(provider, read, out)

    assert provider.cities == ["paris"]
    text = out.getvalue()
    assert "=== Weather for Paris ===" in text
    assert "Conditions: light rain" in text
    assert text.endswith(FAREWELL + "\n")


def test_loop_one_block_per_city():
    provider = MockProvider()
    read = ScriptedInput("oslo", "rome", "q")
    out = io.StringIO()

    weather_loop(provider, read, out)

    assert provider.cities == ["oslo", "rome"]
    assert out.getvalue().count("=== Weather for") == 2


def test_loop_shows_error_records_and_continues():
    provider = MockProvider(error="City Not Found")
    read = ScriptedInput("atlantis", "q")
    out = io.StringIO()

    weather_loop(provider, read, out)

    text = out.getvalue()
    assert "Error: City Not Found" in text
    assert "Temperature" not in text
    assert len(read.prompts) == 2


def test_loop_read_error_reprompts():
    provider = MockProvider()
    read = ScriptedInput(OSError("bad read"), "q")

    weather_loop(provider, read, io.StringIO())

    assert len(read.prompts) == 2
    assert provider.cities == []


def test_loop_end_of_input_says_goodbye():
    out = io.StringIO()
    weather_loop(MockProvider(), ScriptedInput(), out)
    assert out.getvalue() == FAREWELL + "\n"


def test_main_exits_on_config_error():
    with patch("weather_cli.load_settings", side_effect=ConfigError("OPENWEATHER_API_KEY is required")):
        with pytest.raises(SystemExit) as exc_info:
            main([])

    assert exc_info.value.code != 0
    assert "OPENWEATHER_API_KEY is required" in str(exc_info.value.code)


def test_main_runs_loop_with_configured_key(capsys):
    with patch("weather_cli.load_settings", return_value=Settings(openweather_api_key="k")), \
            patch("weather_cli.signal.signal"), \
            patch("weather_cli.weather_loop") as mock_loop:
        main([])

    provider = mock_loop.call_args[0][0]
    assert provider.api_key == "k"
    assert "Weather CLI" in capsys.readouterr().out


def test_main_stops_on_keyboard_interrupt():
    with patch("weather_cli.load_settings", return_value=Settings(openweather_api_key="k")), \
            patch("weather_cli.signal.signal"), \
            patch("weather_cli.weather_loop", side_effect=KeyboardInterrupt):
        main([])
