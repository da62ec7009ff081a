"""Terminal rendering for weather records - pure formatting plus a thin print wrapper."""
import sys
from datetime import datetime
from typing import List, Optional, TextIO

from weather_data import WeatherData

SEPARATOR = "========================="
TIME_FORMAT = "%H:%M:%S"


def format_clock(moment: Optional[datetime], to_local: bool = False) -> str:
    """
    Render a datetime as HH:MM:SS.

    Args:
        moment: Time to render; None renders as "--:--:--"
        to_local: Convert to the machine's local timezone first
    """
    if moment is None:
        return "--:--:--"
    if to_local:
        moment = moment.astimezone()
    return moment.strftime(TIME_FORMAT)


def format_weather_lines(weather: WeatherData) -> List[str]:
    """
    Build the lines shown for one weather lookup.

    An error-flagged record yields only the header and the error message.
    """
    lines = ["", f"=== Weather for {weather.city} ==="]
    if not weather.ok:
        lines.append(f"Error: {weather.error}")
        return lines

    lines.extend([
        f"Temperature: {weather.temperature:.1f}°C",
        f"Humidity: {weather.humidity}%",
        f"Conditions: {weather.description}",
        f"Wind Speed: {weather.wind_speed:.1f} m/s",
        f"Local Time: {format_clock(weather.local_time)}",
        f"Last Updated: {format_clock(weather.last_updated, to_local=True)}",
        SEPARATOR,
    ])
    return lines


def display_weather(weather: WeatherData, out: Optional[TextIO] = None) -> None:
    """Write a weather block to ``out`` (standard output by default)."""
    if out is None:
        out = sys.stdout
    for line in format_weather_lines(weather):
        print(line, file=out)
