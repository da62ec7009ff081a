"""Interactive command-line weather lookup."""
import argparse
import logging
import signal
import sys
from typing import Callable, List, Optional, TextIO

from config import ConfigError, load_settings
from openweather_provider import OpenWeatherProvider
from presenter import display_weather
from weather_provider import WeatherProviderBase

PROMPT = "\nEnter a city name (or 'q' to quit): "
QUIT_TOKEN = "q"
FAREWELL = "\nThank you for using Weather CLI!"
BANNER = [
    "=======================================",
    "Weather CLI - current conditions from OpenWeather",
    "Type 'q' to quit the programme",
    "=======================================",
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("weather-cli", description="Look up the current weather by city name")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    # Logs go to stderr so they never interleave with the weather blocks
    log_level = logging.DEBUG if verbose else logging.WARNING
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def get_city_input(read: Callable[[str], str] = input) -> Optional[str]:
    """
    Prompt for a city name.

    Returns:
        The trimmed line, "" if reading failed, or None at end of input
    """
    try:
        line = read(PROMPT)
    except EOFError:
        return None
    except (OSError, UnicodeDecodeError) as err:
        logging.error("Error reading input: %s", err)
        return ""
    return line.strip()


def weather_loop(
    provider: WeatherProviderBase,
    read: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> None:
    """Prompt, fetch and display until the user quits."""
    if out is None:
        out = sys.stdout
    while True:
        city = get_city_input(read)
        if city is None or city == QUIT_TOKEN:
            if city is None:
                logging.info("End of input reached")
            print(FAREWELL, file=out)
            return
        if not city:
            continue

        logging.debug("Fetching weather for %r", city)
        weather = provider.fetch(city)
        display_weather(weather, out)


def signal_handler(signum, frame):
    logging.info("Received signal %s, shutting down", signum)
    raise KeyboardInterrupt()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        settings = load_settings()
    except ConfigError as err:
        logging.critical("%s", err)
        raise SystemExit(f"Fatal: {err}") from err

    provider = OpenWeatherProvider(api_key=settings.openweather_api_key)
    signal.signal(signal.SIGTERM, signal_handler)

    for line in BANNER:
        print(line)

    try:
        weather_loop(provider)
    except KeyboardInterrupt:
        logging.info("Stopping weather CLI")
        print()


if __name__ == "__main__":
    main()
