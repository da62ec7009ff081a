"""OpenWeather Current Weather API provider implementation."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import requests

from city_name import normalize_city_name
from weather_data import WeatherData
from weather_provider import (
    BodyReadError,
    DecodeError,
    HTTPStatusError,
    NoConditionDataError,
    TransportError,
    WeatherProviderBase,
    WeatherProviderError,
)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API.

    Uses the free "current weather by city name" endpoint:
    https://openweathermap.org/current#name

    Every call hits the network: there is no caching and no retry. Failures
    come back as error-flagged WeatherData records instead of exceptions.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
    NOT_FOUND_MESSAGE = "City Not Found"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        units: str = "metric",
        timeout: Optional[float] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            base_url: Endpoint override (defaults to BASE_URL)
            units: Temperature units ("metric", "imperial", or "standard")
            timeout: HTTP timeout in seconds; None keeps the transport default
            clock: Returns the current UTC time; replaced in tests
        """
        self.api_key = api_key
        self.base_url = base_url or self.BASE_URL
        self.units = units
        self.timeout = timeout
        self.clock = clock

    def fetch(self, city: str) -> WeatherData:
        """
        Fetch current weather for a city.

        Args:
            city: Free-form city name; normalized before the request

        Returns:
            WeatherData: Current conditions, or a record with only ``city``
            and ``error`` set when any step of the lookup fails
        """
        proper_city = normalize_city_name(city)
        try:
            return self._get_current(proper_city)
        except HTTPStatusError as e:
            logging.warning(f"Weather lookup for {proper_city!r} rejected with status {e.status_code}")
            return WeatherData.failed(proper_city, self.NOT_FOUND_MESSAGE)
        except WeatherProviderError as e:
            logging.error(f"Weather lookup for {proper_city!r} failed: {e}")
            return WeatherData.failed(proper_city, str(e))

    def _get_current(self, city: str) -> WeatherData:
        params = {
            "q": city,
            "appid": self.api_key,
            "units": self.units,
        }

        try:
            logging.info(f"Making OpenWeather API request: {self.base_url}")
            logging.debug(f"Request parameters: q={city}, units={self.units}")
            response = requests.get(self.base_url, params=params, timeout=self.timeout, stream=True)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Error fetching weather: {self._redact(e)}") from e

        try:
            logging.info(f"API response status: {response.status_code}")
            # The body of an error response is discarded
            if response.status_code != 200:
                raise HTTPStatusError(response.status_code)

            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                raise BodyReadError(f"Error reading response: {self._redact(e)}") from e
            logging.debug(f"API response (truncated): {body[:500]!r}")

            try:
                data = response.json()
            except ValueError as e:
                raise DecodeError(f"Error parsing response: {e}") from e
        finally:
            response.close()

        return self._to_weather_data(city, data)

    def _to_weather_data(self, city: str, data: Dict[str, Any]) -> WeatherData:
        """Map the provider's JSON document onto WeatherData."""
        try:
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
            main_data = data.get("main") or {}
            wind_data = data.get("wind") or {}
            weather_array = data.get("weather") or []

            temperature = float(main_data.get("temp", 0.0))
            humidity = int(main_data.get("humidity", 0))
            wind_speed = float(wind_data.get("speed", 0.0))
            descriptions = [entry.get("description") for entry in weather_array]
            if descriptions and not isinstance(descriptions[0], str):
                raise TypeError(f"weather description must be a string, got {type(descriptions[0]).__name__}")
            location_tz = timezone(timedelta(seconds=int(data.get("timezone", 0))))
        except (AttributeError, TypeError, ValueError) as e:
            raise DecodeError(f"Error parsing response: {e}") from e

        if not descriptions:
            raise NoConditionDataError(f"No weather data found for {city}")

        now = self.clock()
        logging.info(f"Successfully parsed weather data: {city} {temperature}°C, {descriptions[0]}")
        return WeatherData(
            city=city,
            temperature=temperature,
            humidity=humidity,
            description=descriptions[0],
            wind_speed=wind_speed,
            last_updated=now,
            local_time=now.astimezone(location_tz),
        )

    def _redact(self, error: Exception) -> str:
        # requests puts the full URL, key included, into some error messages
        message = str(error)
        if self.api_key:
            message = message.replace(self.api_key, "***")
        return message
