"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from weather_data import WeatherData


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def fetch(self, city: str) -> WeatherData:
        """
        Fetch current weather data for a city.

        Args:
            city: Free-form city name as typed by the user

        Returns:
            WeatherData: Current weather, or an error-flagged record if the
            lookup failed. Implementations never raise for request failures.
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class TransportError(WeatherProviderError):
    """The request never produced a response (DNS, connection, timeout)."""


class HTTPStatusError(WeatherProviderError):
    """The provider answered with a non-success status."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class BodyReadError(WeatherProviderError):
    """The response body could not be read."""


class DecodeError(WeatherProviderError):
    """The response body was not the expected JSON document."""


class NoConditionDataError(WeatherProviderError):
    """The response carried no weather condition entries."""
