"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class WeatherData:
    """Current conditions for one city, created fresh for every lookup."""
    city: str
    temperature: float = 0.0  # degrees Celsius
    humidity: int = 0  # percentage 0-100
    description: str = ""  # e.g., "broken clouds", "light rain"
    wind_speed: float = 0.0  # m/s
    last_updated: Optional[datetime] = None  # UTC, when the fetch completed
    local_time: Optional[datetime] = None  # wall clock at the queried city
    error: Optional[str] = None

    @classmethod
    def failed(cls, city: str, error: str) -> "WeatherData":
        """Build an error-flagged record; every weather field keeps its zero value."""
        return cls(city=city, error=error)

    @property
    def ok(self) -> bool:
        return not self.error
