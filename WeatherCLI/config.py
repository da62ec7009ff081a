"""Startup configuration loaded from the environment and an optional .env file."""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

API_KEY_VARIABLE = "OPENWEATHER_API_KEY"


class ConfigError(Exception):
    """Raised when the startup configuration is missing or unreadable."""


@dataclass(frozen=True)
class Settings:
    """Process-wide, read-only settings."""

    openweather_api_key: str


def load_settings(env_file: str = ".env") -> Settings:
    """
    Load settings, reading ``env_file`` into the environment first.

    A missing env file is fine as long as the key is already set; an env file
    that exists but cannot be read is an error.

    Raises:
        ConfigError: If the env file cannot be read or the API key is absent
    """
    if os.path.exists(env_file):
        try:
            load_dotenv(env_file)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Error loading {env_file} file: {exc}") from exc
        logging.debug("Loaded environment from %s", env_file)
    else:
        logging.debug("No %s file found, using process environment", env_file)

    api_key = os.getenv(API_KEY_VARIABLE, "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_VARIABLE} is required")

    logging.info("Configuration loaded")
    return Settings(openweather_api_key=api_key)
