"""Configuration settings for the SkyPulse weather backend."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("skypulse.config")


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


def _get_optional_int(env_var: str) -> int | None:
    value = os.getenv(env_var)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer value for %s: %r", env_var, value)
        return None


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    skypulse_env: str = os.getenv("SKYPULSE_ENV", "local")
    log_level: str = os.getenv("SKYPULSE_LOG_LEVEL", "INFO")

    # Weather provider
    weather_base_url: str = os.getenv(
        "WEATHER_BASE_URL", "https://api.open-meteo.com/v1/forecast"
    )
    weather_timeout: float = float(os.getenv("WEATHER_TIMEOUT", "10.0"))
    forecast_days: int = int(os.getenv("WEATHER_FORECAST_DAYS", "7"))

    # Geocoding provider
    geocoding_base_url: str = os.getenv(
        "GEOCODING_BASE_URL", "https://geocoding-api.open-meteo.com/v1/search"
    )
    geocoding_timeout: float = float(os.getenv("GEOCODING_TIMEOUT", "5.0"))
    geocoding_result_count: int = int(os.getenv("GEOCODING_RESULT_COUNT", "6"))
    geocoding_language: str = os.getenv("GEOCODING_LANGUAGE", "en")

    # Location served when the caller does not pick one
    default_location_lat: float = float(os.getenv("DEFAULT_LOCATION_LAT", "25.3176"))
    default_location_lon: float = float(os.getenv("DEFAULT_LOCATION_LON", "82.9739"))
    default_location_name: str = os.getenv(
        "DEFAULT_LOCATION_NAME", "Varanasi, Uttar Pradesh, India"
    )

    # Fallback synthesis and the AQI placeholder
    fallback_seed: int | None = _get_optional_int("FALLBACK_SEED")
    aqi_placeholder_min: int = int(os.getenv("AQI_PLACEHOLDER_MIN", "25"))
    aqi_placeholder_max: int = int(os.getenv("AQI_PLACEHOLDER_MAX", "100"))

    log_requests: bool = _get_bool("SKYPULSE_LOG_REQUESTS", default=True)


settings = Settings()

__all__ = ["settings", "Settings"]
