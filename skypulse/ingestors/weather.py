"""Weather retrieval from Open-Meteo."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from skypulse.config import settings
from skypulse.domain.errors import DataProcessingError, TransportError
from skypulse.models.weather import QuerySpec

logger = logging.getLogger("skypulse.ingestors.weather")

CURRENT_VARIABLES = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "wind_speed_10m",
    "wind_direction_10m",
)
HOURLY_VARIABLES = (
    "temperature_2m",
    "precipitation_probability",
    "weather_code",
    "uv_index",
)
DAILY_VARIABLES = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "sunrise",
    "sunset",
    "uv_index_max",
    "precipitation_sum",
    "precipitation_probability_max",
)


def build_query(
    lat: float,
    lon: float,
    *,
    base_url: str | None = None,
    forecast_days: int | None = None,
) -> QuerySpec:
    """Describe the forecast request for the given coordinates.

    No network call is made; ``WeatherIngestor.fetch`` executes the returned query.
    """

    params = {
        "latitude": str(lat),
        "longitude": str(lon),
        "current": ",".join(CURRENT_VARIABLES),
        "hourly": ",".join(HOURLY_VARIABLES),
        "daily": ",".join(DAILY_VARIABLES),
        "timezone": "auto",
        "forecast_days": str(forecast_days or settings.forecast_days),
    }
    return QuerySpec(url=base_url or settings.weather_base_url, params=params)


class WeatherIngestor:
    """Fetch raw forecast payloads from Open-Meteo."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.weather_base_url
        self.timeout = timeout or settings.weather_timeout
        self.transport = transport

    async def get_raw(self, lat: float, lon: float) -> Any:
        return await self.fetch(build_query(lat, lon, base_url=self.base_url))

    async def fetch(self, query: QuerySpec) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(query.url, params=query.params)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.error("Weather request timed out: %s", exc)
            raise TransportError("Weather service timeout") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Weather service returned error: status=%s body=%s",
                exc.response.status_code,
                exc.response.text,
            )
            raise TransportError(
                f"Weather service error: {exc.response.status_code}"
            ) from exc
        except httpx.RequestError as exc:
            logger.error("Weather request failed: %s", exc)
            raise TransportError("Weather request failed") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Failed to parse weather JSON response: %s", exc)
            raise DataProcessingError("Weather response is not valid JSON") from exc

        logger.debug(
            "Weather payload received for %s,%s",
            query.params.get("latitude"),
            query.params.get("longitude"),
        )
        return payload


__all__ = ["WeatherIngestor", "build_query"]
