"""FastAPI dependencies resolving the per-application weather context."""

from __future__ import annotations

from fastapi import Request

from skypulse.ingestors import GeocodingIngestor
from skypulse.services import WeatherService


def get_weather_service(request: Request) -> WeatherService:
    """Return the weather context owned by the application, creating it on first use."""

    service = getattr(request.app.state, "weather_service", None)
    if service is None:
        service = WeatherService()
        request.app.state.weather_service = service
    return service


def get_geocoding_ingestor(request: Request) -> GeocodingIngestor:
    ingestor = getattr(request.app.state, "geocoding_ingestor", None)
    if ingestor is None:
        ingestor = GeocodingIngestor()
        request.app.state.geocoding_ingestor = ingestor
    return ingestor


__all__ = ["get_geocoding_ingestor", "get_weather_service"]
