"""Provider clients for SkyPulse."""

from .geocoding import GeocodingIngestor
from .weather import WeatherIngestor, build_query

__all__ = [
    "GeocodingIngestor",
    "WeatherIngestor",
    "build_query",
]
