"""Pydantic models for the SkyPulse backend."""

from .geocoding import GeocodedPlace, GeocodingSearchResult
from .report import DailyCard, DaylightSpan, HourlyCard, WeatherReport
from .weather import (
    Coordinates,
    CurrentConditions,
    DailySeries,
    HourlySeries,
    QuerySpec,
    WeatherModel,
    WeatherOutcome,
)

__all__ = [
    "Coordinates",
    "CurrentConditions",
    "DailyCard",
    "DailySeries",
    "DaylightSpan",
    "GeocodedPlace",
    "GeocodingSearchResult",
    "HourlyCard",
    "HourlySeries",
    "QuerySpec",
    "WeatherModel",
    "WeatherOutcome",
    "WeatherReport",
]
