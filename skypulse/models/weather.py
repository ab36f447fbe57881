"""Normalized weather model shared by the provider and fallback paths."""

from __future__ import annotations

import datetime as dt
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Coordinates(BaseModel):
    """Latitude/longitude pair as received from the caller, not yet validated."""

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")

    model_config = ConfigDict(frozen=True)


class QuerySpec(BaseModel):
    """Provider request description consumed by the transport."""

    url: str = Field(..., description="Provider endpoint")
    params: dict[str, str] = Field(..., description="Query string parameters")

    model_config = ConfigDict(frozen=True)


class CurrentConditions(BaseModel):
    """Conditions at the time of the fetch; every field is always populated."""

    temperature: int = Field(..., description="Air temperature in Celsius")
    apparent_temperature: int = Field(..., description="Feels-like temperature in Celsius")
    humidity: int = Field(..., description="Relative humidity in percent")
    wind_speed: int = Field(..., description="Wind speed at 10 m in km/h")
    wind_direction_deg: float = Field(..., description="Wind direction in degrees")
    pressure: int = Field(..., description="Mean sea level pressure in hPa")
    cloud_cover_pct: int = Field(..., description="Cloud cover percentage")
    weather_code: int = Field(..., description="WMO weather code")
    is_day: Literal[0, 1] = Field(..., description="1 during daylight, 0 at night")
    precipitation_mm: float = Field(..., description="Precipitation in millimeters")

    model_config = ConfigDict(frozen=True)


class HourlySeries(BaseModel):
    """Forward-looking hourly points plus a 24-hour UV series."""

    time: tuple[datetime, ...] = Field(default=(), description="Slot start times")
    temperature: tuple[int, ...] = Field(default=(), description="Temperature in Celsius")
    precipitation_probability_pct: tuple[int, ...] = Field(
        default=(), description="Precipitation probability in percent"
    )
    weather_code: tuple[int, ...] = Field(default=(), description="WMO weather codes")
    uv_index: tuple[float, ...] = Field(
        default=(), description="UV index for each hour of the local day"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_parallel_lengths(self) -> "HourlySeries":
        lengths = {
            len(self.time),
            len(self.temperature),
            len(self.precipitation_probability_pct),
            len(self.weather_code),
        }
        if len(lengths) != 1:
            raise ValueError("hourly series arrays must share the same length")
        return self


class DailySeries(BaseModel):
    """Per-day forecast; index i refers to the same day in every field."""

    date: tuple[dt.date, ...] = Field(default=(), description="Forecast dates")
    temperature_max: tuple[int, ...] = Field(default=(), description="Daily maximum in Celsius")
    temperature_min: tuple[int, ...] = Field(default=(), description="Daily minimum in Celsius")
    weather_code: tuple[int, ...] = Field(default=(), description="WMO weather codes")
    sunrise: tuple[Optional[datetime], ...] = Field(default=(), description="Sunrise times")
    sunset: tuple[Optional[datetime], ...] = Field(default=(), description="Sunset times")
    uv_index_max: tuple[float, ...] = Field(default=(), description="Daily maximum UV index")
    precipitation_sum_mm: tuple[float, ...] = Field(
        default=(), description="Daily precipitation sum in millimeters"
    )
    precipitation_probability_max_pct: tuple[int, ...] = Field(
        default=(), description="Daily maximum precipitation probability in percent"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_parallel_lengths(self) -> "DailySeries":
        lengths = {
            len(self.date),
            len(self.temperature_max),
            len(self.temperature_min),
            len(self.weather_code),
            len(self.sunrise),
            len(self.sunset),
            len(self.uv_index_max),
            len(self.precipitation_sum_mm),
            len(self.precipitation_probability_max_pct),
        }
        if len(lengths) != 1:
            raise ValueError("daily series arrays must share the same length")
        return self


class WeatherModel(BaseModel):
    """Complete weather picture for one location, built atomically."""

    location: str = Field(..., description="Human-readable place label")
    current: CurrentConditions
    hourly: HourlySeries
    daily: DailySeries

    model_config = ConfigDict(frozen=True)


class WeatherOutcome(BaseModel):
    """Result of one fetch cycle, real or synthesized."""

    model: WeatherModel
    used_fallback: bool = Field(
        default=False, description="True when the model was synthesized"
    )
    notice: Optional[str] = Field(
        default=None, description="Low-severity message for the user, if any"
    )
    error_kind: Optional[str] = Field(
        default=None, description="Name of the failure that triggered the fallback"
    )

    model_config = ConfigDict(frozen=True)


__all__ = [
    "Coordinates",
    "CurrentConditions",
    "DailySeries",
    "HourlySeries",
    "QuerySpec",
    "WeatherModel",
    "WeatherOutcome",
]
