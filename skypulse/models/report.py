"""Display-ready values derived from a weather model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from skypulse.models.weather import WeatherModel


class DaylightSpan(BaseModel):
    """Time between the first sunrise and sunset of the forecast."""

    hours: int = Field(..., description="Whole hours of daylight")
    minutes: int = Field(..., description="Remaining minutes of daylight")
    label: str = Field(..., description="Display form, e.g. '13h 41m'")


class HourlyCard(BaseModel):
    """One slot of the 12-hour strip."""

    label: str = Field(..., description="'Now' for the first slot, HH:00 otherwise")
    icon: str
    temperature: int
    precipitation_probability_pct: int


class DailyCard(BaseModel):
    """One row of the weekly forecast."""

    label: str = Field(..., description="'Today', 'Tomorrow' or a weekday name")
    icon: str
    temperature_max: int
    temperature_min: int


class WeatherReport(BaseModel):
    """Everything the dashboard shows for one location."""

    weather: WeatherModel
    used_fallback: bool = False
    notice: Optional[str] = None

    condition: str = Field(..., description="Condition label for the current code")
    icon: str = Field(..., description="Condition icon for the current code")
    today_high: int
    today_low: int
    wind_compass: str = Field(..., description="16-point compass label")
    visibility_km: int = Field(..., description="Humidity-based visibility estimate")
    uv_index: int
    uv_category: str
    aqi: int = Field(..., description="Placeholder air quality index")
    aqi_category: str
    daylight: Optional[DaylightSpan] = Field(
        default=None, description="Absent when sunrise or sunset is unknown"
    )
    rain_chance_pct: int
    rain_icon: str
    hourly: list[HourlyCard] = Field(default_factory=list)
    daily: list[DailyCard] = Field(default_factory=list)
    insights: list[str] = Field(default_factory=list)


__all__ = ["DailyCard", "DaylightSpan", "HourlyCard", "WeatherReport"]
