"""Derived indicators computed from a ``WeatherModel``.

All functions are total: they return a display value for any input the model
can hold, including weather codes outside the WMO table.
"""

from __future__ import annotations

import math
import random
from typing import Optional

from skypulse.domain.weather_codes import (
    CONDITION_ICONS,
    CONDITION_LABELS,
    GENERIC_ICONS,
    UNKNOWN_CONDITION,
    WeatherCode,
)
from skypulse.models.report import DailyCard, DaylightSpan, HourlyCard
from skypulse.models.weather import DailySeries, WeatherModel
from skypulse.services.normalizer import round_half_up

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

MIN_VISIBILITY_KM = 5
DEFAULT_UV_INDEX = 4
DAYLIGHT_UV_HOURS = slice(6, 18)
WEEKLY_CARDS = 6

UV_LEVELS = (
    (2, "Low"),
    (5, "Moderate"),
    (7, "High"),
    (10, "Very High"),
)
AQI_LEVELS = (
    (50, "Good"),
    (100, "Moderate"),
    (150, "Unhealthy for Sensitive"),
    (200, "Unhealthy"),
    (300, "Very Unhealthy"),
)

RAIN_ICON = "🌧️"
SHOWERS_ICON = "🌦️"
PARTLY_CLOUDY_ICON = "⛅"
CLOUDY_ICON = "☁️"
CLEAR_ICON = "☀️"


def is_daytime_hour(hour: int) -> bool:
    return 6 < hour < 20


def condition_label(code: int) -> str:
    known = WeatherCode.parse(code)
    if known is None:
        return UNKNOWN_CONDITION
    return CONDITION_LABELS.get(known, UNKNOWN_CONDITION)


def condition_icon(code: int, is_day: bool | int) -> str:
    day_icon, night_icon = GENERIC_ICONS
    known = WeatherCode.parse(code)
    if known is not None:
        day_icon, night_icon = CONDITION_ICONS.get(known, GENERIC_ICONS)
    return day_icon if is_day else night_icon


def visibility_km(humidity: float) -> float:
    """Humidity-only visibility heuristic, not a physical model."""

    return max(MIN_VISIBILITY_KM, 25 - humidity / 10)


def wind_compass(degrees: float) -> str:
    if not math.isfinite(degrees):
        return COMPASS_POINTS[0]
    return COMPASS_POINTS[round_half_up(degrees / 22.5) % len(COMPASS_POINTS)]


def uv_index(hourly_uv: tuple[float, ...] | list[float]) -> int:
    """Peak UV over daylight hours (06:00-17:59), or 4 when none is positive."""

    daylight = [value for value in hourly_uv[DAYLIGHT_UV_HOURS] if value > 0]
    if not daylight:
        return DEFAULT_UV_INDEX
    return round_half_up(max(daylight))


def uv_category(uv: float) -> str:
    for upper, label in UV_LEVELS:
        if uv <= upper:
            return label
    return "Extreme"


def synthesize_aqi(rng: random.Random, low: int = 25, high: int = 100) -> int:
    """Placeholder air quality index; there is no air-quality provider."""

    return round_half_up(rng.uniform(low, high))


def aqi_category(aqi: float) -> str:
    for upper, label in AQI_LEVELS:
        if aqi <= upper:
            return label
    return "Hazardous"


def daylight_duration(daily: DailySeries) -> Optional[DaylightSpan]:
    if not daily.sunrise or not daily.sunset:
        return None
    sunrise, sunset = daily.sunrise[0], daily.sunset[0]
    if sunrise is None or sunset is None:
        return None
    try:
        span = sunset - sunrise
    except TypeError:
        # naive and aware timestamps cannot be compared
        return None
    total_minutes = int(span.total_seconds() // 60)
    if total_minutes < 0:
        return None
    hours, minutes = divmod(total_minutes, 60)
    return DaylightSpan(hours=hours, minutes=minutes, label=f"{hours}h {minutes}m")


def rain_chance(daily: DailySeries) -> int:
    if not daily.precipitation_probability_max_pct:
        return 0
    return round_half_up(daily.precipitation_probability_max_pct[0])


def rain_icon(precipitation_mm: float, rain_chance_pct: float, cloud_cover_pct: float) -> str:
    if precipitation_mm > 0.5:
        return RAIN_ICON
    if rain_chance_pct > 60:
        return SHOWERS_ICON
    if rain_chance_pct > 30:
        return PARTLY_CLOUDY_ICON
    if cloud_cover_pct > 70:
        return CLOUDY_ICON
    return CLEAR_ICON


def today_high_low(model: WeatherModel) -> tuple[int, int]:
    current = model.current
    high = model.daily.temperature_max[0] if model.daily.temperature_max else current.temperature + 6
    low = model.daily.temperature_min[0] if model.daily.temperature_min else current.temperature - 8
    return high, low


def hourly_cards(model: WeatherModel) -> list[HourlyCard]:
    hourly = model.hourly
    cards = []
    for i, slot in enumerate(hourly.time):
        cards.append(
            HourlyCard(
                label="Now" if i == 0 else f"{slot.hour:02d}:00",
                icon=condition_icon(hourly.weather_code[i], is_daytime_hour(slot.hour)),
                temperature=hourly.temperature[i],
                precipitation_probability_pct=hourly.precipitation_probability_pct[i],
            )
        )
    return cards


def daily_cards(model: WeatherModel) -> list[DailyCard]:
    daily = model.daily
    cards = []
    for i, day in enumerate(daily.date[:WEEKLY_CARDS]):
        if i == 0:
            label = "Today"
        elif i == 1:
            label = "Tomorrow"
        else:
            label = DAY_NAMES[day.weekday()]
        cards.append(
            DailyCard(
                label=label,
                icon=condition_icon(daily.weather_code[i], True),
                temperature_max=daily.temperature_max[i],
                temperature_min=daily.temperature_min[i],
            )
        )
    return cards


__all__ = [
    "aqi_category",
    "condition_icon",
    "condition_label",
    "daily_cards",
    "daylight_duration",
    "hourly_cards",
    "is_daytime_hour",
    "rain_chance",
    "rain_icon",
    "synthesize_aqi",
    "today_high_low",
    "uv_category",
    "uv_index",
    "visibility_km",
    "wind_compass",
]
