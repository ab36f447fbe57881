"""Convert raw Open-Meteo payloads into a complete ``WeatherModel``.

Every scalar falls back to a documented default when the provider omits it or
returns null. Series are cut to their forward-looking windows and aligned on
their time axis so parallel arrays always share one length.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
import logging
import math
from typing import Any, Callable, Optional, TypeVar

from pydantic import ValidationError

from skypulse.domain.errors import DataProcessingError
from skypulse.models.weather import (
    CurrentConditions,
    DailySeries,
    HourlySeries,
    WeatherModel,
)

logger = logging.getLogger("skypulse.services.normalizer")

T = TypeVar("T")

DEFAULT_TEMPERATURE = 20
DEFAULT_APPARENT_TEMPERATURE = 20
DEFAULT_HUMIDITY = 50
DEFAULT_WIND_SPEED = 10
DEFAULT_PRESSURE = 1013
DEFAULT_CLOUD_COVER = 50
DEFAULT_WEATHER_CODE = 1
DEFAULT_IS_DAY = 1
DEFAULT_PRECIPITATION = 0
DEFAULT_WIND_DIRECTION = 0
DEFAULT_PROBABILITY = 0
DEFAULT_UV_INDEX = 0

HOURLY_POINTS = 12
UV_POINTS = 24
DAILY_POINTS = 7


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""

    return int(math.floor(value + 0.5))


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DataProcessingError(f"'{key}' section must be an object, got {type(value).__name__}")
    return value


def _to_number(value: Any, default: float, field: str) -> float:
    if value is None:
        return float(default)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise DataProcessingError(f"Non-numeric value for '{field}': {value!r}") from exc
    if not math.isfinite(number):
        return float(default)
    return number


def _scalar(section: Mapping[str, Any], key: str, default: float) -> float:
    return _to_number(section.get(key), default, key)


def _array(section: Mapping[str, Any], key: str) -> list[Any]:
    value = section.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise DataProcessingError(f"Expected list for '{key}', got {type(value).__name__}")
    return list(value)


def _fit(values: list[T], length: int, filler: T) -> list[T]:
    return values[:length] + [filler] * (length - len(values))


def _numbers(values: list[Any], default: float, field: str, length: int) -> list[float]:
    converted = [_to_number(value, default, field) for value in values]
    return _fit(converted, length, float(default))


def _parse_timestamp(raw: Any, field: str) -> datetime:
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        raise DataProcessingError(f"Expected timestamp string for '{field}', got {raw!r}")
    if raw.endswith("Z"):
        raw = raw.replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise DataProcessingError(f"Unparseable timestamp for '{field}': {raw!r}") from exc


def _parse_optional_timestamp(raw: Any, field: str) -> Optional[datetime]:
    if raw is None:
        return None
    return _parse_timestamp(raw, field)


def _parse_date(raw: Any) -> date:
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        raise DataProcessingError(f"Expected date string for 'daily.time', got {raw!r}")
    try:
        return date.fromisoformat(raw[:10])
    except ValueError as exc:
        raise DataProcessingError(f"Unparseable date for 'daily.time': {raw!r}") from exc


def _rounded(values: list[float]) -> tuple[int, ...]:
    return tuple(round_half_up(value) for value in values)


def _normalize_current(current: Mapping[str, Any]) -> CurrentConditions:
    is_day = _scalar(current, "is_day", DEFAULT_IS_DAY)
    return CurrentConditions(
        temperature=round_half_up(_scalar(current, "temperature_2m", DEFAULT_TEMPERATURE)),
        apparent_temperature=round_half_up(
            _scalar(current, "apparent_temperature", DEFAULT_APPARENT_TEMPERATURE)
        ),
        humidity=round_half_up(_scalar(current, "relative_humidity_2m", DEFAULT_HUMIDITY)),
        wind_speed=round_half_up(_scalar(current, "wind_speed_10m", DEFAULT_WIND_SPEED)),
        wind_direction_deg=_scalar(current, "wind_direction_10m", DEFAULT_WIND_DIRECTION),
        pressure=round_half_up(_scalar(current, "pressure_msl", DEFAULT_PRESSURE)),
        cloud_cover_pct=round_half_up(_scalar(current, "cloud_cover", DEFAULT_CLOUD_COVER)),
        weather_code=round_half_up(_scalar(current, "weather_code", DEFAULT_WEATHER_CODE)),
        is_day=1 if is_day else 0,
        precipitation_mm=_scalar(current, "precipitation", DEFAULT_PRECIPITATION),
    )


def _normalize_hourly(hourly: Mapping[str, Any]) -> HourlySeries:
    # Sample 0 is the hour already under way; the strip starts at the next one.
    window = slice(1, 1 + HOURLY_POINTS)
    times = [_parse_timestamp(raw, "hourly.time") for raw in _array(hourly, "time")[window]]
    length = len(times)

    def series(key: str, default: float) -> list[float]:
        return _numbers(_array(hourly, key)[window], default, key, length)

    uv_raw = _array(hourly, "uv_index")[:UV_POINTS]
    uv_index = [_to_number(value, DEFAULT_UV_INDEX, "uv_index") for value in uv_raw]

    return HourlySeries(
        time=tuple(times),
        temperature=_rounded(series("temperature_2m", DEFAULT_TEMPERATURE)),
        precipitation_probability_pct=_rounded(
            series("precipitation_probability", DEFAULT_PROBABILITY)
        ),
        weather_code=_rounded(series("weather_code", DEFAULT_WEATHER_CODE)),
        uv_index=tuple(uv_index),
    )


def _normalize_daily(daily: Mapping[str, Any]) -> DailySeries:
    dates = [_parse_date(raw) for raw in _array(daily, "time")[:DAILY_POINTS]]
    length = len(dates)

    def series(key: str, default: float) -> list[float]:
        return _numbers(_array(daily, key)[:DAILY_POINTS], default, key, length)

    def timestamps(key: str) -> tuple[Optional[datetime], ...]:
        parsed = [
            _parse_optional_timestamp(raw, f"daily.{key}")
            for raw in _array(daily, key)[:DAILY_POINTS]
        ]
        return tuple(_fit(parsed, length, None))

    return DailySeries(
        date=tuple(dates),
        temperature_max=_rounded(series("temperature_2m_max", DEFAULT_TEMPERATURE)),
        temperature_min=_rounded(series("temperature_2m_min", DEFAULT_TEMPERATURE)),
        weather_code=_rounded(series("weather_code", DEFAULT_WEATHER_CODE)),
        sunrise=timestamps("sunrise"),
        sunset=timestamps("sunset"),
        uv_index_max=tuple(series("uv_index_max", DEFAULT_UV_INDEX)),
        precipitation_sum_mm=tuple(series("precipitation_sum", DEFAULT_PRECIPITATION)),
        precipitation_probability_max_pct=_rounded(
            series("precipitation_probability_max", DEFAULT_PROBABILITY)
        ),
    )


def normalize(raw: Any, location_label: str) -> WeatherModel:
    """Build a ``WeatherModel`` from a provider payload.

    Raises ``DataProcessingError`` when the payload is not an object or one of
    its fields has the wrong shape. Missing values never raise.
    """

    if not isinstance(raw, Mapping):
        raise DataProcessingError(
            f"Weather payload must be an object, got {type(raw).__name__}"
        )

    builders: list[tuple[str, Callable[[Mapping[str, Any]], Any]]] = [
        ("current", _normalize_current),
        ("hourly", _normalize_hourly),
        ("daily", _normalize_daily),
    ]
    try:
        parts = {key: build(_section(raw, key)) for key, build in builders}
        model = WeatherModel(location=location_label, **parts)
    except ValidationError as exc:
        raise DataProcessingError("Failed to process weather data") from exc

    logger.debug(
        "Normalized weather for %s: hourly=%s daily=%s",
        location_label,
        len(model.hourly.time),
        len(model.daily.date),
    )
    return model


__all__ = ["normalize", "round_half_up"]
