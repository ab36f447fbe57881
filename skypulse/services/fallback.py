"""Synthetic weather used when the provider cannot be used."""

from __future__ import annotations

from datetime import datetime, time, timedelta
import logging
import math
import random
from typing import Optional

from skypulse.domain.weather_codes import WeatherCode
from skypulse.models.weather import (
    CurrentConditions,
    DailySeries,
    HourlySeries,
    WeatherModel,
)
from skypulse.services.derivation import is_daytime_hour
from skypulse.services.normalizer import (
    DAILY_POINTS,
    HOURLY_POINTS,
    UV_POINTS,
    round_half_up,
)

logger = logging.getLogger("skypulse.services.fallback")

BASELINE_RANGE = (15.0, 40.0)
DIURNAL_AMPLITUDE = 8.0

# Chance that a slot is coded as slight rain instead of clear weather
CURRENT_RAIN_CHANCE = 0.3
HOURLY_RAIN_CHANCE = 0.2
DAILY_RAIN_CHANCE = 0.4

SUNRISE_BASE = time(6, 15)
SUNRISE_JITTER_MINUTES = 30
SUNSET_BASE = time(18, 30)
SUNSET_JITTER_MINUTES = 60


def _clear_code(is_day: bool) -> int:
    return int(WeatherCode.MOSTLY_CLEAR if is_day else WeatherCode.CLEAR_SKY)


class FallbackSynthesizer:
    """Produce a complete, plausible ``WeatherModel`` without network access.

    Values are drawn from the injected random source, so a seeded
    ``random.Random`` makes the output reproducible. The output has the same
    shape as normalized provider data: 12 hourly points, 24 UV values and 7
    days.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def synthesize(self, location_label: str, now: datetime) -> WeatherModel:
        baseline = self.rng.uniform(*BASELINE_RANGE)
        model = WeatherModel(
            location=location_label,
            current=self._current(baseline, now),
            hourly=self._hourly(baseline, now),
            daily=self._daily(baseline, now),
        )
        logger.debug(
            "Synthesized fallback weather for %s (baseline %.1f C)", location_label, baseline
        )
        return model

    def _jitter(self, spread: float) -> float:
        return (self.rng.random() - 0.5) * spread

    def _current(self, baseline: float, now: datetime) -> CurrentConditions:
        rng = self.rng
        is_day = is_daytime_hour(now.hour)
        if rng.random() < CURRENT_RAIN_CHANCE:
            code = int(WeatherCode.SLIGHT_RAIN)
        else:
            code = _clear_code(is_day)
        return CurrentConditions(
            temperature=round_half_up(baseline),
            apparent_temperature=round_half_up(baseline + self._jitter(8)),
            humidity=round_half_up(rng.uniform(30, 80)),
            wind_speed=round_half_up(rng.uniform(2, 27)),
            wind_direction_deg=rng.uniform(0, 360),
            pressure=round_half_up(rng.uniform(995, 1035)),
            cloud_cover_pct=round_half_up(rng.uniform(0, 100)),
            weather_code=code,
            is_day=1 if is_day else 0,
            precipitation_mm=rng.uniform(0, 5),
        )

    def _hourly(self, baseline: float, now: datetime) -> HourlySeries:
        rng = self.rng
        top_of_hour = now.replace(minute=0, second=0, microsecond=0)
        times = [top_of_hour + timedelta(hours=i + 1) for i in range(HOURLY_POINTS)]

        temperatures = []
        codes = []
        for slot in times:
            hour = slot.hour
            swing = DIURNAL_AMPLITUDE * math.sin((hour - 6) * math.pi / 12)
            temperatures.append(round_half_up(baseline + swing + self._jitter(4)))
            if rng.random() < HOURLY_RAIN_CHANCE:
                codes.append(int(WeatherCode.SLIGHT_RAIN))
            else:
                codes.append(_clear_code(is_daytime_hour(hour)))

        probabilities = [round_half_up(rng.uniform(0, 80)) for _ in times]

        # Indexed by hour of the local day, like the provider's unshifted UV series.
        uv_index = [
            float(round_half_up(rng.uniform(2, 11))) if 7 <= hour <= 18 else 0.0
            for hour in range(UV_POINTS)
        ]

        return HourlySeries(
            time=tuple(times),
            temperature=tuple(temperatures),
            precipitation_probability_pct=tuple(probabilities),
            weather_code=tuple(codes),
            uv_index=tuple(uv_index),
        )

    def _daily(self, baseline: float, now: datetime) -> DailySeries:
        rng = self.rng
        days = [now.date() + timedelta(days=i) for i in range(DAILY_POINTS)]

        def at(day, base: time, jitter_minutes: int) -> datetime:
            start = datetime.combine(day, base, tzinfo=now.tzinfo)
            return start + timedelta(minutes=int(rng.random() * jitter_minutes))

        return DailySeries(
            date=tuple(days),
            temperature_max=tuple(round_half_up(baseline + rng.uniform(3, 11)) for _ in days),
            temperature_min=tuple(round_half_up(baseline + rng.uniform(-8, -2)) for _ in days),
            weather_code=tuple(
                int(WeatherCode.SLIGHT_RAIN)
                if rng.random() < DAILY_RAIN_CHANCE
                else int(WeatherCode.MOSTLY_CLEAR)
                for _ in days
            ),
            sunrise=tuple(at(day, SUNRISE_BASE, SUNRISE_JITTER_MINUTES) for day in days),
            sunset=tuple(at(day, SUNSET_BASE, SUNSET_JITTER_MINUTES) for day in days),
            uv_index_max=tuple(float(round_half_up(rng.uniform(3, 11))) for _ in days),
            precipitation_sum_mm=tuple(rng.uniform(0, 15) for _ in days),
            precipitation_probability_max_pct=tuple(
                round_half_up(rng.uniform(0, 80)) for _ in days
            ),
        )


__all__ = ["FallbackSynthesizer"]
