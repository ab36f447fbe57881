"""Orchestrate fetch, normalization and fallback into one held weather state."""

from __future__ import annotations

from datetime import datetime
import logging
import random
from typing import Any, Callable, Optional

from skypulse.config import settings
from skypulse.domain.errors import (
    DataProcessingError,
    FetchInProgressError,
    InvalidInputError,
    TransportError,
    WeatherPipelineError,
)
from skypulse.ingestors import WeatherIngestor
from skypulse.models.report import WeatherReport
from skypulse.models.weather import Coordinates, WeatherOutcome
from skypulse.services import derivation
from skypulse.services.fallback import FallbackSynthesizer
from skypulse.services.insights import generate_insights
from skypulse.services.normalizer import normalize, round_half_up
from skypulse.services.validation import require_valid_coordinates

logger = logging.getLogger("skypulse.services.weather")

FALLBACK_NOTICE = "Using cached weather data"


def _fallback_outcome(
    location_label: str,
    now: datetime,
    synthesizer: FallbackSynthesizer,
    error: WeatherPipelineError,
) -> WeatherOutcome:
    return WeatherOutcome(
        model=synthesizer.synthesize(location_label, now),
        used_fallback=True,
        notice=FALLBACK_NOTICE,
        error_kind=type(error).__name__,
    )


def normalize_or_fallback(
    raw: Any,
    coords: Optional[Coordinates],
    location_label: str,
    now: datetime,
    *,
    synthesizer: Optional[FallbackSynthesizer] = None,
) -> WeatherOutcome:
    """Return a normalized model, or a synthesized one on any failure path.

    ``raw`` is None when the transport failed. Invalid coordinates win over a
    payload: they route to the fallback even if data is present.
    """

    synthesizer = synthesizer or FallbackSynthesizer()
    try:
        if coords is None:
            raise InvalidInputError("No coordinates provided")
        require_valid_coordinates(coords.latitude, coords.longitude)
        if raw is None:
            raise TransportError("No payload received from the weather provider")
        model = normalize(raw, location_label)
    except (InvalidInputError, TransportError, DataProcessingError) as exc:
        logger.warning("Using fallback weather for %s: %s", location_label, exc)
        return _fallback_outcome(location_label, now, synthesizer, exc)
    return WeatherOutcome(model=model)


def build_report(outcome: WeatherOutcome, aqi: int) -> WeatherReport:
    """Assemble every display value for the dashboard from one outcome."""

    model = outcome.model
    current = model.current
    high, low = derivation.today_high_low(model)
    uv = derivation.uv_index(model.hourly.uv_index)
    chance = derivation.rain_chance(model.daily)

    return WeatherReport(
        weather=model,
        used_fallback=outcome.used_fallback,
        notice=outcome.notice,
        condition=derivation.condition_label(current.weather_code),
        icon=derivation.condition_icon(current.weather_code, current.is_day),
        today_high=high,
        today_low=low,
        wind_compass=derivation.wind_compass(current.wind_direction_deg),
        visibility_km=round_half_up(derivation.visibility_km(current.humidity)),
        uv_index=uv,
        uv_category=derivation.uv_category(uv),
        aqi=aqi,
        aqi_category=derivation.aqi_category(aqi),
        daylight=derivation.daylight_duration(model.daily),
        rain_chance_pct=chance,
        rain_icon=derivation.rain_icon(current.precipitation_mm, chance, current.cloud_cover_pct),
        hourly=derivation.hourly_cards(model),
        daily=derivation.daily_cards(model),
        insights=generate_insights(current),
    )


class WeatherService:
    """Owns the single held weather outcome and the busy flag.

    Only one refresh may run at a time; a second caller gets
    ``FetchInProgressError`` instead of queueing behind the first.
    """

    def __init__(
        self,
        weather_ingestor: Optional[WeatherIngestor] = None,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.weather_ingestor = weather_ingestor or WeatherIngestor()
        self.rng = rng or random.Random(settings.fallback_seed)
        self.synthesizer = FallbackSynthesizer(self.rng)
        self.clock = clock or datetime.now
        self._busy = False
        self._outcome: Optional[WeatherOutcome] = None

    @property
    def is_loading(self) -> bool:
        return self._busy

    @property
    def current(self) -> Optional[WeatherOutcome]:
        return self._outcome

    async def refresh(
        self,
        lat: Any,
        lon: Any,
        location_label: str,
        now: Optional[datetime] = None,
    ) -> WeatherOutcome:
        if self._busy:
            raise FetchInProgressError("A weather refresh is already in progress")

        self._busy = True
        try:
            now = now or self.clock()
            try:
                require_valid_coordinates(lat, lon)
                logger.info("Fetching weather data for %s", location_label)
                raw = await self.weather_ingestor.get_raw(lat, lon)
                model = normalize(raw, location_label)
            except (InvalidInputError, TransportError, DataProcessingError) as exc:
                logger.warning("Weather fetch error for %s: %s", location_label, exc)
                outcome = _fallback_outcome(location_label, now, self.synthesizer, exc)
            else:
                outcome = WeatherOutcome(model=model)

            self._outcome = outcome
            return outcome
        finally:
            self._busy = False

    def report(self, outcome: WeatherOutcome) -> WeatherReport:
        aqi = derivation.synthesize_aqi(
            self.rng, settings.aqi_placeholder_min, settings.aqi_placeholder_max
        )
        return build_report(outcome, aqi)


__all__ = [
    "FALLBACK_NOTICE",
    "WeatherService",
    "build_report",
    "normalize_or_fallback",
]
