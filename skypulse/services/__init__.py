"""Service-layer helpers for SkyPulse."""

from .derivation import (
    aqi_category,
    condition_icon,
    condition_label,
    daily_cards,
    daylight_duration,
    hourly_cards,
    rain_chance,
    rain_icon,
    synthesize_aqi,
    today_high_low,
    uv_category,
    uv_index,
    visibility_km,
    wind_compass,
)
from .fallback import FallbackSynthesizer
from .insights import generate_insights
from .normalizer import normalize
from .validation import require_valid_coordinates, validate_coordinates
from .weather_service import (
    FALLBACK_NOTICE,
    WeatherService,
    build_report,
    normalize_or_fallback,
)

__all__ = [
    "FALLBACK_NOTICE",
    "FallbackSynthesizer",
    "WeatherService",
    "aqi_category",
    "build_report",
    "condition_icon",
    "condition_label",
    "daily_cards",
    "daylight_duration",
    "generate_insights",
    "hourly_cards",
    "normalize",
    "normalize_or_fallback",
    "rain_chance",
    "rain_icon",
    "require_valid_coordinates",
    "synthesize_aqi",
    "today_high_low",
    "uv_category",
    "uv_index",
    "validate_coordinates",
    "visibility_km",
    "wind_compass",
]
