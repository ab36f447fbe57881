"""Domain constants and the error taxonomy for SkyPulse."""

from .errors import (
    DataProcessingError,
    FetchInProgressError,
    InvalidInputError,
    TransportError,
    WeatherPipelineError,
)
from .weather_codes import (
    CONDITION_ICONS,
    CONDITION_LABELS,
    GENERIC_ICONS,
    UNKNOWN_CONDITION,
    WeatherCode,
)

__all__ = [
    "CONDITION_ICONS",
    "CONDITION_LABELS",
    "DataProcessingError",
    "FetchInProgressError",
    "GENERIC_ICONS",
    "InvalidInputError",
    "TransportError",
    "UNKNOWN_CONDITION",
    "WeatherCode",
    "WeatherPipelineError",
]
