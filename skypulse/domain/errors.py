"""Failure taxonomy for the weather pipeline.

Every error below is recoverable: the orchestration layer routes the first
three to the fallback synthesizer and never surfaces them as hard failures.
"""

from __future__ import annotations


class WeatherPipelineError(RuntimeError):
    """Base class for weather pipeline failures."""


class InvalidInputError(WeatherPipelineError):
    """Coordinates are non-numeric, non-finite or out of range."""


class TransportError(WeatherPipelineError):
    """The provider could not be reached, timed out or returned a non-2xx status."""


class DataProcessingError(WeatherPipelineError):
    """The provider answered but the payload could not be normalized."""


class FetchInProgressError(WeatherPipelineError):
    """A refresh was requested while another one is still in flight."""


__all__ = [
    "DataProcessingError",
    "FetchInProgressError",
    "InvalidInputError",
    "TransportError",
    "WeatherPipelineError",
]
