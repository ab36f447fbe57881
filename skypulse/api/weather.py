"""Weather report endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from skypulse.api.dependencies import get_weather_service
from skypulse.config import settings
from skypulse.domain.errors import FetchInProgressError
from skypulse.models.report import WeatherReport
from skypulse.services import WeatherService

router = APIRouter(prefix="/api/v1", tags=["weather"])

logger = logging.getLogger("skypulse.api.weather")


@router.get(
    "/weather",
    response_model=WeatherReport,
    summary="Fetch the weather report for a location",
)
async def get_weather(
    latitude: Optional[float] = Query(
        default=None, description="Latitude in decimal degrees"
    ),
    longitude: Optional[float] = Query(
        default=None, description="Longitude in decimal degrees"
    ),
    name: Optional[str] = Query(
        default=None, description="Display label for the location"
    ),
    service: WeatherService = Depends(get_weather_service),
) -> WeatherReport:
    """Refresh the held weather state and return its report.

    Out-of-range coordinates are not rejected; they produce a synthesized
    report flagged with ``used_fallback``.
    """

    if latitude is None and longitude is None:
        latitude = settings.default_location_lat
        longitude = settings.default_location_lon
        name = name or settings.default_location_name

    label = name or f"{latitude}, {longitude}"

    try:
        outcome = await service.refresh(latitude, longitude, label)
    except FetchInProgressError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc

    report = service.report(outcome)
    logger.info(
        "Weather report built: location=%s fallback=%s condition=%s",
        label,
        report.used_fallback,
        report.condition,
    )
    return report


@router.get(
    "/weather/current",
    response_model=WeatherReport,
    summary="Return the report for the most recently fetched weather",
)
async def get_current_weather(
    service: WeatherService = Depends(get_weather_service),
) -> WeatherReport:
    outcome = service.current
    if outcome is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No weather data loaded yet"
        )
    return service.report(outcome)
