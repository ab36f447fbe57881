"""City search endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from skypulse.api.dependencies import get_geocoding_ingestor
from skypulse.ingestors import GeocodingIngestor
from skypulse.models.geocoding import GeocodingSearchResult

router = APIRouter(prefix="/api/v1", tags=["geocoding"])

logger = logging.getLogger("skypulse.api.geocoding")


@router.get(
    "/geocoding/search",
    response_model=GeocodingSearchResult,
    summary="Search cities by name",
)
async def search_cities(
    name: str = Query(..., min_length=2, description="Free-text city name"),
    ingestor: GeocodingIngestor = Depends(get_geocoding_ingestor),
) -> GeocodingSearchResult:
    """Return matching places; 'no_results' and 'error' are reported separately."""

    result = await ingestor.search(name)
    logger.info("City search '%s' -> %s (%s results)", result.query, result.status, len(result.results))
    return result
