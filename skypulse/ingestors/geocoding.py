"""City search using the Open-Meteo geocoding API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from skypulse.config import settings
from skypulse.models.geocoding import GeocodedPlace, GeocodingSearchResult

logger = logging.getLogger("skypulse.ingestors.geocoding")

COUNTRY_FLAGS = {
    "IN": "🇮🇳", "US": "🇺🇸", "GB": "🇬🇧", "CA": "🇨🇦", "AU": "🇦🇺",
    "DE": "🇩🇪", "FR": "🇫🇷", "JP": "🇯🇵", "CN": "🇨🇳", "BR": "🇧🇷",
    "IT": "🇮🇹", "ES": "🇪🇸", "RU": "🇷🇺", "KR": "🇰🇷", "MX": "🇲🇽",
    "NL": "🇳🇱", "BE": "🇧🇪", "CH": "🇨🇭", "AT": "🇦🇹", "SE": "🇸🇪",
    "DK": "🇩🇰", "NO": "🇳🇴", "FI": "🇫🇮", "PL": "🇵🇱", "CZ": "🇨🇿",
}
DEFAULT_FLAG = "🌍"


def country_flag(country_code: Optional[str]) -> str:
    if not country_code:
        return DEFAULT_FLAG
    return COUNTRY_FLAGS.get(country_code.upper(), DEFAULT_FLAG)


def display_name(name: str, admin1: Optional[str], country: Optional[str]) -> str:
    """Join name, region and country the way the location header shows them."""

    parts = [name]
    if admin1:
        parts.append(admin1)
    if country:
        parts.append(country)
    return ", ".join(parts)


def _to_place(entry: Any) -> Optional[GeocodedPlace]:
    if not isinstance(entry, dict):
        return None
    name = entry.get("name")
    if not name or entry.get("latitude") is None or entry.get("longitude") is None:
        return None
    try:
        return GeocodedPlace(
            name=name,
            latitude=entry["latitude"],
            longitude=entry["longitude"],
            country=entry.get("country"),
            country_code=entry.get("country_code"),
            admin1=entry.get("admin1"),
            display_name=display_name(name, entry.get("admin1"), entry.get("country")),
            flag=country_flag(entry.get("country_code")),
        )
    except ValidationError:
        logger.debug("Skipping malformed geocoding entry: %s", entry)
        return None


class GeocodingIngestor:
    """Resolve free-text place names into coordinates."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        count: int | None = None,
        language: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.geocoding_base_url
        self.timeout = timeout or settings.geocoding_timeout
        self.count = count or settings.geocoding_result_count
        self.language = language or settings.geocoding_language
        self.transport = transport

    async def search(self, name: str) -> GeocodingSearchResult:
        query = name.strip()
        params = {
            "name": query,
            "count": self.count,
            "language": self.language,
            "format": "json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Geocoding request timed out: %s", exc)
            return GeocodingSearchResult(query=query, status="error")
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Geocoding provider returned HTTP %s: %s", exc.response.status_code, exc
            )
            return GeocodingSearchResult(query=query, status="error")
        except httpx.RequestError as exc:
            logger.warning("Geocoding request failed: %s", exc)
            return GeocodingSearchResult(query=query, status="error")

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Failed to parse geocoding JSON response: %s", exc)
            return GeocodingSearchResult(query=query, status="error")

        raw_results = []
        if isinstance(payload, dict):
            raw_results = payload.get("results") or []

        places = [place for place in map(_to_place, raw_results) if place is not None]
        if not places:
            return GeocodingSearchResult(query=query, status="no_results")

        logger.debug("Geocoding '%s' returned %s places", query, len(places))
        return GeocodingSearchResult(query=query, status="ok", results=places)


__all__ = ["GeocodingIngestor", "country_flag", "display_name"]
