"""Geocoding search models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class GeocodedPlace(BaseModel):
    """A single search hit from the geocoding provider."""

    name: str = Field(..., description="Place name")
    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")
    country: Optional[str] = Field(default=None, description="Country name")
    country_code: Optional[str] = Field(default=None, description="ISO 3166-1 alpha-2 code")
    admin1: Optional[str] = Field(default=None, description="First-level subdivision")
    display_name: str = Field(..., description="Label used as the weather location")
    flag: str = Field(..., description="Country flag emoji")

    model_config = ConfigDict(extra="ignore")


class GeocodingSearchResult(BaseModel):
    """Search outcome; 'no_results' and 'error' are distinct states."""

    query: str
    status: Literal["ok", "no_results", "error"]
    results: list[GeocodedPlace] = Field(default_factory=list)


__all__ = ["GeocodedPlace", "GeocodingSearchResult"]
