"""Coordinate checks performed before any provider call."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from skypulse.domain.errors import InvalidInputError


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_coordinates(lat: Any, lon: Any) -> bool:
    """Return True when both values are finite and inside the WGS84 ranges."""

    if not (_is_finite_number(lat) and _is_finite_number(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def require_valid_coordinates(lat: Any, lon: Any) -> None:
    if not validate_coordinates(lat, lon):
        raise InvalidInputError(f"Invalid coordinates provided: lat={lat!r} lon={lon!r}")


__all__ = ["require_valid_coordinates", "validate_coordinates"]
