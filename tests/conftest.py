from pathlib import Path
import sys
from typing import Any

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


def build_payload() -> dict[str, Any]:
    """Open-Meteo style forecast covering two days of hourly data."""

    hours = range(48)
    return {
        "latitude": 25.3,
        "longitude": 82.97,
        "timezone": "Asia/Kolkata",
        "current": {
            "time": "2024-06-01T00:00",
            "temperature_2m": 32.6,
            "relative_humidity_2m": 40,
            "apparent_temperature": 35.2,
            "is_day": 1,
            "precipitation": 0.0,
            "weather_code": 2,
            "cloud_cover": 30,
            "pressure_msl": 1008.4,
            "wind_speed_10m": 12.3,
            "wind_direction_10m": 225.0,
        },
        "hourly": {
            "time": [f"2024-06-0{1 + h // 24}T{h % 24:02d}:00" for h in hours],
            "temperature_2m": [20.0 + h * 0.25 for h in hours],
            "precipitation_probability": [h % 100 for h in hours],
            "weather_code": [0 if h % 24 < 12 else 61 for h in hours],
            "uv_index": [float(max(0, 8 - abs(h % 24 - 12))) for h in hours],
        },
        "daily": {
            "time": [f"2024-06-0{d + 1}" for d in range(7)],
            "weather_code": [2, 61, 3, 0, 95, 1, 45],
            "temperature_2m_max": [35.4, 36.5, 34.0, 33.2, 31.9, 30.5, 29.0],
            "temperature_2m_min": [27.1, 26.5, 25.0, 24.4, 23.9, 23.5, 22.0],
            "sunrise": [f"2024-06-0{d + 1}T05:12" for d in range(7)],
            "sunset": [f"2024-06-0{d + 1}T18:53" for d in range(7)],
            "uv_index_max": [9.8, 9.1, 8.7, 10.2, 7.5, 6.0, 8.1],
            "precipitation_sum": [0.0, 4.2, 0.3, 0.0, 12.5, 0.0, 0.1],
            "precipitation_probability_max": [45, 80, 10, 0, 95, 5, 20],
        },
    }


@pytest.fixture
def raw_payload() -> dict[str, Any]:
    return build_payload()
