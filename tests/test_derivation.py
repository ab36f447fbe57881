from datetime import date, datetime
import random

import pytest

from skypulse.domain.weather_codes import GENERIC_ICONS, UNKNOWN_CONDITION, WeatherCode
from skypulse.models.weather import DailySeries
from skypulse.services import derivation
from skypulse.services.fallback import FallbackSynthesizer
from skypulse.services.normalizer import normalize


def _daily(sunrise, sunset) -> DailySeries:
    return DailySeries(
        date=(date(2024, 6, 1),),
        temperature_max=(30,),
        temperature_min=(20,),
        weather_code=(1,),
        sunrise=(sunrise,),
        sunset=(sunset,),
        uv_index_max=(7.0,),
        precipitation_sum_mm=(0.0,),
        precipitation_probability_max_pct=(64,),
    )


@pytest.mark.parametrize("code", [member.value for member in WeatherCode] + [42, 999, -1])
def test_condition_lookups_are_total(code):
    assert derivation.condition_label(code)
    assert derivation.condition_icon(code, True)
    assert derivation.condition_icon(code, False)


def test_condition_lookup_values():
    assert derivation.condition_label(0) == "Clear Sky"
    assert derivation.condition_label(61) == "Slight Rain"
    assert derivation.condition_label(99) == "Heavy Thunderstorm with Hail"
    assert derivation.condition_icon(0, True) == "☀️"
    assert derivation.condition_icon(0, False) == "🌙"
    assert derivation.condition_icon(65, True) == "⛈️"


def test_unknown_code_uses_explicit_fallback():
    assert derivation.condition_label(999) == UNKNOWN_CONDITION
    assert derivation.condition_icon(999, True) == GENERIC_ICONS[0]
    assert derivation.condition_icon(999, 0) == GENERIC_ICONS[1]


@pytest.mark.parametrize(
    "humidity, expected",
    [(40, 21), (0, 25), (100, 15), (250, 5)],
)
def test_visibility_km(humidity, expected):
    assert derivation.visibility_km(humidity) == expected


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0, "N"),
        (90, "E"),
        (180, "S"),
        (270, "W"),
        (360, "N"),
        (225, "SW"),
        (11.25, "NNE"),
        (348.75, "N"),
        (float("nan"), "N"),
    ],
)
def test_wind_compass(degrees, expected):
    assert derivation.wind_compass(degrees) == expected


@pytest.mark.parametrize(
    "uv, expected",
    [(0, "Low"), (2, "Low"), (5, "Moderate"), (7, "High"), (10, "Very High"), (11, "Extreme")],
)
def test_uv_category_boundaries(uv, expected):
    assert derivation.uv_category(uv) == expected


def test_uv_index_uses_daylight_subset():
    series = [0.0] * 24
    series[8] = 3.0
    series[13] = 9.6
    series[20] = 11.0

    assert derivation.uv_index(series) == 10


def test_uv_index_defaults_when_no_positive_daylight_value():
    assert derivation.uv_index(()) == 4
    assert derivation.uv_index([0.0] * 24) == 4


@pytest.mark.parametrize(
    "aqi, expected",
    [
        (50, "Good"),
        (51, "Moderate"),
        (100, "Moderate"),
        (150, "Unhealthy for Sensitive"),
        (200, "Unhealthy"),
        (300, "Very Unhealthy"),
        (301, "Hazardous"),
    ],
)
def test_aqi_category(aqi, expected):
    assert derivation.aqi_category(aqi) == expected


def test_synthesize_aqi_stays_in_range():
    rng = random.Random(3)
    values = [derivation.synthesize_aqi(rng) for _ in range(200)]

    assert all(25 <= value <= 100 for value in values)


def test_daylight_duration():
    span = derivation.daylight_duration(
        _daily(datetime(2024, 6, 1, 5, 12), datetime(2024, 6, 1, 18, 53))
    )

    assert span is not None
    assert (span.hours, span.minutes) == (13, 41)
    assert span.label == "13h 41m"


def test_daylight_duration_undefined_without_timestamps():
    assert derivation.daylight_duration(DailySeries()) is None
    assert derivation.daylight_duration(_daily(None, datetime(2024, 6, 1, 18, 53))) is None
    assert derivation.daylight_duration(_daily(datetime(2024, 6, 1, 5, 12), None)) is None


@pytest.mark.parametrize(
    "precipitation, chance, cloud, expected",
    [
        (1.0, 90, 90, "🌧️"),
        (0.5, 61, 90, "🌦️"),
        (0.0, 31, 90, "⛅"),
        (0.0, 30, 71, "☁️"),
        (0.0, 30, 70, "☀️"),
    ],
)
def test_rain_icon_precedence(precipitation, chance, cloud, expected):
    assert derivation.rain_icon(precipitation, chance, cloud) == expected


def test_rain_chance_reads_first_day():
    assert derivation.rain_chance(_daily(None, None)) == 64
    assert derivation.rain_chance(DailySeries()) == 0


def test_today_high_low_falls_back_to_current():
    model = normalize({"current": {"temperature_2m": 18}}, "Sparse")

    assert derivation.today_high_low(model) == (24, 10)


def test_hourly_and_daily_cards():
    model = FallbackSynthesizer(random.Random(5)).synthesize(
        "Test City", datetime(2024, 6, 1, 14, 30)
    )

    hourly = derivation.hourly_cards(model)
    assert len(hourly) == 12
    assert hourly[0].label == "Now"
    assert hourly[1].label == "16:00"
    assert hourly[0].temperature == model.hourly.temperature[0]

    daily = derivation.daily_cards(model)
    assert [card.label for card in daily] == [
        "Today",
        "Tomorrow",
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
    ]
    assert daily[0].temperature_max == model.daily.temperature_max[0]
