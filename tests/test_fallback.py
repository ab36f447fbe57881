from datetime import date, datetime, time, timedelta, timezone
import random

import pytest

from skypulse.services.fallback import FallbackSynthesizer

MOCK_NOW = datetime(2024, 6, 1, 14, 30)


def _synthesize(seed: int = 42, now: datetime = MOCK_NOW, label: str = "Test City"):
    return FallbackSynthesizer(random.Random(seed)).synthesize(label, now)


def test_fallback_shape_matches_normalized_model():
    model = _synthesize()

    assert model.location == "Test City"
    assert len(model.hourly.temperature) == 12
    assert len(model.hourly.time) == 12
    assert len(model.hourly.precipitation_probability_pct) == 12
    assert len(model.hourly.weather_code) == 12
    assert len(model.hourly.uv_index) == 24
    for field in (
        model.daily.date,
        model.daily.temperature_max,
        model.daily.temperature_min,
        model.daily.weather_code,
        model.daily.sunrise,
        model.daily.sunset,
        model.daily.uv_index_max,
        model.daily.precipitation_sum_mm,
        model.daily.precipitation_probability_max_pct,
    ):
        assert len(field) == 7


def test_fallback_is_reproducible_with_seed():
    assert _synthesize(seed=7) == _synthesize(seed=7)
    assert _synthesize(seed=7) != _synthesize(seed=8)


@pytest.mark.parametrize(
    "hour, expected",
    [(6, 0), (7, 1), (14, 1), (19, 1), (20, 0), (23, 0)],
)
def test_fallback_is_day_follows_clock(hour, expected):
    model = _synthesize(now=datetime(2024, 6, 1, hour, 5))

    assert model.current.is_day == expected


def test_fallback_hourly_times_follow_now():
    model = _synthesize()

    assert model.hourly.time[0] == datetime(2024, 6, 1, 15, 0)
    for earlier, later in zip(model.hourly.time, model.hourly.time[1:]):
        assert later - earlier == timedelta(hours=1)


def test_fallback_daily_dates_and_sun_times():
    model = _synthesize()

    assert model.daily.date[0] == date(2024, 6, 1)
    assert model.daily.date[-1] == date(2024, 6, 7)
    for day, sunrise, sunset in zip(model.daily.date, model.daily.sunrise, model.daily.sunset):
        assert sunrise.date() == day
        assert time(6, 15) <= sunrise.time() <= time(6, 45)
        assert time(18, 30) <= sunset.time() <= time(19, 30)


def test_fallback_keeps_timezone_of_now():
    now = datetime(2024, 6, 1, 14, 30, tzinfo=timezone.utc)
    model = _synthesize(now=now)

    assert model.hourly.time[0].tzinfo == timezone.utc
    assert model.daily.sunrise[0].tzinfo == timezone.utc


@pytest.mark.parametrize("seed", range(25))
def test_fallback_values_stay_plausible(seed):
    model = _synthesize(seed=seed)
    current = model.current

    assert 15 <= current.temperature <= 40
    assert 30 <= current.humidity <= 80
    assert 2 <= current.wind_speed <= 27
    assert 0 <= current.wind_direction_deg <= 360
    assert 995 <= current.pressure <= 1035
    assert 0 <= current.cloud_cover_pct <= 100
    assert 0 <= current.precipitation_mm <= 5
    assert current.weather_code in {0, 1, 61}
    assert set(model.hourly.weather_code) <= {0, 1, 61}
    assert set(model.daily.weather_code) <= {1, 61}
    assert all(0 <= p <= 80 for p in model.hourly.precipitation_probability_pct)
    for high, low in zip(model.daily.temperature_max, model.daily.temperature_min):
        assert high > low


def test_fallback_uv_is_zero_at_night():
    uv = _synthesize().hourly.uv_index

    assert all(value == 0 for value in uv[:7])
    assert all(value == 0 for value in uv[19:])
    assert all(2 <= value <= 11 for value in uv[7:19])


def test_fallback_without_seed_still_valid():
    model = FallbackSynthesizer().synthesize("Anywhere", datetime.now())

    assert len(model.hourly.temperature) == 12
    assert len(model.daily.temperature_max) == 7
