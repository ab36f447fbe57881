import pytest

from skypulse.models.weather import CurrentConditions
from skypulse.services import insights
from skypulse.services.insights import generate_insights


def _current(
    temperature: int = 17,
    humidity: int = 50,
    wind_speed: int = 5,
    precipitation_mm: float = 0.0,
) -> CurrentConditions:
    return CurrentConditions(
        temperature=temperature,
        apparent_temperature=temperature,
        humidity=humidity,
        wind_speed=wind_speed,
        wind_direction_deg=0.0,
        pressure=1013,
        cloud_cover_pct=20,
        weather_code=1,
        is_day=1,
        precipitation_mm=precipitation_mm,
    )


def test_extreme_heat_is_the_only_insight():
    assert generate_insights(_current(temperature=36)) == [insights.EXTREME_HEAT]


def test_mild_and_humid_in_declared_order():
    assert generate_insights(_current(temperature=22, humidity=90)) == [
        insights.PLEASANT,
        insights.VERY_HUMID,
    ]


@pytest.mark.parametrize(
    "temperature, expected",
    [
        (36, insights.EXTREME_HEAT),
        (35, insights.HOT),
        (29, insights.HOT),
        (28, insights.PLEASANT),
        (20, insights.PLEASANT),
        (14, insights.COOL),
        (5, insights.COOL),
        (4, insights.FREEZING),
        (-10, insights.FREEZING),
    ],
)
def test_temperature_rules_are_exclusive(temperature, expected):
    result = generate_insights(_current(temperature=temperature))

    assert result == [expected]


@pytest.mark.parametrize("temperature", [15, 17, 19])
def test_temperature_gap_gives_default_message(temperature):
    assert generate_insights(_current(temperature=temperature)) == [insights.DEFAULT_INSIGHT]


def test_all_independent_rules_fire_in_order():
    result = generate_insights(
        _current(temperature=0, humidity=20, wind_speed=45, precipitation_mm=7.5)
    )

    assert result == [
        insights.FREEZING,
        insights.DRY_AIR,
        insights.STRONG_WIND,
        insights.HEAVY_RAIN,
    ]


def test_thresholds_are_strict():
    result = generate_insights(
        _current(temperature=17, humidity=85, wind_speed=30, precipitation_mm=5.0)
    )

    assert result == [insights.DEFAULT_INSIGHT]
