"""WMO weather interpretation codes and their display strings."""

from __future__ import annotations

from enum import IntEnum


class WeatherCode(IntEnum):
    """Closed set of WMO codes returned by the provider."""

    CLEAR_SKY = 0
    MOSTLY_CLEAR = 1
    PARTLY_CLOUDY = 2
    OVERCAST = 3
    FOG = 45
    DEPOSITING_RIME_FOG = 48
    LIGHT_DRIZZLE = 51
    MODERATE_DRIZZLE = 53
    DENSE_DRIZZLE = 55
    FREEZING_DRIZZLE = 56
    DENSE_FREEZING_DRIZZLE = 57
    SLIGHT_RAIN = 61
    MODERATE_RAIN = 63
    HEAVY_RAIN = 65
    FREEZING_RAIN = 66
    HEAVY_FREEZING_RAIN = 67
    SLIGHT_SNOW = 71
    MODERATE_SNOW = 73
    HEAVY_SNOW = 75
    SNOW_GRAINS = 77
    SLIGHT_RAIN_SHOWERS = 80
    MODERATE_RAIN_SHOWERS = 81
    VIOLENT_RAIN_SHOWERS = 82
    SLIGHT_SNOW_SHOWERS = 85
    HEAVY_SNOW_SHOWERS = 86
    THUNDERSTORM = 95
    THUNDERSTORM_WITH_HAIL = 96
    HEAVY_THUNDERSTORM_WITH_HAIL = 99

    @classmethod
    def parse(cls, code: int) -> "WeatherCode | None":
        """Return the enum member for ``code`` or None when it is not a WMO code."""

        try:
            return cls(code)
        except ValueError:
            return None


UNKNOWN_CONDITION = "Unknown Conditions"

CONDITION_LABELS: dict[WeatherCode, str] = {
    WeatherCode.CLEAR_SKY: "Clear Sky",
    WeatherCode.MOSTLY_CLEAR: "Mostly Clear",
    WeatherCode.PARTLY_CLOUDY: "Partly Cloudy",
    WeatherCode.OVERCAST: "Overcast",
    WeatherCode.FOG: "Foggy",
    WeatherCode.DEPOSITING_RIME_FOG: "Depositing Rime Fog",
    WeatherCode.LIGHT_DRIZZLE: "Light Drizzle",
    WeatherCode.MODERATE_DRIZZLE: "Moderate Drizzle",
    WeatherCode.DENSE_DRIZZLE: "Dense Drizzle",
    WeatherCode.FREEZING_DRIZZLE: "Freezing Drizzle",
    WeatherCode.DENSE_FREEZING_DRIZZLE: "Dense Freezing Drizzle",
    WeatherCode.SLIGHT_RAIN: "Slight Rain",
    WeatherCode.MODERATE_RAIN: "Moderate Rain",
    WeatherCode.HEAVY_RAIN: "Heavy Rain",
    WeatherCode.FREEZING_RAIN: "Freezing Rain",
    WeatherCode.HEAVY_FREEZING_RAIN: "Heavy Freezing Rain",
    WeatherCode.SLIGHT_SNOW: "Slight Snow",
    WeatherCode.MODERATE_SNOW: "Moderate Snow",
    WeatherCode.HEAVY_SNOW: "Heavy Snow",
    WeatherCode.SNOW_GRAINS: "Snow Grains",
    WeatherCode.SLIGHT_RAIN_SHOWERS: "Slight Rain Showers",
    WeatherCode.MODERATE_RAIN_SHOWERS: "Moderate Rain Showers",
    WeatherCode.VIOLENT_RAIN_SHOWERS: "Violent Rain Showers",
    WeatherCode.SLIGHT_SNOW_SHOWERS: "Slight Snow Showers",
    WeatherCode.HEAVY_SNOW_SHOWERS: "Heavy Snow Showers",
    WeatherCode.THUNDERSTORM: "Thunderstorm",
    WeatherCode.THUNDERSTORM_WITH_HAIL: "Thunderstorm with Hail",
    WeatherCode.HEAVY_THUNDERSTORM_WITH_HAIL: "Heavy Thunderstorm with Hail",
}

# (day, night) icon pairs
CONDITION_ICONS: dict[WeatherCode, tuple[str, str]] = {
    WeatherCode.CLEAR_SKY: ("☀️", "🌙"),
    WeatherCode.MOSTLY_CLEAR: ("🌤️", "🌙"),
    WeatherCode.PARTLY_CLOUDY: ("⛅", "⛅"),
    WeatherCode.OVERCAST: ("☁️", "☁️"),
    WeatherCode.FOG: ("🌫️", "🌫️"),
    WeatherCode.DEPOSITING_RIME_FOG: ("🌫️", "🌫️"),
    WeatherCode.LIGHT_DRIZZLE: ("🌦️", "🌦️"),
    WeatherCode.MODERATE_DRIZZLE: ("🌦️", "🌦️"),
    WeatherCode.DENSE_DRIZZLE: ("🌦️", "🌦️"),
    WeatherCode.FREEZING_DRIZZLE: ("🌨️", "🌨️"),
    WeatherCode.DENSE_FREEZING_DRIZZLE: ("🌨️", "🌨️"),
    WeatherCode.SLIGHT_RAIN: ("🌧️", "🌧️"),
    WeatherCode.MODERATE_RAIN: ("🌧️", "🌧️"),
    WeatherCode.HEAVY_RAIN: ("⛈️", "⛈️"),
    WeatherCode.FREEZING_RAIN: ("🌨️", "🌨️"),
    WeatherCode.HEAVY_FREEZING_RAIN: ("🌨️", "🌨️"),
    WeatherCode.SLIGHT_SNOW: ("❄️", "❄️"),
    WeatherCode.MODERATE_SNOW: ("❄️", "❄️"),
    WeatherCode.HEAVY_SNOW: ("❄️", "❄️"),
    WeatherCode.SNOW_GRAINS: ("❄️", "❄️"),
    WeatherCode.SLIGHT_RAIN_SHOWERS: ("🌦️", "🌦️"),
    WeatherCode.MODERATE_RAIN_SHOWERS: ("🌧️", "🌧️"),
    WeatherCode.VIOLENT_RAIN_SHOWERS: ("⛈️", "⛈️"),
    WeatherCode.SLIGHT_SNOW_SHOWERS: ("🌨️", "🌨️"),
    WeatherCode.HEAVY_SNOW_SHOWERS: ("🌨️", "🌨️"),
    WeatherCode.THUNDERSTORM: ("⛈️", "⛈️"),
    WeatherCode.THUNDERSTORM_WITH_HAIL: ("⛈️", "⛈️"),
    WeatherCode.HEAVY_THUNDERSTORM_WITH_HAIL: ("⛈️", "⛈️"),
}

# Used for codes outside the enumeration
GENERIC_ICONS: tuple[str, str] = ("🌤️", "🌙")

__all__ = [
    "CONDITION_ICONS",
    "CONDITION_LABELS",
    "GENERIC_ICONS",
    "UNKNOWN_CONDITION",
    "WeatherCode",
]
