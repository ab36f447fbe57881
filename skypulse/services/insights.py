"""Rule-based advisory sentences for the current conditions."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from skypulse.models.weather import CurrentConditions

logger = logging.getLogger("skypulse.services.insights")

EXTREME_HEAT = "⚡ Extreme heat warning! Stay hydrated and avoid prolonged sun exposure."
HOT = "🌞 Hot weather perfect for water activities. Don't forget sunscreen!"
FREEZING = "🧊 Freezing conditions! Layer up and watch for icy surfaces."
COOL = "☕ Cool weather ideal for cozy indoor activities or warm beverages."
PLEASANT = "🌈 Perfect weather conditions! Great day for any outdoor plans."
VERY_HUMID = "💧 Very humid - air conditioning recommended for comfort."
DRY_AIR = "🏜️ Dry air alert - moisturize and stay hydrated!"
STRONG_WIND = "💨 Strong winds today - secure loose outdoor items!"
HEAVY_RAIN = "📖 Heavy rain expected - perfect weather for indoor activities!"
DEFAULT_INSIGHT = "😊 Beautiful conditions ahead! Enjoy your day to the fullest!"


def _temperature(current: CurrentConditions) -> Optional[str]:
    temperature = current.temperature
    if temperature > 35:
        return EXTREME_HEAT
    elif temperature > 28:
        return HOT
    elif temperature < 5:
        return FREEZING
    elif temperature < 15:
        return COOL
    elif 20 <= temperature <= 28:
        return PLEASANT
    return None


def _humidity(current: CurrentConditions) -> Optional[str]:
    if current.humidity > 85:
        return VERY_HUMID
    elif current.humidity < 25:
        return DRY_AIR
    return None


def _wind(current: CurrentConditions) -> Optional[str]:
    return STRONG_WIND if current.wind_speed > 30 else None


def _precipitation(current: CurrentConditions) -> Optional[str]:
    return HEAVY_RAIN if current.precipitation_mm > 5 else None


# Evaluated in order; each rule contributes at most one message.
RULES: tuple[Callable[[CurrentConditions], Optional[str]], ...] = (
    _temperature,
    _humidity,
    _wind,
    _precipitation,
)


def generate_insights(current: CurrentConditions) -> list[str]:
    insights = [message for message in (rule(current) for rule in RULES) if message]
    if not insights:
        insights.append(DEFAULT_INSIGHT)
    logger.debug("Generated %s insights", len(insights))
    return insights


__all__ = ["DEFAULT_INSIGHT", "RULES", "generate_insights"]
