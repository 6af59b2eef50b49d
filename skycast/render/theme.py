"""Background theme selection from condition codes and the icon's day/night suffix.

Condition code ranges follow https://openweathermap.org/weather-conditions
"""

from dataclasses import dataclass
from enum import StrEnum


class Condition(StrEnum):
    THUNDERSTORM = "thunderstorm"
    RAIN = "rain"
    SNOW = "snow"
    ATMOSPHERE = "atmosphere"
    CLEAR = "clear"
    CLOUDS = "clouds"
    UNKNOWN = "unknown"


class Effect(StrEnum):
    NONE = "none"
    HEAVY_RAIN = "heavy_rain"
    RAIN = "rain"
    SNOW = "snow"
    STARS = "stars"


@dataclass(frozen=True)
class Theme:
    condition: Condition
    is_night: bool
    effect: Effect

    @property
    def css_class(self) -> str:
        return "weather-night" if self.is_night else f"weather-{self.condition.value}"


_CONDITION_EFFECTS = {
    Condition.THUNDERSTORM: Effect.HEAVY_RAIN,
    Condition.RAIN: Effect.RAIN,
    Condition.SNOW: Effect.SNOW,
}


def classify_condition(code: int | None) -> Condition:
    if code is None:
        return Condition.UNKNOWN
    if 200 <= code < 300:
        return Condition.THUNDERSTORM
    if 300 <= code < 600:
        return Condition.RAIN
    if 600 <= code < 700:
        return Condition.SNOW
    if 700 <= code < 800:
        return Condition.ATMOSPHERE
    if code == 800:
        return Condition.CLEAR
    if code > 800:
        return Condition.CLOUDS
    return Condition.UNKNOWN


def is_night_icon(icon: str) -> bool:
    return icon.endswith("n")


def select_theme(code: int | None, icon: str) -> Theme:
    condition = classify_condition(code)
    night = is_night_icon(icon)
    # Night replaces the precipitation effect with a starry sky.
    effect = Effect.STARS if night else _CONDITION_EFFECTS.get(condition, Effect.NONE)
    return Theme(condition=condition, is_night=night, effect=effect)
