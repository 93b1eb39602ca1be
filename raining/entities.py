from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


UNKNOWN_VALUE = -1.0


class Precipitation(str, Enum):
    NONE = "none"
    UNKNOWN = "unknown"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"

    @classmethod
    def classify(cls, value: Optional[str]) -> "Precipitation":
        """Map an upstream ``precipType`` string to a precipitation kind.

        Matching is case-sensitive and only the three reported kinds are
        recognised; everything else is ``UNKNOWN``.
        """
        if value == "rain":
            return cls.RAIN
        if value == "sleet":
            return cls.SLEET
        if value == "snow":
            return cls.SNOW
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value


class IsItRaining(str, Enum):
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RainReport:
    """Normalized rain report for a single location.

    Every field is always populated. Unknown numbers are ``-1`` and unknown
    precipitation kinds are ``Precipitation.UNKNOWN``:
    - probabilities are in the range [0, 1]
    - intensity is a precipitation rate in millimetres per hour
    """

    latitude: float
    longitude: float
    current_precipitation_type: Precipitation = Precipitation.UNKNOWN
    current_probability: float = UNKNOWN_VALUE
    current_intensity: float = UNKNOWN_VALUE
    today_chance_of_precipitation: float = UNKNOWN_VALUE
    today_precipitation_type: Precipitation = Precipitation.UNKNOWN

    @property
    def raining_currently(self) -> IsItRaining:
        if self.current_precipitation_type is Precipitation.RAIN:
            return IsItRaining.YES
        if self.current_precipitation_type is Precipitation.UNKNOWN:
            return IsItRaining.UNKNOWN
        return IsItRaining.NO

    def as_dict(self) -> Dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "current_precipitation_type": self.current_precipitation_type.value,
            "current_probability": self.current_probability,
            "current_intensity": self.current_intensity,
            "today_chance_of_precipitation": self.today_chance_of_precipitation,
            "today_precipitation_type": self.today_precipitation_type.value,
            "raining_currently": self.raining_currently.value,
        }

    def __str__(self) -> str:
        return (
            f"latitude: {self.latitude:f}\n"
            f"longitude: {self.longitude:f}\n"
            f"currentPrecipitationType: {self.current_precipitation_type}\n"
            f"currentProbability: {self.current_probability:f}\n"
            f"currentIntensity: {self.current_intensity:f}\n"
            f"todayChanceOfPrecipitation: {self.today_chance_of_precipitation:f}\n"
            f"todayPrecipitationType: {self.today_precipitation_type}"
        )


__all__ = ["IsItRaining", "Precipitation", "RainReport", "UNKNOWN_VALUE"]
