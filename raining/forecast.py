"""Typed view of the loosely structured forecast payload.

Every field the upstream service may omit is an ``Optional`` here. Parsing never
fails on missing or malformed sub-fields; they simply become ``None`` and the
report builder decides on the default. Values outside their valid range
(probabilities outside [0, 1], negative intensities, NaN) count as missing.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional


@dataclass(frozen=True)
class CurrentConditions:
    precip_probability: Optional[float] = None
    precip_intensity: Optional[float] = None
    precip_type: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["CurrentConditions"]:
        if not isinstance(payload, Mapping):
            return None
        return cls(
            precip_probability=_probability(payload.get("precipProbability")),
            precip_intensity=_intensity(payload.get("precipIntensity")),
            precip_type=_safe_str(payload.get("precipType")),
        )


@dataclass(frozen=True)
class DailyDataPoint:
    precip_probability: Optional[float] = None
    precip_type: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "DailyDataPoint":
        if not isinstance(payload, Mapping):
            return cls()
        return cls(
            precip_probability=_probability(payload.get("precipProbability")),
            precip_type=_safe_str(payload.get("precipType")),
        )


@dataclass(frozen=True)
class Forecast:
    currently: Optional[CurrentConditions] = None
    daily: Optional[List[DailyDataPoint]] = None

    @property
    def today(self) -> Optional[DailyDataPoint]:
        if not self.daily:
            return None
        return self.daily[0]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Forecast":
        return cls(
            currently=CurrentConditions.from_payload(payload.get("currently")),
            daily=_parse_daily(payload.get("daily")),
        )


def _parse_daily(payload: Any) -> Optional[List[DailyDataPoint]]:
    if not isinstance(payload, Mapping):
        return None
    data = payload.get("data")
    if not isinstance(data, list):
        return []
    return [DailyDataPoint.from_payload(item) for item in data]


def _safe_float(value: Any) -> Optional[float]:
    # bool is an int subclass but never a valid measurement
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    # json accepts bare NaN and Infinity
    if not math.isfinite(result):
        return None
    return result


def _probability(value: Any) -> Optional[float]:
    result = _safe_float(value)
    if result is None or not 0 <= result <= 1:
        return None
    return result


def _intensity(value: Any) -> Optional[float]:
    result = _safe_float(value)
    if result is None or result < 0:
        return None
    return result


def _safe_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    return None


__all__ = ["CurrentConditions", "DailyDataPoint", "Forecast"]
