from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest


class ClockController:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def advance(self, delta: timedelta) -> None:
        self.now += delta

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> ClockController:
    return ClockController(datetime(2024, 3, 14, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def rainy_payload() -> dict:
    return {
        "currently": {"precipProbability": 0.5, "precipType": "rain", "precipIntensity": 2.5},
        "daily": {"data": [{"precipProbability": 0.5, "precipType": "rain"}]},
    }
