from __future__ import annotations

import logging
from typing import Optional

from .base import ProviderError, QuotaExceeded, RetrievalFailed, WeatherProvider
from ..entities import UNKNOWN_VALUE, Precipitation, RainReport
from ..forecast import CurrentConditions, DailyDataPoint, Forecast
from ..quota import QuotaTracker


class DarkSkyProvider(WeatherProvider):
    """Rain reports from a Dark Sky compatible forecast API.

    Calls are gated by a :class:`QuotaTracker` so the free tier limit of the
    upstream service is never exceeded. Any failure is raised as
    :class:`RetrievalFailed`.
    """

    base_url = "https://api.darksky.net/forecast"
    query_params = {"exclude": "minutely,hourly", "lang": "en", "units": "si"}

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        quota: Optional[QuotaTracker] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")
        self.quota = quota or QuotaTracker()
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def fetch(self, latitude: float, longitude: float) -> RainReport:
        self._log.info("Retrieving forecast for coordinates %s, %s", latitude, longitude)
        try:
            forecast = self._fetch_forecast(latitude, longitude)
        except QuotaExceeded as exc:
            self._log.warning("Not calling upstream for %s, %s: %s", latitude, longitude, exc)
            raise RetrievalFailed("quota exceeded") from exc
        except ProviderError as exc:
            self._log.error("Forecast retrieval for %s, %s failed: %s", latitude, longitude, exc)
            raise RetrievalFailed(str(exc)) from exc
        return build_report(latitude, longitude, forecast)

    # helpers ------------------------------------------------------------
    def _fetch_forecast(self, latitude: float, longitude: float) -> Forecast:
        if not self.quota.try_consume():
            raise QuotaExceeded(f"daily limit of {self.quota.limit} calls reached")
        url = f"{self.base_url}/{self.api_key}/{latitude},{longitude}"
        data = self._get_json(url, params=self.query_params)
        if not data:
            raise ProviderError("forecast is empty")
        if not isinstance(data, dict):
            raise ProviderError("forecast is not an object")
        return Forecast.from_payload(data)


def build_report(latitude: float, longitude: float, forecast: Forecast) -> RainReport:
    current_type, current_probability, current_intensity = _current(forecast.currently)
    today_chance, today_type = _today(forecast.today)
    return RainReport(
        latitude=latitude,
        longitude=longitude,
        current_precipitation_type=current_type,
        current_probability=current_probability,
        current_intensity=current_intensity,
        today_chance_of_precipitation=today_chance,
        today_precipitation_type=today_type,
    )


def _current(currently: Optional[CurrentConditions]):
    if currently is None or currently.precip_probability is None:
        return Precipitation.UNKNOWN, UNKNOWN_VALUE, UNKNOWN_VALUE
    if currently.precip_probability == 0:
        return Precipitation.NONE, 0.0, 0.0
    intensity = _or_unknown(currently.precip_intensity)
    return Precipitation.classify(currently.precip_type), currently.precip_probability, intensity


def _today(today: Optional[DailyDataPoint]):
    if today is None or today.precip_probability is None:
        return UNKNOWN_VALUE, Precipitation.UNKNOWN
    if today.precip_probability == 0:
        return 0.0, Precipitation.NONE
    return today.precip_probability, Precipitation.classify(today.precip_type)


def _or_unknown(value: Optional[float]) -> float:
    if value is None:
        return UNKNOWN_VALUE
    return value


__all__ = ["DarkSkyProvider", "build_report"]
