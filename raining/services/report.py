from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from ..cache import ReportCache
from ..entities import RainReport


class ReportProvider(Protocol):
    def fetch(self, latitude: float, longitude: float) -> RainReport:
        ...


class RainReportService:
    """Short-lived cache in front of a report provider.

    Keys use the exact coordinates passed in, so callers are expected to
    normalise them first. Failures are not cached and ``RetrievalFailed``
    propagates unchanged.
    """

    DEFAULT_TTL = 60

    def __init__(
        self,
        provider: ReportProvider,
        *,
        cache: Optional[Any] = None,
        ttl: float = DEFAULT_TTL,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self.cache = cache if cache is not None else ReportCache()
        self.ttl = ttl
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def get_report(self, latitude: float, longitude: float) -> RainReport:
        cache_key = self._cache_key(latitude, longitude)
        cached = self.cache.get(cache_key)
        if cached is not None:
            self._log.debug("Serving cached rain report for %s, %s", latitude, longitude)
            return cached
        report = self.provider.fetch(latitude, longitude)
        self.cache.set(cache_key, report, self.ttl)
        return report

    def _cache_key(self, latitude: float, longitude: float) -> str:
        return f"rain-report:{latitude!r}:{longitude!r}"


__all__ = ["RainReportService", "ReportProvider"]
