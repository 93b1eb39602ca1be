"""Rain reports built from a quota-limited forecast service."""
from __future__ import annotations

from .entities import IsItRaining, Precipitation, RainReport
from .providers.base import RetrievalFailed
from .providers.darksky import DarkSkyProvider
from .quota import QuotaTracker
from .services.report import RainReportService

__all__ = [
    "DarkSkyProvider",
    "IsItRaining",
    "Precipitation",
    "QuotaTracker",
    "RainReport",
    "RainReportService",
    "RetrievalFailed",
]
