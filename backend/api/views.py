"""REST API views for rain reports."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Decimal
from functools import lru_cache

from django.conf import settings
from django.core.cache import caches
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from raining.providers.base import RequestConfig, RetrievalFailed
from raining.providers.darksky import DarkSkyProvider
from raining.quota import QuotaTracker
from raining.services.report import RainReportService


COORDINATE_PRECISION = Decimal("0.001")


class InvalidCoordinates(ValueError):
    """Raised when request coordinates are missing or out of range."""


@lru_cache(maxsize=1)
def get_rain_report_service() -> RainReportService:
    # one tracker per process so every request shares the daily quota;
    # no session is injected, each upstream call opens its own
    provider = DarkSkyProvider(
        api_key=settings.DARKSKY_API_KEY,
        base_url=settings.DARKSKY_API_URL,
        quota=QuotaTracker(limit=settings.DARKSKY_DAILY_QUOTA),
        request_config=RequestConfig(timeout=settings.DARKSKY_TIMEOUT),
    )
    return RainReportService(
        provider,
        cache=caches[settings.RAIN_REPORT_CACHE_ALIAS],
        ttl=settings.RAIN_REPORT_CACHE_TIMEOUT,
    )


def parse_coordinates(latitude: object, longitude: object) -> tuple[float, float]:
    """Validate coordinates and round them to three decimals."""
    if latitude is None or longitude is None:
        raise InvalidCoordinates("latitude and longitude query parameters are required")
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinates("latitude and longitude must be valid floating point numbers") from exc
    if not (math.isfinite(lat) and math.isfinite(lon)) or not (-90 <= lat <= 90 and -180 <= lon <= 180):
        raise InvalidCoordinates(
            "Coordinates need to be in range: -90 <= latitude <= 90, -180 <= longitude <= 180."
        )
    return _round_coordinate(lat), _round_coordinate(lon)


def _round_coordinate(value: float) -> float:
    return float(Decimal(str(value)).quantize(COORDINATE_PRECISION, rounding=ROUND_HALF_EVEN))


class RainReportView(APIView):
    """Answer whether it is raining at the requested coordinates."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the rain report for the specified coordinates."""
        try:
            latitude, longitude = parse_coordinates(
                request.query_params.get("latitude"),
                request.query_params.get("longitude"),
            )
        except InvalidCoordinates as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            report = get_rain_report_service().get_report(latitude, longitude)
        except RetrievalFailed as exc:
            return Response(
                {"detail": f"Could not generate a rain report for coordinates {latitude}, {longitude}: {exc.reason}"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(report.as_dict(), status=status.HTTP_200_OK)
