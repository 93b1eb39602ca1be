"""Management command to fetch a rain report using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import InvalidCoordinates, get_rain_report_service, parse_coordinates
from raining.providers.base import RetrievalFailed


class Command(BaseCommand):
    help = "Fetch a rain report for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", type=float, required=True, help="Latitude")
        parser.add_argument("--lon", type=float, required=True, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            latitude, longitude = parse_coordinates(options["lat"], options["lon"])
        except InvalidCoordinates as exc:
            raise CommandError(str(exc)) from exc

        try:
            report = get_rain_report_service().get_report(latitude, longitude)
        except RetrievalFailed as exc:
            raise CommandError(f"Could not generate a rain report: {exc.reason}") from exc

        self.stdout.write(json.dumps(report.as_dict()))
