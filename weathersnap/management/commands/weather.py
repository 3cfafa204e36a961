"""Management command that looks up the current weather."""
from __future__ import annotations

import asyncio
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weathersnap.core.abstractions import Failed, Loading, QueryState, Success
from weathersnap.core.display import LOADING_TEXT, render_observation
from weathersnap.core.notices import Notice
from weathersnap.core.providers.geolocation import StaticGeolocator
from weathersnap.core.services.factory import build_controller


class Command(BaseCommand):
    help = "Show the current weather for a city or for the current location"

    requires_system_checks: list = []

    def add_arguments(self, parser) -> None:  # noqa: D401
        target = parser.add_mutually_exclusive_group(required=True)
        target.add_argument("--city", type=str, help="City name")
        target.add_argument("--here", action="store_true", help="Use the current location")
        parser.add_argument("--lat", type=float, help="Device latitude for --here")
        parser.add_argument("--lon", type=float, help="Device longitude for --here")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        latitude = options.get("lat")
        longitude = options.get("lon")
        if (latitude is None) != (longitude is None):
            raise CommandError("--lat and --lon must be given together")
        if latitude is not None and not options.get("here"):
            raise CommandError("--lat and --lon can only be used with --here")

        geolocator = None
        if latitude is not None and longitude is not None:
            geolocator = StaticGeolocator(latitude, longitude)

        controller = build_controller(geolocator=geolocator, notify=self._show_notice)
        controller.subscribe(self._show_state)

        if options.get("here"):
            state = asyncio.run(controller.submit_by_location())
        else:
            controller.set_city(options["city"])
            state = asyncio.run(controller.submit())

        if isinstance(state, Success):
            for line in render_observation(state.observation):
                self.stdout.write(line)
            self.stdout.write(f"Theme: {controller.theme.value}")
        elif isinstance(state, Failed):
            raise CommandError(state.reason)

    def _show_state(self, state: QueryState) -> None:
        if isinstance(state, Loading):
            self.stdout.write(LOADING_TEXT)

    def _show_notice(self, notice: Notice) -> None:
        text = notice.title if not notice.description else f"{notice.title}: {notice.description}"
        if notice.is_destructive:
            self.stderr.write(self.style.ERROR(text))
        else:
            self.stdout.write(self.style.SUCCESS(text))
