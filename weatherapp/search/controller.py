"""Location search controller: suggestions, geolocation and selection."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from weatherapp.client.open_meteo import OpenMeteoClient
from weatherapp.errors import GeolocationError, WeatherAppError
from weatherapp.models.location import Location, fallback_location
from weatherapp.ports import GeolocationProvider, PointerEventSource, Region, Unsubscribe

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2

MSG_SEARCH_FAILED = "Failed to search locations"
MSG_GEO_UNSUPPORTED = "Geolocation is not supported"
MSG_POSITION_FAILED = "Unable to get your location"
MSG_REVERSE_LOOKUP_FAILED = "Failed to get location name"

SelectionCallback = Callable[[Location], Awaitable[None]]


class LocationSearchController:
    """State behind the search box and its suggestion panel.

    Every committed location, whether clicked in the suggestion list or
    resolved from the device position, goes through on_location_picked().
    """

    def __init__(
        self,
        client: OpenMeteoClient,
        on_select: SelectionCallback,
        geolocation: GeolocationProvider | None = None,
        pointer_events: PointerEventSource | None = None,
        input_region: Region | None = None,
        suggestion_region: Region | None = None,
    ):
        self.client = client
        self.on_select = on_select
        self.geolocation = geolocation
        self.pointer_events = pointer_events
        self.input_region = input_region
        self.suggestion_region = suggestion_region

        self.query_text = ""
        self.suggestions: list[Location] = []
        self.suggestions_visible = False
        self.search_error: str | None = None

        # Typed searches and device-position lookups are sequenced apart, so
        # a keystroke does not cancel a pending position request.
        self._request_seq = 0
        self._locate_seq = 0
        self._typing_busy = False
        self._locating_busy = False
        self._unsubscribe: Unsubscribe | None = None

    @property
    def is_searching(self) -> bool:
        return self._typing_busy or self._locating_busy

    # -- lifecycle --

    def mount(self) -> None:
        if self._unsubscribe is None and self.pointer_events is not None:
            self._unsubscribe = self.pointer_events.subscribe(self.on_pointer_down)

    def dispose(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def __enter__(self) -> "LocationSearchController":
        self.mount()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    # -- operations --

    async def on_query_changed(self, text: str) -> None:
        self.query_text = text
        self.search_error = None

        if len(text.strip()) < MIN_QUERY_LENGTH:
            # Supersede anything still in flight.
            self._next_request()
            self._clear_suggestions()
            self._typing_busy = False
            return

        seq = self._next_request()
        self._typing_busy = True
        try:
            results = await self.client.search_locations(text)
        except WeatherAppError as e:
            if self._is_stale(seq, self._request_seq, "search"):
                return
            logger.warning("Location search for %r failed: %s", text, e)
            self.search_error = MSG_SEARCH_FAILED
            self._clear_suggestions()
        else:
            if self._is_stale(seq, self._request_seq, "search"):
                return
            self.suggestions = results
            self.suggestions_visible = len(results) > 0
        finally:
            if seq == self._request_seq:
                self._typing_busy = False

    async def on_current_location_requested(self) -> None:
        self.search_error = None
        if self.geolocation is None:
            self.search_error = MSG_GEO_UNSUPPORTED
            return

        self._locate_seq += 1
        seq = self._locate_seq
        self._locating_busy = True
        try:
            try:
                coords = await self.geolocation.current_position()
            except GeolocationError as e:
                logger.warning("Device position unavailable (%s): %s", e.reason, e)
                if not self._is_stale(seq, self._locate_seq, "geolocation"):
                    self.search_error = MSG_POSITION_FAILED
                return

            try:
                results = await self.client.search_locations(coords.as_query())
            except WeatherAppError as e:
                logger.warning("Reverse lookup for %s failed: %s", coords.as_query(), e)
                if not self._is_stale(seq, self._locate_seq, "reverse lookup"):
                    self.search_error = MSG_REVERSE_LOOKUP_FAILED
                return

            if self._is_stale(seq, self._locate_seq, "reverse lookup"):
                return
            location = results[0] if results else fallback_location(coords)
        finally:
            if seq == self._locate_seq:
                self._locating_busy = False

        await self.on_location_picked(location)

    async def on_location_picked(self, location: Location) -> None:
        # A committed pick supersedes pending searches and position lookups.
        self._next_request()
        self._locate_seq += 1
        self._typing_busy = False
        self._locating_busy = False

        self.query_text = location.display_name
        self._clear_suggestions()
        await self.on_select(location)

    def sync_current_location(self, location: Location) -> None:
        """Show an externally selected location in the search box."""
        self.query_text = location.display_name

    def on_pointer_down(self, target: Any) -> None:
        """Hide suggestions when the pointer lands outside input and panel."""
        if self._inside(self.input_region, target) or self._inside(self.suggestion_region, target):
            return
        self.suggestions_visible = False

    # -- internals --

    def _next_request(self) -> int:
        self._request_seq += 1
        return self._request_seq

    @staticmethod
    def _is_stale(seq: int, latest: int, what: str) -> bool:
        if seq != latest:
            logger.debug("Discarding stale %s response (#%d, latest #%d)", what, seq, latest)
            return True
        return False

    def _clear_suggestions(self) -> None:
        self.suggestions = []
        self.suggestions_visible = False

    @staticmethod
    def _inside(region: Region | None, target: Any) -> bool:
        return region is not None and region.contains(target)
