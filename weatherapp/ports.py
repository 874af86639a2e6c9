"""Capabilities injected into the search controller by the hosting UI.

The controller never reaches for ambient globals: device position, pointer
events and hit-testing are all passed in explicitly.
"""

from collections.abc import Callable
from typing import Any, Protocol

from weatherapp.errors import GeolocationError
from weatherapp.models.location import Coordinates


PointerHandler = Callable[[Any], None]
Unsubscribe = Callable[[], None]


class GeolocationProvider(Protocol):
    async def current_position(self) -> Coordinates:
        """Resolve the device position or raise GeolocationError."""
        ...


class PointerEventSource(Protocol):
    def subscribe(self, handler: PointerHandler) -> Unsubscribe:
        """Register a pointer-down handler; the return value removes it."""
        ...


class Region(Protocol):
    def contains(self, target: Any) -> bool: ...


class FixedGeolocation:
    """Geolocation that always reports one position (CLI, kiosks, tests)."""

    def __init__(self, coordinates: Coordinates | None = None, error: GeolocationError | None = None):
        if coordinates is None and error is None:
            error = GeolocationError(GeolocationError.UNAVAILABLE)
        self.coordinates = coordinates
        self.error = error

    async def current_position(self) -> Coordinates:
        if self.error is not None:
            raise self.error
        assert self.coordinates is not None
        return self.coordinates


class PointerEventBus:
    """Minimal in-process pointer event source."""

    def __init__(self) -> None:
        self._handlers: list[PointerHandler] = []

    def subscribe(self, handler: PointerHandler) -> Unsubscribe:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def dispatch(self, target: Any) -> None:
        for handler in list(self._handlers):
            handler(target)

    @property
    def listener_count(self) -> int:
        return len(self._handlers)


class ElementRegion:
    """Region made of a fixed set of element identifiers."""

    def __init__(self, *elements: Any):
        self.elements = frozenset(elements)

    def contains(self, target: Any) -> bool:
        return target in self.elements
