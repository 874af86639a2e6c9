"""Error taxonomy for weather lookups and location resolution."""


class WeatherAppError(Exception):
    """Base class for failures surfaced to the user as a message."""


class ApiError(WeatherAppError):
    """Raised when an Open-Meteo endpoint returns a non-success status."""

    def __init__(self, endpoint: str, status_code: int):
        super().__init__(f"{endpoint} API error: {status_code}")
        self.endpoint = endpoint
        self.status_code = status_code


class NetworkError(WeatherAppError):
    """Raised on transport-level failures (DNS, connect, read timeout)."""

    def __init__(self, detail: str):
        super().__init__(f"Network error: {detail}")
        self.detail = detail


class ResponseShapeError(WeatherAppError):
    """Raised when a payload is missing blocks or has misaligned arrays."""


class GeolocationError(WeatherAppError):
    UNSUPPORTED = "unsupported"
    DENIED = "denied"
    UNAVAILABLE = "unavailable"
    TIMEOUT = "timeout"

    def __init__(self, reason: str, message: str | None = None):
        super().__init__(message or f"Geolocation failed: {reason}")
        self.reason = reason
