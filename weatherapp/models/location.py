"""Location data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def as_query(self) -> str:
        """Comma-joined form the geocoder accepts as a free-text query."""
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float
    country: str
    admin1: str | None = None

    @property
    def display_name(self) -> str:
        if self.admin1:
            return f"{self.name}, {self.admin1}, {self.country}"
        return f"{self.name}, {self.country}"

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(self.latitude, self.longitude)

    @classmethod
    def placeholder(cls, latitude: float, longitude: float) -> "Location":
        """Coordinates-only location; the caller attaches a real name."""
        return cls(name="", latitude=latitude, longitude=longitude, country="")

    @classmethod
    def from_geocoding(cls, raw: dict) -> "Location":
        return cls(
            name=raw.get("name", ""),
            latitude=float(raw["latitude"]),
            longitude=float(raw["longitude"]),
            country=raw.get("country", ""),
            admin1=raw.get("admin1"),
        )


CURRENT_LOCATION_NAME = "Current Location"
UNKNOWN_COUNTRY = "Unknown"


def fallback_location(coords: Coordinates) -> Location:
    """Location used when reverse lookup of the device position finds nothing."""
    return Location(
        name=CURRENT_LOCATION_NAME,
        latitude=coords.latitude,
        longitude=coords.longitude,
        country=UNKNOWN_COUNTRY,
    )
