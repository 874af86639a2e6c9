"""Default seed location loaded on startup."""

from weatherapp.config.schema import SeedLocationConfig

DEFAULT_LOCATION = SeedLocationConfig(
    name="Fairport, NY",
    latitude=43.0987,
    longitude=-77.4422,
    country="United States",
)
