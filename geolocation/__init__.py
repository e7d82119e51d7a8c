#Marks geolocation as a package.
#Re-exports the sensor boundary.

from .sensor import (
    LocationSensor,
    LocationUnavailable,
    FixedLocationSensor,
    IPLocationSensor,
    PositionOptions,
)

__all__ = [
    "LocationSensor",
    "LocationUnavailable",
    "FixedLocationSensor",
    "IPLocationSensor",
    "PositionOptions",
]
