"""
Purpose: Core data models for the locations domain.
What it does:
Defines a fixed Site, a sensed Position and the TravelMode enum
without relying on any storage or HTTP details.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

LatLon = Tuple[float, float]


class TravelMode(str, Enum):
    """
    The three ways of getting to a site.
    The value is the name used in reports; `osrm_profile` is the OSRM profile id.
    """
    DRIVING = "driving"
    BIKING = "biking"
    WALKING = "walking"

    @property
    def osrm_profile(self) -> str:
        return _OSRM_PROFILES[self]


_OSRM_PROFILES = {
    TravelMode.DRIVING: "car",
    TravelMode.BIKING: "bike",
    TravelMode.WALKING: "foot",
}

# Processing order for a full report.
TRAVEL_MODES: Tuple[TravelMode, ...] = (
    TravelMode.DRIVING,
    TravelMode.BIKING,
    TravelMode.WALKING,
)


@dataclass(frozen=True)
class Site:
    """
    One fixed, named rec center with known coordinates.
    """
    name: str
    lat: float
    lon: float
    address: str

    @property
    def location(self) -> LatLon:
        return (self.lat, self.lon)


@dataclass(frozen=True)
class Position:
    """
    A position reported by a location sensor.
    `captured_at` is epoch seconds and lets a sensor reuse a recent reading.
    """
    lat: float
    lon: float
    accuracy_m: Optional[float] = None
    captured_at: float = 0.0

    @property
    def location(self) -> LatLon:
        return (self.lat, self.lon)

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lon, "accuracy": self.accuracy_m}
