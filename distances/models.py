"""
Purpose: Report models for the distances domain.
What it does:
Defines the per-site, per-mode distance records, the full report and the
result handed back to callers, plus their JSON-friendly dict forms used
by the cache.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from locations.models import Position, Site, TravelMode

LatLon = Tuple[float, float]


class ReportSource(str, Enum):
    """Where the report in a DistanceResult came from."""
    CACHE = "cache"
    CALCULATED = "calculated"
    NONE = "none"


@dataclass(frozen=True)
class ModeDistance:
    """
    Road distance and travel time from the origin to one site for one travel mode.
    `miles` is None exactly when OSRM returned no distance.
    """
    meters: Optional[float]
    miles: Optional[str]
    seconds: Optional[float]
    minutes: Optional[int]
    human_time: str

    def to_dict(self) -> dict:
        return {
            "meters": self.meters,
            "miles": self.miles,
            "seconds": self.seconds,
            "minutes": self.minutes,
            "time": self.human_time,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ModeDistance:
        return cls(
            meters=data.get("meters"),
            miles=data.get("miles"),
            seconds=data.get("seconds"),
            minutes=data.get("minutes"),
            human_time=data.get("time", "N/A"),
        )


@dataclass
class SiteDistances:
    """
    One site plus everything measured to it.
    A travel mode is missing from `modes` when its OSRM call failed.
    """
    site: Site
    straight_line_miles: str
    modes: Dict[TravelMode, ModeDistance] = field(default_factory=dict)

    def for_mode(self, mode: TravelMode) -> Optional[ModeDistance]:
        return self.modes.get(mode)

    def to_dict(self) -> dict:
        return {
            "name": self.site.name,
            "address": self.site.address,
            "lat": self.site.lat,
            "lng": self.site.lon,
            "straight_line_miles": self.straight_line_miles,
            "modes": {mode.value: entry.to_dict() for mode, entry in self.modes.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> SiteDistances:
        return cls(
            site=Site(name=data["name"], lat=data["lat"], lon=data["lng"], address=data["address"]),
            straight_line_miles=data["straight_line_miles"],
            modes={TravelMode(mode): ModeDistance.from_dict(entry)
                   for mode, entry in data.get("modes", {}).items()},
        )


@dataclass
class DistanceReport:
    """
    Distances from one origin to every site.
    `sites` follows the fixed site order; consumers may index it positionally.
    `timestamp` is epoch milliseconds.
    """
    origin: LatLon
    timestamp: int
    sites: List[SiteDistances] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "origin": {"lat": self.origin[0], "lng": self.origin[1]},
            "timestamp": self.timestamp,
            "sites": [entry.to_dict() for entry in self.sites],
        }

    @classmethod
    def from_dict(cls, data: dict) -> DistanceReport:
        origin = data["origin"]
        return cls(
            origin=(origin["lat"], origin["lng"]),
            timestamp=data["timestamp"],
            sites=[SiteDistances.from_dict(entry) for entry in data.get("sites", [])],
        )


@dataclass(frozen=True)
class DistanceResult:
    data: Optional[DistanceReport]
    source: ReportSource
    user_location: Optional[Position] = None
    error: Optional[str] = None
