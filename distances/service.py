"""
Purpose: The distance service orchestrator (the "one call" entry point).
What it does:
- Gets the user's position from a location sensor
- Reuses the cached report if the user has not moved more than 0.25 miles
- Otherwise asks OSRM for driving, biking and walking tables (one after
  the other, with a short pause between them), merges them with the
  straight-line distance to every site and caches the new report.

Failures never escape get_distances(): a missing location falls back to
the cache, a failed travel mode is left out of the report and a failed
cache write is only logged.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from geolocation.sensor import LocationSensor, LocationUnavailable, PositionOptions
from locations.models import Position, Site, TravelMode, TRAVEL_MODES
from locations.policy import LOCATION_THRESHOLD_MILES, MODE_PAUSE_SECONDS
from locations.sites import SITES, lookup_site_by_name
from routing.osrm_client import OSRMClient, OSRMError

from .formatting import format_duration, format_miles, meters_to_miles_text, round_minutes
from .geometry import haversine_miles
from .models import DistanceReport, DistanceResult, ModeDistance, ReportSource, SiteDistances
from .storage import ReportCache

logger = logging.getLogger(__name__)

# (message, percent) -> None
ProgressCallback = Callable[[str, float], None]


class DistanceService:
    """
    Distances and travel times from the user's position to every rec center.

    Collaborators are injected so tests can swap them:
        sensor: LocationSensor or None (None means "geolocation not supported")
        osrm:   OSRMClient
        cache:  ReportCache
    """

    def __init__(
        self,
        sensor: Optional[LocationSensor] = None,
        osrm: Optional[OSRMClient] = None,
        cache: Optional[ReportCache] = None,
    ):
        self.sensor = sensor
        self.osrm = osrm or OSRMClient()
        self.cache = cache or ReportCache()
        self.sites = SITES

    # --- Location ---

    def get_current_location(self) -> Position:
        if self.sensor is None:
            raise LocationUnavailable("Geolocation not supported")
        return self.sensor.get_current_position(PositionOptions())

    @staticmethod
    def compute_great_circle_distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        return haversine_miles(lat1, lon1, lat2, lon2)

    def has_moved_significantly(self, current_lat: float, current_lon: float,
                                cached_lat: float, cached_lon: float) -> bool:
        distance = haversine_miles(current_lat, current_lon, cached_lat, cached_lon)
        return distance > LOCATION_THRESHOLD_MILES

    # --- Routing ---

    def fetch_mode_distances(self, origin_lat: float, origin_lon: float,
                             mode: TravelMode) -> Optional[List[ModeDistance]]:
        """
        One OSRM table call for `mode`. Index i of the result is self.sites[i].
        Returns None if OSRM could not answer; nothing is partially filled.
        """
        mode = TravelMode(mode)
        try:
            table = self.osrm.compute_table_from_origin(
                mode.osrm_profile,
                (origin_lat, origin_lon),
                [site.location for site in self.sites],
            )
        except OSRMError as e:
            logger.error("OSRM %s calculation failed: %s", mode.value, e)
            return None

        results = []
        for meters, seconds in zip(table["distances"], table["durations"]):
            results.append(ModeDistance(
                meters=meters,
                miles=meters_to_miles_text(meters),
                seconds=seconds,
                minutes=round_minutes(seconds) if seconds is not None else None,
                human_time=format_duration(seconds),
            ))
        return results

    def build_full_report(self, origin_lat: float, origin_lon: float,
                          on_progress: Optional[ProgressCallback] = None) -> DistanceReport:
        report = DistanceReport(
            origin=(origin_lat, origin_lon),
            timestamp=int(time.time() * 1000),
            sites=[
                SiteDistances(
                    site=site,
                    straight_line_miles=format_miles(
                        haversine_miles(origin_lat, origin_lon, site.lat, site.lon)),
                )
                for site in self.sites
            ],
        )

        for i, mode in enumerate(TRAVEL_MODES):
            if on_progress:
                on_progress(f"Calculating {mode.value} distances...", (i + 1) / len(TRAVEL_MODES) * 100)

            mode_results = self.fetch_mode_distances(origin_lat, origin_lon, mode)
            if mode_results is not None:
                # merged by position: OSRM answers in the order the sites were sent
                for entry, mode_distance in zip(report.sites, mode_results):
                    entry.modes[mode] = mode_distance

            if i < len(TRAVEL_MODES) - 1:
                time.sleep(MODE_PAUSE_SECONDS)

        return report

    # --- Cache ---

    def get_cached_data(self) -> Optional[DistanceReport]:
        return self.cache.get().value

    def set_cached_data(self, report: DistanceReport) -> bool:
        return self.cache.set(report).ok

    def clear_cache(self) -> None:
        self.cache.clear()

    # --- Entry point ---

    def get_distances(self, on_progress: Optional[ProgressCallback] = None,
                      force_refresh: bool = False) -> DistanceResult:
        try:
            if on_progress:
                on_progress("Getting your location...", 0)
            user_location = self.get_current_location()
        except LocationUnavailable as e:
            logger.warning("Could not get location: %s", e)
            cached = self.get_cached_data()
            if cached:
                return DistanceResult(data=cached, source=ReportSource.CACHE,
                                      error="Location unavailable, using cached data")
            return DistanceResult(data=None, source=ReportSource.NONE,
                                  error="Location unavailable and no cached data")

        cached = self.get_cached_data()

        if not force_refresh and cached:
            moved = self.has_moved_significantly(
                user_location.lat, user_location.lon,
                cached.origin[0], cached.origin[1],
            )
            if not moved:
                logger.info("Using cached distances (within %s miles of cached location)",
                            LOCATION_THRESHOLD_MILES)
                return DistanceResult(data=cached, source=ReportSource.CACHE,
                                      user_location=user_location)
            logger.info("User moved significantly, recalculating distances")

        if on_progress:
            on_progress("Calculating distances to rec centers...", 10)

        report = self.build_full_report(user_location.lat, user_location.lon, on_progress)

        # best-effort: a failed write still returns the fresh report
        self.set_cached_data(report)

        if on_progress:
            on_progress("Done!", 100)

        return DistanceResult(data=report, source=ReportSource.CALCULATED,
                              user_location=user_location)

    def lookup_site_by_name(self, query: str) -> Optional[Site]:
        return lookup_site_by_name(query)
