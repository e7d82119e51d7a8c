#Purpose: The location sensor boundary.
#Sole responsibility: produce the user's current Position or fail with LocationUnavailable.
#Encapsulates:
#options (high accuracy, timeout, maximum cached age)
#reuse of a recent reading when it is young enough
#wrapping every sensor-specific failure into one error type
#It should not know about sites, routing or caching of reports.

import logging
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import requests

from locations.models import Position
from locations.policy import (
    LOCATION_HIGH_ACCURACY,
    LOCATION_MAX_AGE_SECONDS,
    LOCATION_TIMEOUT_SECONDS,
)

IP_LOCATION_URL = "http://ip-api.com/json/"

logger = logging.getLogger(__name__)


class LocationUnavailable(Exception):
    """Sensor missing, permission denied, timed out or returned garbage."""
    pass


@dataclass(frozen=True)
class PositionOptions:
    high_accuracy: bool = LOCATION_HIGH_ACCURACY
    timeout_s: float = LOCATION_TIMEOUT_SECONDS
    maximum_age_s: float = LOCATION_MAX_AGE_SECONDS


class LocationSensor(ABC):
    """
    Base class for every location source.

    Subclasses implement `read()`. Callers use `get_current_position()`,
    which hands back the last reading if it is no older than
    `options.maximum_age_s` and converts any failure into LocationUnavailable.
    """

    def __init__(self):
        self._last: Optional[Position] = None

    @abstractmethod
    def read(self, options: PositionOptions) -> Position:
        """Take a fresh reading. May raise anything; the caller wraps it."""
        pass

    def get_current_position(self, options: Optional[PositionOptions] = None) -> Position:
        options = options or PositionOptions()
        now = time.time()

        if self._last is not None and now - self._last.captured_at <= options.maximum_age_s:
            return self._last

        try:
            position = self.read(options)
        except LocationUnavailable:
            raise
        except Exception as e:
            raise LocationUnavailable(f"{type(self).__name__} failed: {e}") from e

        self._last = position
        return position


class FixedLocationSensor(LocationSensor):
    """A sensor that always reports one configured position."""

    def __init__(self, lat: float, lon: float, accuracy_m: Optional[float] = None):
        super().__init__()
        if not -90 <= lat <= 90 or not -180 <= lon <= 180:
            raise ValueError(f"Invalid coordinates: ({lat}, {lon})")
        self.lat = lat
        self.lon = lon
        self.accuracy_m = accuracy_m

    def read(self, options: PositionOptions) -> Position:
        return Position(lat=self.lat, lon=self.lon, accuracy_m=self.accuracy_m,
                        captured_at=time.time())


class IPLocationSensor(LocationSensor):
    """
    Approximate location from the machine's public IP address.

    Expects an ip-api style JSON body:
        {"status": "success", "lat": 39.73, "lon": -104.99, ...}
    Accuracy is city level at best, so `high_accuracy` cannot be honored
    and is only logged.
    """
    # Rough radius of a city-level IP fix.
    ACCURACY_M = 5000.0

    def __init__(self, url: Optional[str] = None):
        super().__init__()
        self.url = url or os.getenv("IP_LOCATION_URL", IP_LOCATION_URL)

    def read(self, options: PositionOptions) -> Position:
        if options.high_accuracy:
            logger.debug("High accuracy requested; IP lookup is city level only")

        try:
            response = requests.get(self.url, timeout=options.timeout_s)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise LocationUnavailable(f"IP location lookup failed: {e}") from e

        if data.get("status") != "success":
            raise LocationUnavailable(f"IP location lookup refused: {data.get('message', data.get('status'))}")

        try:
            return Position(lat=float(data["lat"]), lon=float(data["lon"]),
                            accuracy_m=self.ACCURACY_M, captured_at=time.time())
        except (KeyError, TypeError, ValueError) as e:
            raise LocationUnavailable(f"IP location response missing coordinates: {e}") from e
