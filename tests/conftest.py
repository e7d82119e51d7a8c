import pytest
import requests

from distances.service import DistanceService
from distances.storage import MemoryStore, ReportCache
from geolocation.sensor import FixedLocationSensor
from routing.osrm_client import OSRMError

DOWNTOWN = (39.7392, -104.9903)


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


class FakeOSRM:
    """
    Stands in for OSRMClient. Destination i is (i + 1) km away and takes
    (i + 1) minutes per km factor of the profile. Profiles listed in
    `failing` raise OSRMError.
    """
    FACTORS = {"car": 1, "bike": 4, "foot": 12}

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.calls = []

    def compute_table_from_origin(self, profile, origin, destinations):
        self.calls.append((profile, origin, list(destinations)))
        if profile in self.failing:
            raise OSRMError(f"OSRM returned error: NoTable ({profile})")
        factor = self.FACTORS[profile]
        return {
            "distances": [1000.0 * (i + 1) for i in range(len(destinations))],
            "durations": [60.0 * (i + 1) * factor for i in range(len(destinations))],
        }


@pytest.fixture(autouse=True)
def no_pause(monkeypatch):
    """Skip the pause between travel modes."""
    pauses = []
    monkeypatch.setattr("distances.service.time.sleep", lambda seconds: pauses.append(seconds))
    return pauses


@pytest.fixture
def fake_osrm():
    return FakeOSRM()


@pytest.fixture
def memory_cache():
    return ReportCache(MemoryStore())


@pytest.fixture
def make_service(fake_osrm, memory_cache):
    def _make(location=DOWNTOWN, osrm=None, cache=None, sensor="fixed"):
        if sensor == "fixed":
            sensor = FixedLocationSensor(*location, accuracy_m=15.0)
        return DistanceService(
            sensor=sensor,
            osrm=osrm or fake_osrm,
            cache=cache or memory_cache,
        )
    return _make


@pytest.fixture
def downtown():
    return DOWNTOWN


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def failing_osrm():
    """FakeOSRM whose listed profiles fail."""
    return lambda *profiles: FakeOSRM(failing=profiles)
