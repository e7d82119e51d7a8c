import time

import pytest
import requests

from geolocation.sensor import (
    FixedLocationSensor,
    IPLocationSensor,
    LocationSensor,
    LocationUnavailable,
    PositionOptions,
)
from locations.models import Position


class AgedSensor(LocationSensor):
    """Every reading claims to be `age_s` seconds old already."""

    def __init__(self, age_s):
        super().__init__()
        self.age_s = age_s
        self.reads = 0

    def read(self, options):
        self.reads += 1
        return Position(lat=39.7, lon=-104.9, accuracy_m=10.0, captured_at=time.time() - self.age_s)


def test_default_options():
    options = PositionOptions()
    assert options.high_accuracy is True
    assert options.timeout_s == 10
    assert options.maximum_age_s == 60


def test_recent_reading_is_reused():
    sensor = AgedSensor(age_s=30)

    first = sensor.get_current_position()

    assert sensor.get_current_position() is first
    assert sensor.reads == 1


def test_stale_reading_is_replaced():
    sensor = AgedSensor(age_s=61)

    sensor.get_current_position()
    sensor.get_current_position()

    assert sensor.reads == 2


def test_maximum_age_comes_from_options():
    sensor = AgedSensor(age_s=30)

    sensor.get_current_position(PositionOptions(maximum_age_s=0))
    sensor.get_current_position(PositionOptions(maximum_age_s=0))

    assert sensor.reads == 2


def test_sensor_errors_become_location_unavailable():
    class Broken(LocationSensor):
        def read(self, options):
            raise TimeoutError("Timeout expired")

    with pytest.raises(LocationUnavailable, match="Timeout expired"):
        Broken().get_current_position()


def test_fixed_sensor_reports_its_position():
    position = FixedLocationSensor(39.7392, -104.9903, accuracy_m=20.0).get_current_position()
    assert position.location == (39.7392, -104.9903)
    assert position.accuracy_m == 20.0


def test_fixed_sensor_rejects_bad_coordinates():
    with pytest.raises(ValueError):
        FixedLocationSensor(120.0, -104.9)


def test_ip_sensor_reads_lat_lon(monkeypatch, fake_response):
    calls = []

    def _get(url, timeout=None):
        calls.append((url, timeout))
        return fake_response({"status": "success", "lat": 39.7392, "lon": -104.9903, "city": "Denver"})

    monkeypatch.setattr("geolocation.sensor.requests.get", _get)

    position = IPLocationSensor(url="http://ip.test/json").get_current_position()

    assert position.location == (39.7392, -104.9903)
    assert position.accuracy_m == IPLocationSensor.ACCURACY_M
    assert calls == [("http://ip.test/json", 10)]


@pytest.mark.parametrize("response", [
    {"status": "fail", "message": "private range"},
    {"status": "success"},
])
def test_ip_sensor_bad_answers(monkeypatch, fake_response, response):
    monkeypatch.setattr("geolocation.sensor.requests.get",
                        lambda url, timeout=None: fake_response(response))

    with pytest.raises(LocationUnavailable):
        IPLocationSensor(url="http://ip.test/json").get_current_position()


def test_ip_sensor_network_error(monkeypatch):
    def _boom(url, timeout=None):
        raise requests.exceptions.Timeout("read timed out")

    monkeypatch.setattr("geolocation.sensor.requests.get", _boom)

    with pytest.raises(LocationUnavailable, match="timed out"):
        IPLocationSensor(url="http://ip.test/json").get_current_position()


def test_ip_sensor_url_from_environment(monkeypatch):
    monkeypatch.setenv("IP_LOCATION_URL", "http://ip.env/json")

    assert IPLocationSensor().url == "http://ip.env/json"
