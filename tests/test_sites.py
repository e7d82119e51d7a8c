from locations.models import TravelMode
from locations.sites import SITES, lookup_site_by_name


def test_site_table_is_fixed_and_unique():
    assert len(SITES) == 32
    assert len({site.name for site in SITES}) == len(SITES)
    assert SITES[0].name == "Ashland"
    assert SITES[-1].name == "Woodbury"


def test_sites_sit_in_the_denver_area():
    for site in SITES:
        assert 39.6 < site.lat < 39.9
        assert -105.1 < site.lon < -104.7


def test_lookup_is_case_insensitive_substring():
    assert lookup_site_by_name("ashland").name == "Ashland"
    assert lookup_site_by_name("GLENARM").name == "Glenarm"
    assert lookup_site_by_name("madison").name == "Carla Madison"


def test_lookup_matches_when_site_name_is_inside_query():
    assert lookup_site_by_name("Washington Park Rec Center").name == "Washington Park"


def test_lookup_first_match_wins():
    # "Park" appears in several names; table order decides
    assert lookup_site_by_name("park").name == "Central Park"


def test_lookup_not_found():
    assert lookup_site_by_name("xyz-not-a-site") is None


def test_travel_mode_profiles():
    assert TravelMode.DRIVING.osrm_profile == "car"
    assert TravelMode.BIKING.osrm_profile == "bike"
    assert TravelMode.WALKING.osrm_profile == "foot"
