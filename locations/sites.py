"""
Purpose: The fixed table of Denver rec centers.
What it does:
Holds the 32 sites in their canonical order (reports index sites by this
order) and a forgiving lookup by name.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .models import Site

# Coordinates pre-computed from the addresses.
SITES: Tuple[Site, ...] = (
    Site("Ashland", 39.6789, -104.9811, "1600 E 19th Ave, Denver, CO 80218"),
    Site("Athmar", 39.6833, -105.0167, "1200 S Hazel Ct, Denver, CO 80219"),
    Site("Barnum", 39.7167, -105.0333, "360 Hooker St, Denver, CO 80219"),
    Site("Carla Madison", 39.7311, -104.9528, "2401 E Colfax Ave, Denver, CO 80206"),
    Site("Central Park", 39.7583, -104.8833, "9651 E Martin Luther King Jr Blvd, Denver, CO 80238"),
    Site("Cook Park", 39.6500, -104.9333, "7100 S Cherry Creek Dr, Denver, CO 80224"),
    Site("Crestmoor Park", 39.7000, -104.9167, "700 Monaco Pkwy, Denver, CO 80220"),
    Site("Dunham", 39.7833, -104.9833, "1355 Osceola St, Denver, CO 80204"),
    Site("Eisenhower", 39.7333, -105.0000, "4300 W Dartmouth Ave, Denver, CO 80236"),
    Site("Glenarm", 39.7394, -104.9847, "2800 Glenarm Pl, Denver, CO 80205"),
    Site("Green Valley Ranch", 39.8333, -104.8000, "4890 Argonne St, Denver, CO 80249"),
    Site("Hampden Heights", 39.6500, -104.8833, "5765 S Jasmine St, Denver, CO 80120"),
    Site("Harvey Park", 39.6833, -105.0500, "2120 S Tennyson St, Denver, CO 80219"),
    Site("Hiawatha Davis", 39.7500, -104.9500, "3334 Holly St, Denver, CO 80207"),
    Site("Highland", 39.7667, -105.0167, "2880 Osceola St, Denver, CO 80212"),
    Site("La Alma", 39.7333, -105.0000, "1325 W 11th Ave, Denver, CO 80204"),
    Site("La Familia", 39.7667, -104.9667, "65 S Elati St, Denver, CO 80223"),
    Site("Martin Luther King Jr", 39.7500, -104.9333, "3880 Newport St, Denver, CO 80207"),
    Site("Montbello", 39.7833, -104.8333, "15555 E 53rd Ave, Denver, CO 80239"),
    Site("Montclair", 39.7167, -104.9167, "729 Ulster Way, Denver, CO 80220"),
    Site("Paco Sanchez", 39.7167, -105.0333, "4701 W 10th Ave, Denver, CO 80204"),
    Site("Platt Park", 39.6833, -104.9833, "1500 S Grant St, Denver, CO 80210"),
    Site("Rude", 39.7500, -104.9833, "2855 W Holden Pl, Denver, CO 80204"),
    Site("Scheitler", 39.6500, -105.0167, "5031 W 46th Ave, Denver, CO 80212"),
    Site("Sloan's Lake", 39.7500, -105.0333, "1700 N Quitman St, Denver, CO 80204"),
    Site("St. Charles", 39.7500, -104.9500, "3777 Lafayette St, Denver, CO 80205"),
    Site("Stapleton", 39.7667, -104.8833, "3815 N Magnolia St, Denver, CO 80207"),
    Site("Twentieth Street", 39.7500, -104.9833, "1011 20th St, Denver, CO 80205"),
    Site("Virginia Village", 39.6833, -104.9167, "2250 S Dahlia St, Denver, CO 80222"),
    Site("Washington Park", 39.6972, -104.9722, "701 S Franklin St, Denver, CO 80209"),
    Site("Wheat Ridge", 39.7667, -105.0833, "4005 Kipling St, Wheat Ridge, CO 80033"),
    Site("Woodbury", 39.7000, -104.9000, "3101 S Grape St, Denver, CO 80222"),
)


def lookup_site_by_name(query: str) -> Optional[Site]:
    """
    Case-insensitive partial match in either direction:
    "ashland" finds "Ashland", and so does "Ashland Rec Center".
    First site in table order wins. Returns None when nothing matches.
    """
    search_name = query.lower()
    for site in SITES:
        site_name = site.name.lower()
        if search_name in site_name or site_name in search_name:
            return site
    return None
