"""
Locations domain package.

Public API:
- Domain models: Site, Position, TravelMode
- The fixed site table: SITES, lookup_site_by_name
"""
from .models import Site, Position, TravelMode, TRAVEL_MODES
from .sites import SITES, lookup_site_by_name

__all__ = ["Site",
           "Position",
             "TravelMode",
               "TRAVEL_MODES",
               "SITES",
               "lookup_site_by_name",
               ]
