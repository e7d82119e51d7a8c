"""
Purpose: Central constants for distance reports and caching.
What it does:

Stores the fixed thresholds used by the distance service:

LOCATION_THRESHOLD_MILES = 0.25
MODE_PAUSE_SECONDS = 0.5

Rule: No logic here—just named values.
"""

# Recalculate only if the user moved more than this from the cached origin.
LOCATION_THRESHOLD_MILES = 0.25

# Pause between OSRM table calls to be nice to the shared public server.
MODE_PAUSE_SECONDS = 0.5

EARTH_RADIUS_MILES = 3959
METERS_PER_MILE = 1609.34

# Single slot in the key-value store holding the last report.
CACHE_KEY = "denver_rec_geo_cache"

# --- Location sensor options ---
LOCATION_HIGH_ACCURACY = True
LOCATION_TIMEOUT_SECONDS = 10
LOCATION_MAX_AGE_SECONDS = 60
