import math
from typing import Optional

from locations.policy import METERS_PER_MILE


def round_minutes(seconds: float) -> int:
    """Seconds to whole minutes, halves rounded up (150 s -> 3)."""
    return int(math.floor(seconds / 60 + 0.5))


def format_duration(seconds: Optional[float]) -> str:
    """Converts seconds into a readable 'XX mins' or 'H hr M mins' string."""
    if not seconds:
        return "N/A"
    mins = round_minutes(seconds)
    if mins < 60:
        return f"{mins} mins"
    return f"{mins // 60} hr {mins % 60} mins"


def format_miles(miles: float) -> str:
    return f"{miles:.1f}"


def meters_to_miles_text(meters: Optional[float]) -> Optional[str]:
    if meters is None:
        return None
    return format_miles(meters / METERS_PER_MILE)
