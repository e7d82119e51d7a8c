#Expose the high-level pieces:
#Report models
#Cache / storage
#DistanceService (the “one call” entry point)

from .models import DistanceReport, DistanceResult, ModeDistance, ReportSource, SiteDistances
from .storage import ReportCache, JsonFileStore, MemoryStore, StorageError, StorageResult
from .service import DistanceService #the main class to call to get distances to every site

__all__ = [
    "DistanceReport",
    "DistanceResult",
    "ModeDistance",
    "ReportSource",
    "SiteDistances",
    "ReportCache",
    "JsonFileStore",
    "MemoryStore",
    "StorageError",
    "StorageResult",
    "DistanceService",
]
