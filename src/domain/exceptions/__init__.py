from .gtfs import GtfsError, GtfsLoadError, GtfsParseError, StoreSealedError

__all__ = [
    "GtfsError",
    "GtfsLoadError",
    "GtfsParseError",
    "StoreSealedError",
]
