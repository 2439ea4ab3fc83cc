from .gtfs_repository import IGtfsRepository

__all__ = [
    "IGtfsRepository",
]
