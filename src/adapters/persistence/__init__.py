from .gtfs_bootstrap import ensure_data_directory, seed_sample_feed
from .local_gtfs_repository import GTFS_TABLES, GtfsLoadReport, LocalGtfsRepository

__all__ = [
    "GTFS_TABLES",
    "GtfsLoadReport",
    "LocalGtfsRepository",
    "ensure_data_directory",
    "seed_sample_feed",
]
