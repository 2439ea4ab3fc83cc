from __future__ import annotations

import logging
from pathlib import Path

from src.domain.exceptions import GtfsLoadError

logger = logging.getLogger(__name__)

# One header line and one data row per required table.
SAMPLE_FEED: dict[str, str] = {
    "routes.txt": (
        "route_id,route_short_name,route_long_name,route_type\n"
        "1,101,Downtown Express,3\n"
    ),
    "stops.txt": (
        "stop_id,stop_name,stop_lat,stop_lon\n"
        "1001,Downtown Station,40.712778,-74.006111\n"
    ),
    "trips.txt": (
        "route_id,service_id,trip_id,trip_headsign\n"
        "1,1,1001,Downtown via Main St\n"
    ),
    "stop_times.txt": (
        "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"
        "1001,08:00:00,08:00:00,1001,1\n"
    ),
    "calendar.txt": (
        "service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,"
        "start_date,end_date\n"
        "1,1,1,1,1,1,0,0,20240101,20241231\n"
    ),
}


def _load_failed(reason: str) -> GtfsLoadError:
    return GtfsLoadError(f"GTFS data loading failed: {reason}")


def ensure_data_directory(path: Path) -> list[str]:
    """Make sure `path` exists; seed a sample feed into it if it is empty.

    Returns the names of the sample files that were written. Any failure to
    create or read the directory raises `GtfsLoadError`.
    """

    try:
        exists = path.exists()
    except OSError as exc:
        raise _load_failed(f"cannot read {path}: {exc}") from exc

    if not exists:
        logger.warning("GTFS directory not found at: %s, creating it", path)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise _load_failed(f"Failed to create GTFS directory: {exc}") from exc

    try:
        is_dir = path.is_dir()
        has_files = is_dir and any(path.iterdir())
    except OSError as exc:
        raise _load_failed(f"cannot read {path}: {exc}") from exc

    if not is_dir:
        raise _load_failed(f"GTFS path is not a directory: {path}")
    if has_files:
        return []

    logger.info("GTFS directory is empty. Creating sample files...")
    return seed_sample_feed(path)

def seed_sample_feed(path: Path) -> list[str]:
    created: list[str] = []
    for file_name, content in SAMPLE_FEED.items():
        target = path / file_name
        if target.exists():
            continue
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to create %s: %s", file_name, exc)
            continue
        logger.info("Created sample %s", file_name)
        created.append(file_name)
    return created
