from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

FeedWriter = Callable[..., Path]

BASE_FEED: dict[str, str] = {
    "routes.txt": (
        "route_id,route_short_name,route_long_name,route_type\n"
        "R1,1,Harbour Line,3\n"
        "R2,2,Airport Shuttle,3\n"
    ),
    "stops.txt": (
        "stop_id,stop_name,stop_lat,stop_lon\n"
        "S1,Central,28.1000,-15.4100\n"
        "S2,Market,28.1100,-15.4200\n"
        "S3,Airport,27.9300,-15.3900\n"
    ),
    "trips.txt": (
        "route_id,service_id,trip_id,trip_headsign\n"
        "R1,WK,T1,Market\n"
        "R1,WK,T2,Central\n"
        "R2,WK,T3,Airport\n"
    ),
    "stop_times.txt": (
        "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"
        "T1,08:00:00,08:00:00,S1,1\n"
        "T1,08:10:00,08:10:00,S2,2\n"
        "T2,09:00:00,09:00:00,S2,1\n"
        "T2,09:10:00,09:10:00,S1,2\n"
        "T3,10:00:00,10:00:00,S1,1\n"
        "T3,10:40:00,10:40:00,S3,2\n"
    ),
    "calendar.txt": (
        "service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,"
        "start_date,end_date\n"
        "WK,1,1,1,1,1,0,0,20260101,20261231\n"
    ),
}


@pytest.fixture
def write_feed(tmp_path: Path) -> FeedWriter:
    """Write the base feed into a fresh directory.

    Keyword overrides replace a table's content; passing None omits the file.
    Keys use the file stem, e.g. `stop_times="..."`.
    """

    def _write(**overrides: str | None) -> Path:
        feed_dir = tmp_path / "gtfs_data"
        feed_dir.mkdir(exist_ok=True)
        for file_name, content in BASE_FEED.items():
            stem = file_name.removesuffix(".txt")
            if stem in overrides:
                content = overrides[stem]
            if content is None:
                continue
            (feed_dir / file_name).write_text(content, encoding="utf-8")
        return feed_dir

    return _write
