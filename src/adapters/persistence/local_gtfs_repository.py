from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

from src.adapters.config import DEFAULT_GTFS_PATH
from src.adapters.persistence.csv_table_reader import read_table
from src.app.ports.output import IGtfsRepository
from src.domain.exceptions import GtfsLoadError, GtfsParseError
from src.domain.models.gtfs import (
    WEEKDAY_COLUMNS,
    GtfsCalendar,
    GtfsRoute,
    GtfsStop,
    GtfsStopTime,
    GtfsTrip,
    stop_time_key,
)
from src.domain.models.record_store import GtfsRecordStore

logger = logging.getLogger(__name__)


def _opt(row: Mapping[str, str], name: str) -> str | None:
    return row.get(name) or None


def _opt_int(row: Mapping[str, str], name: str) -> int | None:
    raw = (row.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} is not an integer: {raw!r}") from None


def _opt_float(row: Mapping[str, str], name: str) -> float | None:
    raw = (row.get(name) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} is not a number: {raw!r}") from None


def _route_key(row: Mapping[str, str]) -> str | None:
    return row.get("route_id") or None


def _stop_key(row: Mapping[str, str]) -> str | None:
    return row.get("stop_id") or None


def _trip_key(row: Mapping[str, str]) -> str | None:
    return row.get("trip_id") or None


def _stop_time_key(row: Mapping[str, str]) -> str | None:
    trip_id = row.get("trip_id")
    stop_sequence = row.get("stop_sequence")
    if not trip_id or not stop_sequence:
        return None
    return stop_time_key(trip_id, stop_sequence)


def _calendar_key(row: Mapping[str, str]) -> str | None:
    return row.get("service_id") or None


def _build_route(key: str, row: Mapping[str, str]) -> GtfsRoute:
    return GtfsRoute(
        route_id=key,
        short_name=_opt(row, "route_short_name"),
        long_name=_opt(row, "route_long_name"),
        route_type=_opt_int(row, "route_type"),
        fields=row,
    )


def _build_stop(key: str, row: Mapping[str, str]) -> GtfsStop:
    return GtfsStop(
        stop_id=key,
        name=_opt(row, "stop_name"),
        lat=_opt_float(row, "stop_lat"),
        lon=_opt_float(row, "stop_lon"),
        fields=row,
    )


def _build_trip(key: str, row: Mapping[str, str]) -> GtfsTrip:
    return GtfsTrip(
        trip_id=key,
        route_id=_opt(row, "route_id"),
        service_id=_opt(row, "service_id"),
        headsign=_opt(row, "trip_headsign"),
        fields=row,
    )


def _build_stop_time(key: str, row: Mapping[str, str]) -> GtfsStopTime:
    sequence = _opt_int(row, "stop_sequence")
    if sequence is None:
        raise ValueError("stop_sequence is empty")
    return GtfsStopTime(
        trip_id=row["trip_id"],
        stop_sequence=sequence,
        stop_id=_opt(row, "stop_id"),
        arrival_time=_opt(row, "arrival_time"),
        departure_time=_opt(row, "departure_time"),
        fields=row,
    )


def _build_calendar(key: str, row: Mapping[str, str]) -> GtfsCalendar:
    return GtfsCalendar(
        service_id=key,
        weekdays=tuple(
            (row.get(day) or "").strip() == "1" for day in WEEKDAY_COLUMNS
        ),
        start_date=_opt(row, "start_date"),
        end_date=_opt(row, "end_date"),
        fields=row,
    )


@dataclass(frozen=True, slots=True)
class GtfsTable:
    """How one required file maps onto a store collection."""

    file_name: str
    collection: str
    key: Callable[[Mapping[str, str]], str | None]
    build: Callable[[str, Mapping[str, str]], Any]


# Load order is fixed.
GTFS_TABLES: tuple[GtfsTable, ...] = (
    GtfsTable("routes.txt", "routes", _route_key, _build_route),
    GtfsTable("stops.txt", "stops", _stop_key, _build_stop),
    GtfsTable("trips.txt", "trips", _trip_key, _build_trip),
    GtfsTable("stop_times.txt", "stop_times", _stop_time_key, _build_stop_time),
    GtfsTable("calendar.txt", "calendar", _calendar_key, _build_calendar),
)


@dataclass(slots=True)
class GtfsLoadReport:
    loaded: dict[str, int] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)
    dropped: dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class LocalGtfsRepository(IGtfsRepository):
    """Loads the five core GTFS tables from a directory of .txt files.

    Env vars:
      - GTFS_PATH: directory used when `base_path` is not given; falls back
        to `gtfs_data` next to the `src` package

    A missing table is logged and left empty. Any read or parse failure in
    a present table aborts the whole load with `GtfsLoadError`.
    """

    base_path: str | Path | None = None
    last_report: GtfsLoadReport | None = field(default=None, init=False)

    def _base(self) -> Path:
        value = self.base_path or os.getenv("GTFS_PATH")
        return Path(value) if value else DEFAULT_GTFS_PATH

    def load_store(self) -> GtfsRecordStore:
        base = self._base()
        store = GtfsRecordStore()
        report = GtfsLoadReport()

        try:
            for table in GTFS_TABLES:
                path = base / table.file_name
                if not path.is_file():
                    logger.warning("Missing file: %s", table.file_name)
                    report.missing.append(table.file_name)
                    continue

                try:
                    stored, dropped = self._load_table(path, table, store)
                except GtfsParseError as exc:
                    logger.error("Failed to load %s: %s", table.file_name, exc)
                    raise

                report.loaded[table.file_name] = stored
                if dropped:
                    report.dropped[table.file_name] = dropped
                    logger.warning(
                        "Dropped %d row(s) without a key in %s",
                        dropped,
                        table.file_name,
                    )
                logger.info("Successfully loaded %s", table.file_name)
        except GtfsLoadError as exc:
            raise GtfsLoadError(f"GTFS data loading failed: {exc}") from exc

        store.seal()
        self.last_report = report
        return store

    @staticmethod
    def _load_table(
        path: Path, table: GtfsTable, store: GtfsRecordStore
    ) -> tuple[int, int]:
        collection = getattr(store, table.collection)
        dropped = 0
        # Header is line 1.
        for line, row in enumerate(read_table(path), start=2):
            key = table.key(row)
            if not key:
                dropped += 1
                continue
            try:
                record = table.build(key, row)
            except ValueError as exc:
                raise GtfsParseError(table.file_name, str(exc), line=line) from exc
            collection.put(key, record)
        return len(collection), dropped
