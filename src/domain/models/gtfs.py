from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

WEEKDAY_COLUMNS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


@dataclass(frozen=True, slots=True)
class GtfsRoute:
    route_id: str
    short_name: str | None = None
    long_name: str | None = None
    route_type: int | None = None
    # Complete source row, unknown columns included.
    fields: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GtfsStop:
    stop_id: str
    name: str | None = None
    lat: float | None = None
    lon: float | None = None
    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.lat is not None and not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if self.lon is not None and not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")


@dataclass(frozen=True, slots=True)
class GtfsTrip:
    trip_id: str
    route_id: str | None = None
    service_id: str | None = None
    headsign: str | None = None
    fields: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GtfsStopTime:
    """A single trip's visit to a stop.

    Times are kept as the raw GTFS strings (HH:MM:SS, hours may exceed 24).
    """

    trip_id: str
    stop_sequence: int
    stop_id: str | None = None
    arrival_time: str | None = None
    departure_time: str | None = None
    fields: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GtfsCalendar:
    service_id: str
    weekdays: tuple[bool, ...] = (False,) * 7  # Monday..Sunday
    start_date: str | None = None
    end_date: str | None = None
    fields: Mapping[str, str] = field(default_factory=dict)


def stop_time_key(trip_id: str, stop_sequence: str) -> str:
    """Composite StopTime key built from the raw `stop_sequence` text."""
    return f"{trip_id}_{stop_sequence}"
