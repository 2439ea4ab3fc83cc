from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

from src.domain.exceptions import StoreSealedError
from src.domain.models.gtfs import (
    GtfsCalendar,
    GtfsRoute,
    GtfsStop,
    GtfsStopTime,
    GtfsTrip,
)

T = TypeVar("T")


class RecordCollection(Generic[T]):
    """Keyed, insertion-ordered collection of records for one entity type.

    A later `put` with an existing key replaces the record but keeps the
    position of the first insertion.
    """

    __slots__ = ("name", "_records", "_sealed")

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: dict[str, T] = {}
        self._sealed = False

    def put(self, key: str, record: T) -> None:
        if self._sealed:
            raise StoreSealedError(f"Collection '{self.name}' is read-only")
        self._records[key] = record

    def get(self, key: str) -> T | None:
        return self._records.get(key)

    def values(self) -> tuple[T, ...]:
        return tuple(self._records.values())

    def keys(self) -> tuple[str, ...]:
        return tuple(self._records)

    def seal(self) -> None:
        self._sealed = True

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[T]:
        return iter(self._records.values())

    def __repr__(self) -> str:
        return f"RecordCollection(name={self.name!r}, size={len(self)})"


@dataclass(slots=True)
class GtfsRecordStore:
    """Owns the five GTFS collections for the lifetime of the process.

    Populated once by a loader, then sealed. Sealing builds the lookup
    indexes used by the query layer; nothing is written afterwards.
    """

    routes: RecordCollection[GtfsRoute] = field(
        default_factory=lambda: RecordCollection("routes")
    )
    stops: RecordCollection[GtfsStop] = field(
        default_factory=lambda: RecordCollection("stops")
    )
    trips: RecordCollection[GtfsTrip] = field(
        default_factory=lambda: RecordCollection("trips")
    )
    stop_times: RecordCollection[GtfsStopTime] = field(
        default_factory=lambda: RecordCollection("stop_times")
    )
    calendar: RecordCollection[GtfsCalendar] = field(
        default_factory=lambda: RecordCollection("calendar")
    )

    _sealed: bool = field(default=False, init=False, repr=False)
    _trip_ids_by_route: dict[str, tuple[str, ...]] = field(
        default_factory=dict, init=False, repr=False
    )
    _stop_times_by_trip: dict[str, tuple[GtfsStopTime, ...]] = field(
        default_factory=dict, init=False, repr=False
    )

    @property
    def sealed(self) -> bool:
        return self._sealed

    def collections(self) -> tuple[RecordCollection, ...]:
        return (self.routes, self.stops, self.trips, self.stop_times, self.calendar)

    def seal(self) -> None:
        if self._sealed:
            return

        trip_ids: dict[str, list[str]] = {}
        for trip in self.trips:
            if trip.route_id is None:
                continue
            trip_ids.setdefault(trip.route_id, []).append(trip.trip_id)

        stop_times: dict[str, list[GtfsStopTime]] = {}
        for st in self.stop_times:
            stop_times.setdefault(st.trip_id, []).append(st)

        self._trip_ids_by_route = {k: tuple(v) for k, v in trip_ids.items()}
        self._stop_times_by_trip = {k: tuple(v) for k, v in stop_times.items()}

        for collection in self.collections():
            collection.seal()
        self._sealed = True

    def trip_ids_for_route(self, route_id: str) -> tuple[str, ...]:
        if not self._sealed:
            return tuple(t.trip_id for t in self.trips if t.route_id == route_id)
        return self._trip_ids_by_route.get(route_id, ())

    def stop_times_for_trip(self, trip_id: str) -> tuple[GtfsStopTime, ...]:
        if not self._sealed:
            return tuple(st for st in self.stop_times if st.trip_id == trip_id)
        return self._stop_times_by_trip.get(trip_id, ())

    def counts(self) -> dict[str, int]:
        return {c.name: len(c) for c in self.collections()}
