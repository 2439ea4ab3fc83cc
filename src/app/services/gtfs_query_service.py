from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from src.app.services.result_projector import unique_by
from src.domain.models.gtfs import GtfsRoute, GtfsStop
from src.domain.models.record_store import GtfsRecordStore


@dataclass(slots=True)
class GtfsQueryService:
    """Read-only queries over a loaded record store.

    - Lists routes and stops in load order.
    - Joins route -> trips -> stop_times -> stops for a single route.
    """

    store: GtfsRecordStore

    def list_routes(self) -> tuple[GtfsRoute, ...]:
        return self.store.routes.values()

    def list_stops(self) -> tuple[GtfsStop, ...]:
        return self.store.stops.values()

    def stops_for_route(self, *, route_id: str) -> tuple[GtfsStop, ...]:
        """Return unique stops served by any trip of `route_id`.

        Ordering is not guaranteed. Stop times pointing at unknown stops are
        skipped; an unknown route yields an empty tuple.
        """

        return unique_by(self._route_stops(route_id), key=lambda s: s.stop_id)

    def _route_stops(self, route_id: str) -> Iterator[GtfsStop]:
        for trip_id in self.store.trip_ids_for_route(route_id):
            for stop_time in self.store.stop_times_for_trip(trip_id):
                if stop_time.stop_id is None:
                    continue
                stop = self.store.stops.get(stop_time.stop_id)
                if stop is None:
                    continue
                yield stop
