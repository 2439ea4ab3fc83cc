from __future__ import annotations

import pytest

from src.app.services.gtfs_query_service import GtfsQueryService
from src.app.services.result_projector import to_payload, unique_by
from src.domain.models.gtfs import (
    GtfsRoute,
    GtfsStop,
    GtfsStopTime,
    GtfsTrip,
    stop_time_key,
)
from src.domain.models.record_store import GtfsRecordStore

pytestmark = pytest.mark.unit


def _stop(stop_id: str, name: str) -> GtfsStop:
    return GtfsStop(
        stop_id=stop_id,
        name=name,
        lat=0.0,
        lon=0.0,
        fields={"stop_id": stop_id, "stop_name": name},
    )


def _stop_time(trip_id: str, seq: int, stop_id: str) -> GtfsStopTime:
    return GtfsStopTime(trip_id=trip_id, stop_sequence=seq, stop_id=stop_id)


def _store(*, seal: bool = True) -> GtfsRecordStore:
    store = GtfsRecordStore()
    store.routes.put("R1", GtfsRoute(route_id="R1", fields={"route_id": "R1"}))
    store.routes.put("R2", GtfsRoute(route_id="R2", fields={"route_id": "R2"}))
    store.stops.put("S1", _stop("S1", "Central"))
    store.stops.put("S2", _stop("S2", "Market"))
    store.stops.put("S3", _stop("S3", "Airport"))
    store.trips.put("T1", GtfsTrip(trip_id="T1", route_id="R1"))
    store.trips.put("T2", GtfsTrip(trip_id="T2", route_id="R1"))
    store.trips.put("T3", GtfsTrip(trip_id="T3", route_id="R2"))
    for st in (
        _stop_time("T1", 1, "S1"),
        _stop_time("T1", 2, "S2"),
        _stop_time("T2", 1, "S2"),
        _stop_time("T2", 2, "S1"),
        _stop_time("T2", 3, "S404"),
        _stop_time("T3", 1, "S3"),
    ):
        key = stop_time_key(st.trip_id, str(st.stop_sequence))
        store.stop_times.put(key, st)
    if seal:
        store.seal()
    return store


def test_list_routes_and_stops_follow_load_order() -> None:
    svc = GtfsQueryService(store=_store())

    assert [r.route_id for r in svc.list_routes()] == ["R1", "R2"]
    assert [s.stop_id for s in svc.list_stops()] == ["S1", "S2", "S3"]


def test_list_routes_is_repeatable() -> None:
    svc = GtfsQueryService(store=_store())

    assert svc.list_routes() == svc.list_routes()


def test_stops_for_route_single_chain() -> None:
    store = GtfsRecordStore()
    store.routes.put("R1", GtfsRoute(route_id="R1"))
    store.trips.put("T1", GtfsTrip(trip_id="T1", route_id="R1"))
    store.stop_times.put("T1_1", _stop_time("T1", 1, "S1"))
    store.stops.put("S1", _stop("S1", "Central"))
    store.seal()

    stops = GtfsQueryService(store=store).stops_for_route(route_id="R1")

    assert [s.stop_id for s in stops] == ["S1"]


def test_stops_for_route_dedups_and_skips_dangling_stops() -> None:
    svc = GtfsQueryService(store=_store())

    stops = svc.stops_for_route(route_id="R1")

    assert sorted(s.stop_id for s in stops) == ["S1", "S2"]


def test_stops_for_unknown_route_is_empty() -> None:
    svc = GtfsQueryService(store=_store())

    assert svc.stops_for_route(route_id="does-not-exist") == ()


def test_route_id_match_is_exact() -> None:
    svc = GtfsQueryService(store=_store())

    assert svc.stops_for_route(route_id="r1") == ()
    assert svc.stops_for_route(route_id="R1 ") == ()


def test_unsealed_store_gives_same_answers() -> None:
    sealed = GtfsQueryService(store=_store())
    unsealed = GtfsQueryService(store=_store(seal=False))

    for route_id in ("R1", "R2", "R9"):
        assert sealed.stops_for_route(route_id=route_id) == unsealed.stops_for_route(
            route_id=route_id
        )


def test_trip_referencing_unknown_route_is_ignored() -> None:
    store = _store(seal=False)
    store.trips.put("T9", GtfsTrip(trip_id="T9", route_id="R404"))
    store.stop_times.put("T9_1", _stop_time("T9", 1, "S3"))
    store.seal()

    svc = GtfsQueryService(store=store)

    assert [s.stop_id for s in svc.stops_for_route(route_id="R404")] == ["S3"]
    assert [r.route_id for r in svc.list_routes()] == ["R1", "R2"]


def test_unique_by_keeps_first_occurrence() -> None:
    a1 = _stop("A", "first")
    b = _stop("B", "b")
    a2 = _stop("A", "second")

    out = unique_by([a1, b, a2], key=lambda s: s.stop_id)

    assert [s.name for s in out] == ["first", "b"]


def test_to_payload_copies_original_fields() -> None:
    stop = _stop("S1", "Central")

    payload = to_payload([stop])
    payload[0]["stop_name"] = "changed"

    assert to_payload([]) == []
    assert stop.fields["stop_name"] == "Central"
