from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.adapters.api.dependencies import get_gtfs_query_service
from src.adapters.api.schemas.gtfs import ErrorSchema
from src.app.services.gtfs_query_service import GtfsQueryService
from src.app.services.result_projector import to_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["gtfs"])

Rows = list[dict[str, str]]


def _error(error: str, message: str | None = None) -> JSONResponse:
    body = ErrorSchema(error=error, message=message)
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


@router.get(
    "/routes",
    response_model=Rows,
    responses={500: {"model": ErrorSchema}},
)
def list_routes(
    service: GtfsQueryService = Depends(get_gtfs_query_service),
) -> Rows | JSONResponse:
    try:
        return to_payload(service.list_routes())
    except Exception:
        logger.exception("Failed to retrieve routes data")
        return _error("Failed to retrieve routes data")


@router.get(
    "/stops",
    response_model=Rows,
    responses={500: {"model": ErrorSchema}},
)
def list_stops(
    service: GtfsQueryService = Depends(get_gtfs_query_service),
) -> Rows | JSONResponse:
    try:
        return to_payload(service.list_stops())
    except Exception:
        logger.exception("Failed to retrieve stops data")
        return _error("Failed to retrieve stops data")


@router.get(
    "/routes/{route_id}/stops",
    response_model=Rows,
    responses={500: {"model": ErrorSchema}},
)
def list_route_stops(
    route_id: str,
    service: GtfsQueryService = Depends(get_gtfs_query_service),
) -> Rows | JSONResponse:
    try:
        return to_payload(service.stops_for_route(route_id=route_id))
    except Exception as exc:
        logger.exception("Failed to retrieve stops for route %s", route_id)
        return _error("Failed to retrieve route stops", str(exc))
