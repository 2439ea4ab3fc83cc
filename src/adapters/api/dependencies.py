from __future__ import annotations

from fastapi import Request

from src.app.services.gtfs_query_service import GtfsQueryService


def get_gtfs_query_service(request: Request) -> GtfsQueryService:
    # Set once by `create_app`, before the server accepts connections.
    return request.app.state.gtfs_query_service
