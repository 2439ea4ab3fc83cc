from __future__ import annotations

import logging
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.gtfs import router as gtfs_router
from src.adapters.api.schemas.gtfs import ErrorSchema, HealthSchema
from src.adapters.config import ServerConfig
from src.adapters.persistence.gtfs_bootstrap import ensure_data_directory
from src.adapters.persistence.local_gtfs_repository import LocalGtfsRepository
from src.app.services.gtfs_query_service import GtfsQueryService
from src.domain.exceptions import GtfsLoadError

logger = logging.getLogger(__name__)


def create_app(
    query_service: GtfsQueryService, *, reveal_errors: bool = False
) -> FastAPI:
    """Build the API around an already loaded query service."""

    app = FastAPI(title="GTFS API")
    app.state.gtfs_query_service = query_service
    app.include_router(gtfs_router)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled exception", extra={"path": str(request.url.path)})

        message = (str(exc) or exc.__class__.__name__) if reveal_errors else None
        body = ErrorSchema(
            error="Internal Server Error",
            message=message or "Something went wrong",
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    @app.get("/health", response_model=HealthSchema)
    def health() -> HealthSchema:
        return HealthSchema(status="ok")

    return app


def _print_troubleshooting(gtfs_path: Path) -> None:
    tips = (
        "",
        "Troubleshooting tips:",
        f"1. Check if the GTFS data directory exists: {gtfs_path}",
        "2. Verify file permissions",
        "3. Ensure GTFS files have correct column headers",
        "4. Check if all required GTFS files are present",
    )
    print("\n".join(tips), file=sys.stderr)


def load_query_service(gtfs_path: Path) -> GtfsQueryService:
    ensure_data_directory(gtfs_path)
    store = LocalGtfsRepository(base_path=gtfs_path).load_store()
    logger.info("GTFS data loaded from: %s %s", gtfs_path, store.counts())
    return GtfsQueryService(store=store)


def main() -> None:
    config = ServerConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Loading must finish before anything listens.
    try:
        query_service = load_query_service(config.gtfs_path)
    except GtfsLoadError as exc:
        logger.error("Server initialization failed: %s", exc)
        _print_troubleshooting(config.gtfs_path)
        sys.exit(1)

    app = create_app(query_service, reveal_errors=config.reveal_errors)
    logger.info("Starting GTFS API server on %s:%d", config.host, config.port)
    uvicorn.run(
        app, host=config.host, port=config.port, log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
