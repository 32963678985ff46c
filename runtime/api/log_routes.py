"""HTTP routes for querying the LogMCP log store.

Exposes endpoints like:

- GET /logs?region=&start_date=&end_date=  -> matching log entries
- GET /stats                               -> log count per region
- GET /health                              -> liveness
- GET /time/epoch?year=&month=&day=&time=  -> epoch milliseconds
- GET /time/readable?epoch_ms=             -> RFC 3339 / UTC strings
"""

import logging

from fastapi import APIRouter, HTTPException, Query, Request
from typing import Dict, Optional

from exceptions.exceptions import StorageError, ValidationError
from ..models.api_models import (
    EpochResponse,
    HealthResponse,
    LogsResponse,
    ReadableResponse,
)
from ..services.query_service import QueryService


logger = logging.getLogger(__name__)

# Router for all log-related endpoints
router = APIRouter()


def _require_query_service(request: Request) -> QueryService:
    # Each app built by create_app() carries its own service on app.state.
    service = getattr(request.app.state, "query_service", None)
    if service is None:
        raise HTTPException(
            status_code=500,
            detail="QueryService is not configured on the server.",
        )
    return service


def _bad_request(route: str, e: ValidationError) -> HTTPException:
    logger.warning("[API] HTTP 400 on %s reason=%r", route, str(e))
    return HTTPException(status_code=400, detail=str(e))


def _server_error(route: str, e: StorageError) -> HTTPException:
    # Only the short message goes back to the caller; the cause stays in the log.
    logger.exception("[API] Storage failure on %s", route)
    return HTTPException(status_code=500, detail=f"Failed to {e.operation}")


# Handlers are plain ``def`` so FastAPI runs each request in its worker
# thread pool; the store calls are blocking.


@router.get("/logs", response_model=LogsResponse)
def get_logs(
    request: Request,
    region: Optional[str] = Query(None, description="Region code, e.g. NA, EU, AP"),
    start_date: Optional[str] = Query(None, description="Start time (epoch milliseconds)"),
    end_date: Optional[str] = Query(None, description="End time (epoch milliseconds)"),
) -> LogsResponse:
    """Return the logs of one region within an inclusive time range."""
    service = _require_query_service(request)
    try:
        return service.get_logs(region or "", start_date or "", end_date or "")
    except ValidationError as e:
        raise _bad_request("/logs", e)
    except StorageError as e:
        raise _server_error("/logs", e)


@router.get("/stats", response_model=Dict[str, int])
def stats(request: Request) -> Dict[str, int]:
    service = _require_query_service(request)
    try:
        return service.get_stats()
    except StorageError as e:
        raise _server_error("/stats", e)


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    """
    Simple health check endpoint for uptime monitoring.
    """
    return _require_query_service(request).health()


@router.get("/time/epoch", response_model=EpochResponse)
def to_epoch(
    request: Request,
    year: Optional[str] = Query(None, description="Year (YYYY)"),
    month: Optional[str] = Query(None, description="Month (1-12)"),
    day: Optional[str] = Query(None, description="Day (1-31)"),
    time: Optional[str] = Query(None, description="Time (HH:MM:SS)"),
) -> EpochResponse:
    service = _require_query_service(request)
    try:
        return service.to_epoch(year or "", month or "", day or "", time or "")
    except ValidationError as e:
        raise _bad_request("/time/epoch", e)


@router.get("/time/readable", response_model=ReadableResponse)
def to_readable(
    request: Request,
    epoch_ms: Optional[str] = Query(None, description="Epoch milliseconds"),
) -> ReadableResponse:
    service = _require_query_service(request)
    try:
        return service.to_readable(epoch_ms or "")
    except ValidationError as e:
        raise _bad_request("/time/readable", e)
