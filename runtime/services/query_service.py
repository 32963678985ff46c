"""QueryService implementation.

Responsible for:
- checking that the caller supplied every required parameter
- turning the textual time bounds into integers before they reach the store
- composing LogStore results into request-shaped responses
- exposing the time codec conversions and a liveness check

It does NOT know about FastAPI or HTTP status codes; the route layer maps
ValidationError to 400 and StorageError to 500.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

from core.timecodec import time_codec
from exceptions.exceptions import ValidationError
from ..models.api_models import (
    EpochResponse,
    HealthResponse,
    LogsResponse,
    ReadableResponse,
)
from ..store.log_store import LogStore


def _require(**params: Optional[str]) -> None:
    missing = [name for name, value in params.items() if not value]
    if missing:
        raise ValidationError(
            "Missing required parameters: " + ", ".join(params)
        )


def _parse_bound(name: str, value: str) -> int:
    try:
        return time_codec.parse_int64(name, value)
    except ValidationError as e:
        raise ValidationError(
            f"Invalid {name}: expected epoch milliseconds "
            f"in the signed 64-bit range, got {value!r}"
        ) from e


class QueryService:
    """Stateless request-response operations over an initialized LogStore.

    Parameters
    ----------
    store:
        An opened LogStore whose schema already exists.
    """

    def __init__(self, store: LogStore) -> None:
        self.store = store

    def get_logs(self, region: str, start: str, end: str) -> LogsResponse:
        """Return every log of ``region`` whose time lies in [start, end].

        The bounds are echoed back exactly as supplied. Results are neither
        paginated nor sorted.
        """
        _require(region=region, start_date=start, end_date=end)
        start_ms = _parse_bound("start_date", start)
        end_ms = _parse_bound("end_date", end)

        logs = self.store.query(region, start_ms, end_ms)
        return LogsResponse(
            region=region,
            start=start,
            end=end,
            count=len(logs),
            logs=logs,
        )

    def get_stats(self) -> Dict[str, int]:
        return self.store.stats()

    def health(self) -> HealthResponse:
        # Liveness only; the store is not consulted.
        now = datetime.now(timezone.utc)
        return HealthResponse(status="healthy", time=time_codec.format_rfc3339(now))

    def to_epoch(self, year: str, month: str, day: str, time: str) -> EpochResponse:
        _require(year=year, month=month, day=day, time=time)
        date = time_codec.compose_timestamp(year, month, day, time)
        epoch_ms = time_codec.to_epoch_millis(year, month, day, time)
        return EpochResponse(epoch_ms=epoch_ms, date=date)

    def to_readable(self, epoch_ms: str) -> ReadableResponse:
        _require(epoch_ms=epoch_ms)
        ms = time_codec.parse_epoch_millis(epoch_ms)
        readable = time_codec.to_readable(ms)
        return ReadableResponse(epoch_ms=ms, **readable)
