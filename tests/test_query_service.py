from datetime import datetime

import pytest

from exceptions.exceptions import StorageError, TimeFormatError, ValidationError
from runtime.models.log_models import LogEntry
from runtime.services.query_service import QueryService


@pytest.fixture
def service(store):
    store.insert("NA", 1000, "boot ok")
    return QueryService(store)


class _UnreachableStore:
    def query(self, *args):
        raise AssertionError("store must not be reached")


def test_get_logs_end_to_end(service):
    response = service.get_logs("NA", "500", "1500")
    assert response.count == 1
    assert response.logs == [LogEntry(region="NA", time=1000, message="boot ok")]
    assert (response.region, response.start, response.end) == ("NA", "500", "1500")


def test_get_logs_echoes_bounds_verbatim(service):
    response = service.get_logs("NA", " 0500", "1500")
    assert response.start == " 0500"
    assert response.count == 1


@pytest.mark.parametrize(
    "region, start, end",
    [("", "1", "2"), ("NA", "", "2"), ("NA", "1", ""), ("", "", "")],
)
def test_get_logs_requires_all_parameters(region, start, end):
    service = QueryService(_UnreachableStore())
    with pytest.raises(ValidationError, match="Missing required parameters"):
        service.get_logs(region, start, end)


def test_get_logs_rejects_non_numeric_bounds():
    service = QueryService(_UnreachableStore())
    with pytest.raises(ValidationError, match="start_date"):
        service.get_logs("NA", "yesterday", "1500")


@pytest.mark.parametrize(
    "start, end",
    [("2_000", "3000"), ("+5", "3000"), ("0", "99999999999999999999"), ("0", "\u0661\u0662")],
)
def test_get_logs_rejects_loose_or_oversized_bounds(start, end):
    service = QueryService(_UnreachableStore())
    with pytest.raises(ValidationError, match="signed 64-bit range"):
        service.get_logs("NA", start, end)


def test_get_logs_accepts_int64_extremes(service):
    response = service.get_logs("NA", "-9223372036854775808", "9223372036854775807")
    assert response.count == 1


def test_get_logs_unknown_region_is_empty(service):
    response = service.get_logs("EU", "0", "99999")
    assert response.count == 0
    assert response.logs == []


def test_get_stats(service):
    assert service.get_stats() == {"NA": 1}


def test_get_stats_propagates_storage_errors():
    class _BrokenStore:
        def stats(self):
            raise StorageError("get stats", "disk I/O error")

    with pytest.raises(StorageError):
        QueryService(_BrokenStore()).get_stats()


def test_health_does_not_touch_store():
    response = QueryService(_UnreachableStore()).health()
    assert response.status == "healthy"
    datetime.strptime(response.time, "%Y-%m-%dT%H:%M:%SZ")


def test_to_epoch(service):
    response = service.to_epoch("2024", "1", "1", "00:00:00")
    assert response.epoch_ms == 1704067200000
    assert response.date == "2024-01-01T00:00:00Z"


def test_to_epoch_missing_and_invalid(service):
    with pytest.raises(ValidationError, match="Missing required parameters"):
        service.to_epoch("2024", "1", "", "00:00:00")
    with pytest.raises(TimeFormatError):
        service.to_epoch("2024", "2", "30", "00:00:00")


def test_to_readable(service):
    response = service.to_readable("1704067200000")
    assert response.epoch_ms == 1704067200000
    assert response.readable == "2024-01-01T00:00:00Z"
    assert response.utc == "2024-01-01 00:00:00 +0000 UTC"


def test_to_readable_invalid(service):
    with pytest.raises(ValidationError):
        service.to_readable("")
    with pytest.raises(TimeFormatError):
        service.to_readable("not-a-number")
