from datetime import datetime, timezone

import pytest

from core.timecodec import time_codec
from exceptions.exceptions import TimeFormatError, ValidationError


def test_to_epoch_millis_new_year_2024():
    assert time_codec.to_epoch_millis("2024", "1", "1", "00:00:00") == 1704067200000


def test_to_epoch_millis_accepts_ints_and_padded_fields():
    assert time_codec.to_epoch_millis(2024, 1, 1, "00:00:00") == 1704067200000
    assert time_codec.to_epoch_millis("2024", "01", "01", "00:00:00") == 1704067200000


def test_to_epoch_millis_epoch_start():
    assert time_codec.to_epoch_millis("1970", "1", "1", "00:00:00") == 0


def test_hour_minute_time_gets_seconds_appended():
    assert time_codec.compose_timestamp("2024", "3", "5", "14:30") == "2024-03-05T14:30:00Z"
    assert time_codec.to_epoch_millis("2024", "3", "5", "14:30") == time_codec.to_epoch_millis(
        "2024", "3", "5", "14:30:00"
    )


@pytest.mark.parametrize(
    "year, month, day, time",
    [
        ("abcd", "1", "1", "00:00:00"),
        ("2024", "13", "1", "00:00:00"),
        ("2023", "2", "29", "00:00:00"),
        ("2024", "1", "1", "25:00:00"),
        ("2024", "1", "1", "noon"),
        ("2024", "", "1", "00:00:00"),
        ("2024", "1", "1", ""),
    ],
)
def test_to_epoch_millis_rejects_bad_dates(year, month, day, time):
    with pytest.raises(TimeFormatError):
        time_codec.to_epoch_millis(year, month, day, time)


def test_time_format_error_is_a_validation_error():
    assert issubclass(TimeFormatError, ValidationError)


def test_to_readable_new_year_2024():
    assert time_codec.to_readable(1704067200000) == {
        "readable": "2024-01-01T00:00:00Z",
        "utc": "2024-01-01 00:00:00 +0000 UTC",
    }


def test_to_readable_shows_fraction_only_in_utc_form():
    result = time_codec.to_readable(1704067200500)
    assert result["readable"] == "2024-01-01T00:00:00Z"
    assert result["utc"] == "2024-01-01 00:00:00.5 +0000 UTC"


def test_to_readable_before_epoch():
    assert time_codec.to_readable(-1000)["readable"] == "1969-12-31T23:59:59Z"


def test_to_readable_out_of_range():
    with pytest.raises(TimeFormatError):
        time_codec.to_readable(2 ** 63 - 1)


def test_round_trip_keeps_instant():
    ms = time_codec.to_epoch_millis("2031", "7", "19", "08:15:42")
    readable = time_codec.to_readable(ms)["readable"]
    parsed = datetime.strptime(readable, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
    assert parsed == datetime(2031, 7, 19, 8, 15, 42, tzinfo=timezone.utc)
    assert int(parsed.timestamp() * 1000) == ms


@pytest.mark.parametrize(
    "value",
    ["", "  ", "12x", "1.5", "0x10", "1_000", "+5", "\u0661\u0662", "99999999999999999999"],
)
def test_parse_epoch_millis_rejects_non_integers(value):
    with pytest.raises(TimeFormatError):
        time_codec.parse_epoch_millis(value)


def test_parse_epoch_millis():
    assert time_codec.parse_epoch_millis("1704067200000") == 1704067200000
    assert time_codec.parse_epoch_millis("-5") == -5


def test_parse_int64_accepts_range_edges():
    assert time_codec.parse_int64("end_date", "9223372036854775807") == 2 ** 63 - 1
    assert time_codec.parse_int64("start_date", "-9223372036854775808") == -(2 ** 63)


def test_parse_int64_rejects_values_past_range_edges():
    with pytest.raises(TimeFormatError, match="out of range"):
        time_codec.parse_int64("end_date", "9223372036854775808")
    with pytest.raises(TimeFormatError, match="out of range"):
        time_codec.parse_int64("start_date", 2 ** 64)
