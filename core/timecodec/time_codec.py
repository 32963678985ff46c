# timecodec/time_codec.py
"""
Conversions between calendar dates and epoch-millisecond timestamps.

All functions here are pure: they only depend on their arguments and never
consult the local timezone. Every instant is interpreted and rendered in UTC.

    to_epoch_millis("2024", "1", "1", "00:00:00")  -> 1704067200000
    to_readable(1704067200000)
        -> {"readable": "2024-01-01T00:00:00Z",
            "utc": "2024-01-01 00:00:00 +0000 UTC"}
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Dict, Union

from exceptions.exceptions import TimeFormatError


TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DatePart = Union[str, int]


# ---------------------------------------------------------------------------
# Date description -> epoch
# ---------------------------------------------------------------------------


def _as_int(name: str, value: DatePart) -> int:
    text = str(value).strip()
    if not text:
        raise TimeFormatError(value, f"Missing {name}")
    try:
        return int(text)
    except ValueError:
        raise TimeFormatError(value, f"Invalid {name}") from None


def compose_timestamp(year: DatePart, month: DatePart, day: DatePart, time: str) -> str:
    """
    Build the fixed-format ``YYYY-MM-DDTHH:MM:SSZ`` string from its fields.

    Numeric fields are zero-padded so ``month="1"`` is accepted. A ``HH:MM``
    time gets ``:00`` seconds appended.
    """
    y = _as_int("year", year)
    m = _as_int("month", month)
    d = _as_int("day", day)

    time = (time or "").strip()
    if not time:
        raise TimeFormatError(time, "Missing time")
    if time.count(":") == 1:
        time = f"{time}:00"

    return f"{y:04d}-{m:02d}-{d:02d}T{time}Z"


def parse_timestamp(value: str) -> datetime:
    """Parse a composed timestamp string as an aware UTC datetime."""
    try:
        parsed = datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise TimeFormatError(value, f"Invalid date format ({e})") from None
    return parsed.replace(tzinfo=timezone.utc)


def to_epoch_millis(year: DatePart, month: DatePart, day: DatePart, time: str) -> int:
    """Convert a UTC calendar date and time of day to epoch milliseconds."""
    dt = parse_timestamp(compose_timestamp(year, month, day, time))
    return (dt - _EPOCH) // timedelta(milliseconds=1)


# ---------------------------------------------------------------------------
# Epoch -> readable
# ---------------------------------------------------------------------------


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Plain ASCII decimal, optional leading minus. Rejects "+5", "1_000" and
# non-ASCII digits that int() would otherwise accept.
_DECIMAL = re.compile(r"-?[0-9]+", re.ASCII)


def parse_int64(name: str, value: Union[str, int]) -> int:
    """Strictly parse ``value`` as a signed 64-bit base-10 integer."""
    if isinstance(value, int):
        number = value
    else:
        text = (value or "").strip()
        if not text:
            raise TimeFormatError(value, f"Missing {name}")
        if not _DECIMAL.fullmatch(text):
            raise TimeFormatError(value, f"Invalid {name}")
        number = int(text)
    if not INT64_MIN <= number <= INT64_MAX:
        raise TimeFormatError(value, f"{name} out of range")
    return number


def parse_epoch_millis(value: Union[str, int]) -> int:
    """Strictly parse a caller-supplied epoch value as a base-10 integer."""
    return parse_int64("epoch_ms", value)


def from_epoch_millis(epoch_ms: int) -> datetime:
    try:
        return _EPOCH + timedelta(milliseconds=epoch_ms)
    except OverflowError:
        raise TimeFormatError(epoch_ms, "epoch_ms out of range") from None


def format_rfc3339(dt: datetime) -> str:
    """RFC 3339 with second precision and a ``Z`` suffix."""
    return dt.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def format_utc(dt: datetime) -> str:
    """
    Descriptive UTC form, e.g. ``2024-01-01 00:00:00 +0000 UTC``.

    Fractional seconds are only printed when non-zero, without trailing
    zeros (``00:00:00.5``).
    """
    dt = dt.astimezone(timezone.utc)
    text = dt.strftime("%Y-%m-%d %H:%M:%S")
    if dt.microsecond:
        text += f".{dt.microsecond:06d}".rstrip("0")
    return f"{text} +0000 UTC"


def to_readable(epoch_ms: int) -> Dict[str, str]:
    dt = from_epoch_millis(epoch_ms)
    return {
        "readable": format_rfc3339(dt),
        "utc": format_utc(dt),
    }
