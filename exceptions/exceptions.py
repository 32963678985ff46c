"""
Custom exceptions for the LogMCP log server and tool server.

These exceptions are intentionally simple and descriptive.
They are used across:

  - core/timecodec/
  - runtime/store/
  - runtime/services/
  - runtime/api/ and runtime/tools/

Placing them at the project root (exceptions/) avoids circular imports
and keeps exception types consistent across modules.
"""


class LogMCPError(Exception):
    """Base class for every error raised by LogMCP components."""


class ValidationError(LogMCPError):
    """
    Raised when a caller-supplied parameter is missing or malformed
    (region, date bounds, date components, epoch value).

    Reported to the caller as a rejected request (HTTP 400).
    """


class TimeFormatError(ValidationError):
    """
    Raised by the time codec when a date description or an epoch value
    cannot be converted.

    Example:
        year=2024, month=2, day=30  ← not a calendar date
    """

    def __init__(self, value, details=None):
        self.value = value
        self.details = details or "Invalid date format."
        super().__init__(f"{self.details}: {value!r}")


class StorageError(LogMCPError):
    """
    Raised when the SQLite handle fails to open, migrate, query or write.

    Fatal at startup; at request time it is reported as HTTP 500.
    """

    def __init__(self, operation, cause=None):
        self.operation = operation
        self.cause = cause
        msg = f"Failed to {operation}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class BootstrapSoftError(LogMCPError):
    """
    Raised when the demo file for one region is missing or unparsable.

    The bootstrap loader converts it into a skipped region and continues.
    """

    def __init__(self, region, reason):
        self.region = region
        self.reason = reason
        super().__init__(f"could not load {region} logs: {reason}")


class BootstrapHardError(LogMCPError):
    """
    Raised when inserting demo rows for a region fails transactionally.

    Aborts the whole bootstrap and is fatal at startup.
    """

    def __init__(self, region, cause):
        self.region = region
        self.cause = cause
        super().__init__(f"Failed to load demo data for {region}: {cause}")


class ToolTransportError(LogMCPError):
    """
    Raised by the tool facade when an outbound call to the log server or
    the webhook fails or times out.
    """

    def __init__(self, target, cause):
        self.target = target
        self.cause = cause
        super().__init__(f"{target} unavailable: {cause}")
