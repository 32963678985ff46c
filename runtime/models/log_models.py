"""
Log-related models for the LogMCP runtime.

These describe:
- a stored LogEntry (region, time, message)
- the demo-file record shape ({"raw": {"time": ..., "log": ...}})
- per-region bootstrap outcomes and the aggregated BootstrapReport
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class LogEntry(BaseModel):
    region: str
    time: int          # epoch milliseconds
    message: str


class RawLog(BaseModel):
    time: int
    log: str


class DemoRecord(BaseModel):
    """One element of a ``sample_logs_<region>.json`` array."""
    raw: RawLog


class RegionLoadStatus(str, Enum):
    LOADED = "LOADED"
    SKIPPED = "SKIPPED"


class RegionLoadResult(BaseModel):
    """Loaded(count) or Skipped(reason) for a single region."""
    region: str
    status: RegionLoadStatus
    count: int = 0
    reason: Optional[str] = None

    @classmethod
    def loaded(cls, region: str, count: int) -> "RegionLoadResult":
        return cls(region=region, status=RegionLoadStatus.LOADED, count=count)

    @classmethod
    def skipped(cls, region: str, reason: str) -> "RegionLoadResult":
        return cls(region=region, status=RegionLoadStatus.SKIPPED, reason=reason)


class BootstrapReport(BaseModel):
    # True when the store already had rows and nothing was attempted.
    store_was_populated: bool = False
    results: List[RegionLoadResult] = Field(default_factory=list)

    @property
    def total_loaded(self) -> int:
        return sum(r.count for r in self.results if r.status == RegionLoadStatus.LOADED)

    @property
    def skipped_regions(self) -> Dict[str, str]:
        return {
            r.region: r.reason or ""
            for r in self.results
            if r.status == RegionLoadStatus.SKIPPED
        }
