"""
HTTP response models for the LogMCP log server API.
"""

from pydantic import BaseModel
from typing import List

from .log_models import LogEntry


class LogsResponse(BaseModel):
    region: str
    start: str
    end: str
    count: int
    logs: List[LogEntry]


class HealthResponse(BaseModel):
    status: str
    time: str


class EpochResponse(BaseModel):
    epoch_ms: int
    date: str


class ReadableResponse(BaseModel):
    epoch_ms: int
    readable: str
    utc: str
