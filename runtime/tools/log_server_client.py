"""
runtime.tools.log_server_client

Thin httpx wrappers used by the tool server:

  - LogServerClient: GET calls against the log server HTTP API
  - TeamsNotifier:   POST {"text": ...} to a Teams incoming webhook

Network failures are raised as ToolTransportError; the caller turns them
into tool-level error results. Non-2xx responses from the log server are
not errors here: their body (which carries the reason) is returned as-is.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from configs.settings import Settings
from exceptions.exceptions import ToolTransportError


logger = logging.getLogger(__name__)


class LogServerClient:
    """Read-only client for the log server.

    Parameters
    ----------
    base_url:
        Log server address, e.g. "http://localhost:8081".
    timeout:
        Per-request timeout in seconds.
    transport:
        Optional httpx transport (tests pass an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "LogServerClient":
        return cls(settings.log_server_url, timeout=settings.tool_http_timeout)

    def close(self) -> None:
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def _get(self, path: str, params: Dict[str, str]) -> str:
        try:
            response = self._client.get(path, params=params)
        except httpx.HTTPError as e:
            logger.warning("[TOOLS] GET %s failed: %s", path, e)
            raise ToolTransportError("Log server", e) from e
        return response.text

    def get_logs(self, region: str, start: str, end: str) -> str:
        return self._get(
            "/logs",
            {"region": region, "start_date": start, "end_date": end},
        )

    def to_epoch(self, year: str, month: str, day: str, time: str) -> str:
        return self._get(
            "/time/epoch",
            {"year": year, "month": month, "day": day, "time": time},
        )

    def to_readable(self, epoch_ms: str) -> str:
        return self._get("/time/readable", {"epoch_ms": epoch_ms})


class TeamsNotifier:
    """Posts plain-text messages to a Teams incoming webhook.

    A notifier without a webhook URL is valid but unconfigured; only the
    send_teams tool depends on it.
    """

    def __init__(
        self,
        webhook_url: Optional[str],
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.webhook_url = webhook_url
        self._client = httpx.Client(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TeamsNotifier":
        return cls(settings.teams_webhook_url, timeout=settings.tool_http_timeout)

    @property
    def is_configured(self) -> bool:
        return bool(self.webhook_url)

    def close(self) -> None:
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def send(self, message: str) -> None:
        if not self.is_configured:
            raise RuntimeError("TeamsNotifier has no webhook URL configured.")
        try:
            response = self._client.post(self.webhook_url, json={"text": message})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("[TOOLS] Teams webhook failed: %s", e)
            raise ToolTransportError("Teams webhook", e) from e
