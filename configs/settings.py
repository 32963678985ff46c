from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """
    Central configuration for LogMCP.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties. Keyword overrides take precedence
    over the environment, which is how tests build isolated instances.
    """

    def __init__(self, **overrides) -> None:
        def _get(key: str, default: Optional[str] = None) -> Optional[str]:
            if key in overrides:
                return overrides[key]
            return os.getenv(key) or default

        # Storage
        self._db_path = Path(_get("LOG_DB_PATH", "./logs.db"))
        self._db_timeout = float(_get("LOG_DB_TIMEOUT", "5.0"))

        # Demo bootstrap
        self._demo_logs_path = Path(_get("DEMO_LOGS_PATH", "../demo_logs"))
        self._regions = [
            r.strip()
            for r in (_get("LOG_REGIONS", "NA,EU,AP") or "").split(",")
            if r.strip()
        ]

        # Log server
        self._log_server_host = _get("LOG_SERVER_HOST", "0.0.0.0")
        self._log_server_port = int(_get("LOG_SERVER_PORT", "8081"))
        self._log_server_url = _get("LOG_SERVER_URL", "http://localhost:8081")

        # Tool server
        self._mcp_server_host = _get("MCP_SERVER_HOST", "0.0.0.0")
        self._mcp_server_port = int(_get("MCP_SERVER_PORT", "8080"))
        self._teams_webhook_url = _get("TEAMS_WEBHOOK_URL") or None
        self._tool_http_timeout = float(_get("TOOL_HTTP_TIMEOUT", "30.0"))

        self._log_level = (_get("LOG_LEVEL", "INFO") or "INFO").upper()

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def db_timeout(self) -> float:
        return self._db_timeout

    # ------------------------------------------------------------------
    # Demo bootstrap
    # ------------------------------------------------------------------

    @property
    def demo_logs_path(self) -> Path:
        return self._demo_logs_path

    @property
    def regions(self) -> List[str]:
        return list(self._regions)

    # ------------------------------------------------------------------
    # Log server / tool server
    # ------------------------------------------------------------------

    @property
    def log_server_host(self) -> str:
        return self._log_server_host

    @property
    def log_server_port(self) -> int:
        return self._log_server_port

    @property
    def log_server_url(self) -> str:
        return self._log_server_url.rstrip("/")

    @property
    def mcp_server_host(self) -> str:
        return self._mcp_server_host

    @property
    def mcp_server_port(self) -> int:
        return self._mcp_server_port

    @property
    def teams_webhook_url(self) -> Optional[str]:
        return self._teams_webhook_url

    @property
    def tool_http_timeout(self) -> float:
        return self._tool_http_timeout

    @property
    def log_level(self) -> str:
        return self._log_level


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the launchers."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


settings = Settings()
