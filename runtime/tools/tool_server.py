"""MCP tool server entrypoint (streamable HTTP transport).

Exposes four tools to an automated agent:

- get_logs(region, start, end)         -> GET  /logs on the log server
- to_epoch(year, month, day, time)     -> GET  /time/epoch
- to_readable(epoch_ms)                -> GET  /time/readable
- send_teams(message)                  -> POST to TEAMS_WEBHOOK_URL

The tools hold no state; failures of the outbound call are reported as tool
errors (``isError`` results), never as exceptions escaping to the host.

Run locally:
    logmcp tools
"""

import logging
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from configs.settings import Settings, settings as default_settings
from exceptions.exceptions import ToolTransportError
from .log_server_client import LogServerClient, TeamsNotifier


logger = logging.getLogger(__name__)

SERVER_NAME = "LogMCP"


class LogTools:
    """Tool implementations bound to a log server client and a notifier."""

    def __init__(self, client: LogServerClient, notifier: TeamsNotifier) -> None:
        self.client = client
        self.notifier = notifier

    def close(self) -> None:
        self.client.close()
        self.notifier.close()

    def get_logs(
        self,
        region: Annotated[str, Field(description="Region: NA, EU, or AP")],
        start: Annotated[str, Field(description="Start time (epoch milliseconds)")],
        end: Annotated[str, Field(description="End time (epoch milliseconds)")],
    ) -> str:
        """Query application logs by region and time range"""
        try:
            return self.client.get_logs(region, start, end)
        except ToolTransportError as e:
            raise ToolError(str(e)) from e

    def to_epoch(
        self,
        year: Annotated[str, Field(description="Year (YYYY)")],
        month: Annotated[str, Field(description="Month (1-12)")],
        day: Annotated[str, Field(description="Day (1-31)")],
        time: Annotated[str, Field(description="Time (HH:MM:SS)")],
    ) -> str:
        """Convert date to epoch milliseconds"""
        try:
            return self.client.to_epoch(year, month, day, time)
        except ToolTransportError as e:
            raise ToolError(f"Request failed: {e}") from e

    def to_readable(
        self,
        epoch_ms: Annotated[str, Field(description="Epoch milliseconds")],
    ) -> str:
        """Convert epoch milliseconds to readable date"""
        try:
            return self.client.to_readable(epoch_ms)
        except ToolTransportError as e:
            raise ToolError(f"Request failed: {e}") from e

    def send_teams(
        self,
        message: Annotated[str, Field(description="Message to send")],
    ) -> str:
        """Send message to Microsoft Teams"""
        if not self.notifier.is_configured:
            raise ToolError("Teams not configured (set TEAMS_WEBHOOK_URL)")
        try:
            self.notifier.send(message)
        except ToolTransportError as e:
            raise ToolError(f"Failed to send: {e}") from e
        return "Message sent to Teams"


def register_tools(mcp: FastMCP, tools: LogTools) -> None:
    mcp.add_tool(tools.get_logs, name="get_logs")
    mcp.add_tool(tools.to_epoch, name="to_epoch")
    mcp.add_tool(tools.to_readable, name="to_readable")
    mcp.add_tool(tools.send_teams, name="send_teams")


def create_tool_server(
    settings: Optional[Settings] = None,
    tools: Optional[LogTools] = None,
) -> FastMCP:
    """Build the FastMCP server for the given configuration."""
    settings = settings or default_settings
    if tools is None:
        tools = LogTools(
            LogServerClient.from_settings(settings),
            TeamsNotifier.from_settings(settings),
        )

    mcp = FastMCP(SERVER_NAME, host=settings.mcp_server_host, port=settings.mcp_server_port)
    register_tools(mcp, tools)

    if not tools.notifier.is_configured:
        logger.info("[TOOLS] TEAMS_WEBHOOK_URL not set; send_teams will report an error")
    return mcp


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    tools = LogTools(
        LogServerClient.from_settings(settings),
        TeamsNotifier.from_settings(settings),
    )
    mcp = create_tool_server(settings, tools=tools)
    logger.info(
        "[TOOLS] LogMCP server running on %s:%d",
        settings.mcp_server_host,
        settings.mcp_server_port,
    )
    try:
        mcp.run(transport="streamable-http")
    finally:
        tools.close()
        logger.info("[TOOLS] HTTP clients closed")
