"""
Tool facade for automated agents.

Includes:
- LogServerClient: httpx client for the log server HTTP API
- TeamsNotifier: webhook poster for the send_teams tool
- tool_server: FastMCP server exposing get_logs / to_epoch / to_readable / send_teams
"""
