"""
Runtime package for the LogMCP log server and tool server.

This package contains:
- API layer (FastAPI server + log routes)
- Services (QueryService over the log store)
- Stores (SQLite LogStore, demo BootstrapLoader)
- Models (Pydantic log entries, bootstrap results, API responses)
- Tools (MCP tool facade over the HTTP API)
"""
