"""
Pydantic / datamodels used by the LogMCP runtime.

Split into:
- log_models: LogEntry + demo-file records + bootstrap results
- api_models: HTTP response schemas
"""
