"""
Services used by the LogMCP runtime.

For now there is a single QueryService that:

- validates request parameters
- queries the LogStore
- delegates date/epoch conversion to the time codec
"""
