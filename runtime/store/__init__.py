"""
Storage abstractions for the LogMCP runtime.

Includes:
- LogStore: SQLite-backed, append-only log storage (query + stats)
- BootstrapLoader: one-time seeding of demo logs into an empty store
"""
