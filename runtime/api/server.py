"""
FastAPI application entry point for the LogMCP log server.

Responsibilities:
- open the LogStore (schema + one-time demo bootstrap) on startup
- construct the QueryService around it
- include the log routes

Run with e.g.:

    uvicorn runtime.api.server:app --port 8081
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from configs.settings import Settings, settings as default_settings
from runtime.services.query_service import QueryService
from runtime.store.bootstrap_loader import open_store
from . import log_routes


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the log server app for the given configuration.

    The store is opened inside the lifespan, before the first request is
    accepted, so bootstrap writes never race with reads. A StorageError or
    BootstrapHardError raised there aborts startup.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store, report = open_store(settings)
        logger.info(
            "[API] Log store ready at %s (demo rows loaded: %d)",
            settings.db_path,
            report.total_loaded,
        )

        app.state.store = store
        app.state.bootstrap_report = report
        app.state.query_service = QueryService(store)

        yield

        app.state.query_service = None
        store.close()
        logger.info("[API] Log store closed")

    app = FastAPI(title="LogMCP Log Server", lifespan=lifespan)
    app.include_router(log_routes.router)
    return app


# ---------------------------------------------------------------------------
# Default app for uvicorn
# ---------------------------------------------------------------------------

app = create_app()
