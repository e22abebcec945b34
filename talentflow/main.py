"""
Main FastAPI application.

This is the entry point for the API server:
    uvicorn talentflow.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from talentflow.core.config import settings
from talentflow.core.logging import configure_logging
from talentflow.db.session import get_default_store
from talentflow.errors import AppError, app_error_handler
from talentflow.routers import assessments, candidates, health, jobs
from talentflow.services.backend import MockBackend

logger = logging.getLogger(__name__)


def create_app(backend: Optional[MockBackend] = None) -> FastAPI:
    """
    Build the application.

    Tests pass their own backend (temporary store, zero latency, scripted
    failures); otherwise one is built from settings at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        if app.state.backend is None:
            app.state.backend = MockBackend.from_settings(settings, store=get_default_store())
        await app.state.backend.store.create_tables()
        logger.info("Starting %s (store: %s)", settings.APP_NAME, app.state.backend.store.database_url)

        yield  # The server runs while we're "yielded" here

        logger.info("Shutting down %s", settings.APP_NAME)
        await app.state.backend.store.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Local-first mock backend with simulated latency and failures",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.backend = backend
    app.add_exception_handler(AppError, app_error_handler)

    # Include routers (API endpoints)
    app.include_router(health.router, tags=["Health"])
    app.include_router(jobs.router)
    app.include_router(candidates.router)
    app.include_router(assessments.router)
    return app


app = create_app()
