"""
RSVP Collection System - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from rsvp.core.config import Settings, settings as default_settings
from rsvp.core.db import Database
from rsvp import models  # noqa: F401  registers tables on Base
from rsvp.api import routes_public, routes_rsvp
from rsvp.services.seed_service import seed_if_empty

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings"""
    settings = settings or default_settings

    # Configure logging
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management"""
        db = Database(settings.DATABASE_URL)
        db.create_all()
        logger.info(f"Database tables ready at {settings.DATABASE_URL}")

        if settings.SEED_ON_STARTUP:
            session = db.session()
            try:
                seed_if_empty(session)
            finally:
                session.close()

        app.state.db = db
        yield
        db.dispose()
        logger.info("Application shutdown")

    app = FastAPI(
        title="RSVP Collection System",
        description="Backend for party code lookup and guest RSVP submission",
        version="1.0.0",
        lifespan=lifespan
    )

    # Any origin, method and header
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(routes_public.router, tags=["public"])
    app.include_router(routes_rsvp.router, prefix="/api/rsvp", tags=["rsvp"])

    return app

app = create_app()

# Note: Run this ASGI app directly with Uvicorn or Hypercorn. For Gunicorn,
# use `uvicorn.workers.UvicornWorker` instead of wrapping the app.

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=True
    )
