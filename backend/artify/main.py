"""Artify API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ArtifyError -> {success: false, error} envelopes
    - CORS restricted to the configured origin allow-list, credentials enabled
    - Database engine created on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Startup ping is fatal when database_check_on_startup is set (long-running
      deployments); serverless deployments skip it and surface failures per request
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artify import __version__
from artify.api.error_handlers import register_error_handlers
from artify.api.routes import artworks, favorites, health, legacy, users
from artify.config import get_settings
from artify.infrastructure.database import init_db
from artify.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_check_on_startup:
        if not await manager.health_check():
            logger.critical("Database connection failed, aborting startup")
            raise RuntimeError("Database unreachable at startup")
        logger.info("Database ping succeeded")
    logger.info("Artify API started")
    yield
    await manager.dispose()
    logger.info("Artify API shutting down")


app = FastAPI(
    title="Artify API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(legacy.router)
app.include_router(artworks.router)
app.include_router(favorites.router)
app.include_router(users.router)

register_error_handlers(app)
