"""Walks API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery, ExMA anti-pattern)
    - Global error handlers map WalksError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager and keyword locks built in the lifespan and stored on
      app.state; nothing holds a module-level connection

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Engine disposed on shutdown so pooled connections close with the process
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, walk_mutations, walk_queries
from app.config import get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.keyed_lock import KeyedLock
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    app.state.keyword_locks = KeyedLock()
    logger.info("Walks API started")
    try:
        yield
    finally:
        logger.info("Walks API shutting down")
        await db_manager.dispose()
        app.state.db_manager = None


app = FastAPI(
    title="Walks API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(walk_queries.router)
app.include_router(walk_mutations.router)

register_error_handlers(app)
