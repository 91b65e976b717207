"""E-Learning Ledger API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery: ExMA anti-pattern)
    - Global error handlers map ElearnError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema is owned by Alembic; the app never creates tables itself
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from elearn.api.error_handlers import register_error_handlers
from elearn.api.routes import courses, forum, health, instructors, platform, students
from elearn.config import get_settings
from elearn.infrastructure.database import init_db
from elearn.infrastructure.observability import setup_logging

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
    logger.info(
        "E-Learning ledger API started",
        extra={"account": settings.platform_owner},
    )
    yield
    await manager.dispose()
    logger.info("E-Learning ledger API shutting down")


app = FastAPI(
    title="E-Learning Ledger API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(students.router)
app.include_router(instructors.router)
app.include_router(courses.router)
app.include_router(forum.router)
app.include_router(platform.router)

register_error_handlers(app)
