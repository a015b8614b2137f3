"""Occam's Razor API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map OccamError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module thin
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from occam_razor import __version__
from occam_razor.api.error_handlers import register_error_handlers
from occam_razor.api.routes import health, thinking
from occam_razor.config import get_settings
from occam_razor.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.server_name} HTTP API started")
    yield
    logger.info(f"{settings.server_name} HTTP API shutting down")


app = FastAPI(
    title="Occam's Razor Thinking API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(thinking.router)

register_error_handlers(app)
