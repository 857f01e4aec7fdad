"""Parsoid REST API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ParsoidRestError → structured responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parsoid_rest import __version__
from parsoid_rest.api.error_handlers import register_error_handlers
from parsoid_rest.api.routes import formats, health
from parsoid_rest.config import get_settings
from parsoid_rest.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Parsoid REST API started")
    yield
    logger.info("Parsoid REST API shutting down")


app = FastAPI(
    title="Parsoid REST API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(formats.router)

register_error_handlers(app)
