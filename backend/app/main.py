"""Product Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every exception to exactly one JSON response
    - CORS configured from settings (single frontend origin, not hardcoded)
    - Foreign origins rejected before routing (origin guard is the outermost middleware)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI docs served by FastAPI itself at /docs and /openapi.json
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.origin_guard import register_origin_guard
from app.infrastructure.database import init_db, close_db
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.api.routes import health, products

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
    if settings.database_create_tables:
        await manager.create_tables()
    logger.info("Product Catalog API started")
    yield
    await close_db()
    logger.info("Product Catalog API shut down")


app = FastAPI(
    title="Product Catalog API",
    version="1.0.0",
    description="CRUD API for products: name, price and availability",
    lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Registered after CORS so it wraps it and runs first
register_origin_guard(app, settings.cors_origins)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(products.router)
