"""Product Search API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from productsearch.api.health import router as health_router
from productsearch.api.middleware import setup_middleware
from productsearch.api.products import router as products_router
from productsearch.infrastructure.config import settings
from productsearch.infrastructure.database import engine
from productsearch.infrastructure.logging_config import configure_logging

configure_logging(settings.log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting Product Search API",
        version=settings.api_version,
        debug=settings.debug,
    )

    yield

    logger.info("Shutting down Product Search API")
    await engine.dispose()


app = FastAPI(
    title="Product Search API",
    description="Paginated product listing, search and wishlist",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware and error handlers (request ID, error envelope)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)

