"""
Credit System - Main Application Entry Point

A credit-management service: customers register and request credits,
which are validated against the installment rules and looked up on
behalf of their owner.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from credit_system import __version__
from credit_system.core.config import settings
from credit_system.core.logging import setup_logging
from credit_system.core.metrics import get_metrics, get_metrics_content_type
from credit_system.infrastructure.database import db_manager
from credit_system.presentation.api import api_router
from credit_system.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize database connection pool
    - Clean up on shutdown
    """
    setup_logging()
    db_manager.init()

    logger = structlog.get_logger(__name__)

    if db_manager.engine.dialect.name == "sqlite":
        await db_manager.create_tables()

    logger.info("application_started", version=__version__)

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Credit System",
    description="Customer and credit management API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)

    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(
        "credit_system.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
