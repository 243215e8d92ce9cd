#!/usr/bin/env python3
"""
Circles API - HTTP API layer for the community connection service.

This is the main FastAPI application. It exposes the in-memory community
graph through:
- User registration and lookup
- Typed, directed connections
- Interest search
- Shared-interest connection recommendations
- Graph statistics
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from circles.logging_config import configure_logging, get_logger

from .dependencies import community_graph
from .errors import register_exception_handlers
from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api", level=get_settings().log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()
    logger.info(f"Circles community server starting (lock timeout {settings.lock_timeout_seconds}s)")

    yield

    # Nothing is persisted; the graph is discarded with the process
    logger.info(f"Shutting down, discarding {len(community_graph)} users")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Circles API", description="Community connection graph API", lifespan=lifespan)

    register_exception_handlers(app)

    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import connections, graph, interests, users

    app.include_router(users.router)
    app.include_router(connections.router)
    app.include_router(interests.router)
    app.include_router(graph.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "circles-api"}

    return app


# Create app instance for uvicorn
app = create_app()
