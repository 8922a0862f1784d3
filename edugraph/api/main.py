"""
EduGraph API - Main FastAPI Application.

GraphQL gateway over the student, course and AI REST services.

Provides endpoints for:
- GraphQL queries and mutations (/graphql, with GraphiQL)
- Gateway info (/)
- Health check (/health)
"""

import os
from datetime import datetime, timezone
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from edugraph import __version__
from edugraph.api.schemas import HealthResponse, ErrorResponse
from edugraph.api.middleware import RequestLoggingMiddleware
from edugraph.clients.backends import create_backends
from edugraph.config.settings import Settings, get_settings
from edugraph.graphql import get_graphql_router
from edugraph.utils.logger_config import get_logger, setup_logging


logger = get_logger("api")


# API version
API_VERSION = __version__


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Gateway settings (defaults to the environment)
        transport: Optional httpx transport for backend calls

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    backends = create_backends(settings, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Handles startup and shutdown events.
        """
        logger.info(
            "Backends: student=%s course=%s ai=%s",
            settings.student_base, settings.course_base, settings.ai_base,
        )
        logger.info(
            f"GraphQL Gateway running at "
            f"http://{settings.host}:{settings.port}/graphql"
        )

        yield

        logger.info("Shutting down EduGraph gateway...")
        await backends.aclose()

    app = FastAPI(
        title="EduGraph Gateway",
        description="""
# EduGraph - GraphQL gateway for campus services

Aggregates three REST services behind one graph:

- **Students**: student records with their university
- **Courses**: course catalogue and enrollments
- **AI**: text summarization and translation

Enrollments resolve their `student` and `course` fields with a secondary
lookup per row against the owning service.
        """,
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.backends = backends

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    graphql_router = get_graphql_router(backends)
    app.include_router(graphql_router, prefix="/graphql")

    # Root endpoint
    @app.get("/", tags=["root"])
    async def root():
        """API root - returns basic info."""
        return {
            "name": "EduGraph Gateway",
            "version": API_VERSION,
            "description": "GraphQL gateway for student, course and AI services",
            "graphql": "/graphql",
            "health": "/health"
        }

    # Health check endpoint
    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["health"]
    )
    async def health_check():
        """
        Health check endpoint.

        Reports the gateway status and the backends it forwards to. The
        backends themselves are not probed.
        """
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            backends=settings.backends,
            timestamp=datetime.now(timezone.utc).isoformat()
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                detail=str(exc) if os.getenv("DEBUG") else None,
                code="INTERNAL_ERROR",
            ).model_dump()
        )

    return app


def run() -> None:
    """Start the gateway with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# Entry point for running with uvicorn
if __name__ == "__main__":
    run()
