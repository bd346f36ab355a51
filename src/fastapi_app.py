"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Run with:
    uvicorn src.fastapi_app:create_fastapi_app --factory --port 3001
"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.config.logging_config import setup_logging, correlation_id_var
from src.config.settings import Config, get_config
from src.observability.metrics import observe_request_latency
from src.presentation.api import (
    auth_router,
    comments_router,
    discussions_router,
    health_router,
    metrics_router,
)
from src.presentation.rate_limit import limiter
from src.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records request latency per route template (not per concrete URL)."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        observe_request_latency(
            method=request.method,
            route=getattr(route, "path", "unmatched"),
            status_code=response.status_code,
            duration=time.perf_counter() - start,
        )
        return response


def create_fastapi_app(
    container: AsyncContainer | None = None, config: type[Config] | None = None
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Pre-built Dishka container (tests pass one with in-memory storage)
        config: Config class; defaults to the one selected by APP_ENV

    Returns:
        FastAPI application instance
    """
    config = config or get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH or None)
    container = container or create_container(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Application started (storage={config.STORAGE_BACKEND})")
        yield
        # Closes the container (disconnects Prisma)
        await container.close()
        logger.info("Application shutdown. DI container closed.")

    app = FastAPI(
        title="Numeric Discussions API",
        description="Threaded arithmetic discussions: every reply applies one operation to its parent's result",
        version="1.0.0",
        debug=config.DEBUG,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    # Rate limiting (slowapi reads the limiter from app.state)
    limiter.enabled = config.RATELIMIT_ENABLED
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.info(f"Validation error on {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Numeric discussions server is running."}

    # Register routers
    app.include_router(auth_router)  # POST /api/auth/register, /api/auth/login
    app.include_router(discussions_router)  # GET/POST /api/discussions
    app.include_router(comments_router)  # POST /api/comments
    app.include_router(health_router)  # GET /api/health
    app.include_router(metrics_router)  # GET /metrics

    return app
