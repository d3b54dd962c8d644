"""FastAPI application factory for the health endpoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .models import ErrorResponse, PingResponse

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


def create_app(version: str = "1.0.0") -> FastAPI:
    """
    Create the health check application.

    The endpoint reports liveness only and never depends on the outcome of
    a reconciliation pass.

    Args:
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("Health check listener starting...")
        yield
        logger.info("Health check listener shutting down...")

    app = FastAPI(
        title="Rancher ECR Credentials",
        description="Liveness endpoint of the Rancher ECR credential synchronization sidecar.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    ping = PingResponse(version=version)

    @app.get(
        "/ping",
        response_model=PingResponse,
        tags=["Health"],
        summary="Liveness check",
    )
    async def ping_check() -> PingResponse:
        return ping

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in health check listener")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error", detail=str(exc)).model_dump(),
        )

    return app
