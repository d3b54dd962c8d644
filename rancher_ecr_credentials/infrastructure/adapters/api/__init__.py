"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import ErrorResponse, PingResponse

__all__ = [
    "ErrorResponse",
    "PingResponse",
    "create_app",
]
