"""API response models."""

from typing import Literal

from pydantic import BaseModel


class PingResponse(BaseModel):
    """Liveness response."""

    status: Literal["pong!"] = "pong!"
    version: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
