"""
Pydantic models for response serialization.
"""

from typing import Literal

from pydantic import BaseModel


class PhraseResponse(BaseModel):
    """Response for the root and version endpoints."""

    message: str
    version: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok"] = "ok"
    message: str
    version: str
