"""Shared schemas for API responses."""

from typing import Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(..., description="Human-readable error message")


class StatusResponse(BaseModel):
    """Status check response."""

    status: str = Field(..., description="Service status")
    version: Optional[str] = Field(default=None, description="API version")
    timestamp: Optional[str] = Field(default=None, description="Response timestamp")
