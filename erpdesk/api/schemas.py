"""
Response envelopes shared by the HTTP endpoints.

Success: ``{"success": true, "data": ...}``
Failure: ``{"success": false, "error": "<localized message>"}``
"""
from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""
    success: bool = True
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    """Failure envelope."""
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
