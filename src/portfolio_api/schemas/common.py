"""
Common/shared Pydantic schemas.

This module contains reusable schemas used across the application:
- Mutation count responses
- Error responses
- Health check response
"""

from pydantic import BaseModel, Field
from typing import Any, Dict


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str


class UpdatedResponse(BaseModel):
    """Rows affected by an update (0 when the id does not exist)."""
    updated: int


class DeletedResponse(BaseModel):
    """Rows affected by a delete (0 when the id does not exist)."""
    deleted: int


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    services: Dict[str, Any] = Field(default_factory=dict)
