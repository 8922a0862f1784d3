"""
Pydantic schemas for API responses outside the GraphQL endpoint.
"""

from typing import Dict, Optional
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    backends: Dict[str, str] = Field(..., description="Backend base URLs by service")
    timestamp: str


class ErrorResponse(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None
    code: str
