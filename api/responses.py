"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field

from domain.clock import isoformat_utc, utcnow
from domain.schemas.base import UtcDatetime


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[dict] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Human-readable message")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: UtcDatetime = Field(default_factory=utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    storage: Optional[str] = Field(None, description="Active storage backend")
    timestamp: UtcDatetime = Field(default_factory=utcnow, description="Check timestamp")


def success_response(data: Any = None, message: str = None) -> dict:
    """Create a standardized success response"""
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": isoformat_utc(utcnow()),
    }


def error_response(code: str, message: str, details: dict = None) -> dict:
    """Create a standardized error response"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {
        "success": False,
        "message": message,
        "error": error,
        "timestamp": isoformat_utc(utcnow()),
    }


# Documented on every route that can fail with a domain error
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    401: {"model": ErrorResponse, "description": "Authentication required"},
    403: {"model": ErrorResponse, "description": "Fast belongs to another user"},
    404: {"model": ErrorResponse, "description": "Fast not found"},
}
