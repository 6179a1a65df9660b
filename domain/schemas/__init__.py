"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserRegister, LoginRequest, UserResponse
from domain.schemas.fast_schemas import (
    EndFastRequest,
    FastResponse,
    MealCreate,
    MealResponse,
)

__all__ = [
    # User schemas
    "UserRegister",
    "LoginRequest",
    "UserResponse",
    # Fast schemas
    "EndFastRequest",
    "FastResponse",
    "MealCreate",
    "MealResponse",
]
