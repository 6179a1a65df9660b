"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    AppError,
    ServiceValidationError,
    DuplicateUsernameError,
    AlreadyActiveError,
    FastNotActiveError,
    NotFoundError,
    UnauthorizedError,
    InvalidCredentialsError,
    NotOwnerError,
)

__all__ = [
    "settings",
    "AppError",
    "ServiceValidationError",
    "DuplicateUsernameError",
    "AlreadyActiveError",
    "FastNotActiveError",
    "NotFoundError",
    "UnauthorizedError",
    "InvalidCredentialsError",
    "NotOwnerError",
]
