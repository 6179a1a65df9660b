"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
)
from domain.models.user import User, UserSession
from domain.models.fast import Fast, Meal

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    # User models
    "User",
    "UserSession",
    # Fast models
    "Fast",
    "Meal",
]
