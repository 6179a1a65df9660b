"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.fast_mapper import FastMapper

__all__ = ["UserMapper", "FastMapper"]
