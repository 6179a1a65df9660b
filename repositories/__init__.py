"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.storage import Storage, SessionStore
from repositories.user_repository import UserRepository
from repositories.fast_repository import FastRepository, MealRepository
from repositories.session_repository import SessionRepository
from repositories.sql_storage import SqlStorage
from repositories.memory_storage import MemoryStorage, MemorySessionStore

__all__ = [
    "BaseRepository",
    "Storage",
    "SessionStore",
    "UserRepository",
    "FastRepository",
    "MealRepository",
    "SessionRepository",
    "SqlStorage",
    "MemoryStorage",
    "MemorySessionStore",
]
