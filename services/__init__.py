"""
Services package - Business logic layer.
"""

from services.auth_service import AuthService
from services.fast_service import FastService
from services.meal_service import MealService

__all__ = ["AuthService", "FastService", "MealService"]
