"""
Fast and meal mappers.
"""

from datetime import datetime
from typing import Optional

from domain.clock import utcnow
from domain.models import Fast, Meal
from domain.schemas.fast_schemas import FastResponse, MealResponse


class FastMapper:
    """Mapper for fast and meal transformations."""

    @staticmethod
    def to_response(fast: Fast, now: Optional[datetime] = None) -> FastResponse:
        """
        Convert Fast ORM model to FastResponse DTO.

        Args:
            fast: Fast ORM instance
            now: reference time for the duration of a running fast

        Returns:
            FastResponse with duration_seconds measured to end_time, or to now while active
        """
        until = fast.end_time or now or utcnow()
        duration = max(0, int((until - fast.start_time).total_seconds()))
        return FastResponse(
            id=fast.id,
            user_id=fast.user_id,
            start_time=fast.start_time,
            end_time=fast.end_time,
            is_active=fast.is_active,
            note=fast.note,
            duration_seconds=duration,
        )

    @staticmethod
    def meal_to_response(meal: Meal) -> MealResponse:
        return MealResponse(
            id=meal.id,
            fast_id=meal.fast_id,
            description=meal.description,
            meal_time=meal.meal_time,
        )
