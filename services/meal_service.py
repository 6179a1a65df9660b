from typing import List
import logging

from app.exceptions import FastNotActiveError, ServiceValidationError
from domain.clock import utcnow
from domain.models import Meal
from repositories import Storage
from services.fast_service import FastService

logger = logging.getLogger("fastlog.meals")


class MealService:
    """Business logic for the meal log"""

    @staticmethod
    def log_meal(storage: Storage, fast_id: int, caller_id: int, description: str) -> Meal:
        """
        Append a meal to one of the caller's fasts.

        Raises:
            NotFoundError / NotOwnerError: as for FastService.get_owned_fast
            ServiceValidationError: description is blank after trimming
            FastNotActiveError: the fast has already ended
        """
        fast = FastService.get_owned_fast(storage, fast_id, caller_id)

        description = (description or "").strip()
        if not description:
            raise ServiceValidationError("Meal description must not be empty", code="EMPTY_DESCRIPTION")
        if not fast.is_active:
            raise FastNotActiveError("Meals can only be logged during an active fast")

        meal = storage.create_meal(fast_id, description, utcnow())
        logger.info(f"meal_logged meal_id={meal.id} fast_id={fast_id}")
        return meal

    @staticmethod
    def list_meals(storage: Storage, fast_id: int, caller_id: int) -> List[Meal]:
        """Meals of one of the caller's fasts, oldest first"""
        FastService.get_owned_fast(storage, fast_id, caller_id)
        return storage.get_meals_for_fast(fast_id)
