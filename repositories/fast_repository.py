"""
Fast and Meal Repositories - Data access layer for the fast ledger and meal log
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import Fast, Meal
from app.exceptions import AlreadyActiveError, NotFoundError


class FastRepository(BaseRepository[Fast]):
    """Repository for fast data access"""

    def __init__(self, db: Session):
        super().__init__(db, Fast)

    def get_active(self, user_id: int) -> Optional[Fast]:
        """Get the running fast of a user, if any"""
        return (
            self.db.query(Fast)
            .filter(Fast.user_id == user_id, Fast.is_active.is_(True))
            .first()
        )

    def get_by_user_id(self, user_id: int) -> List[Fast]:
        """Get all fasts for a user, most recent first"""
        return (
            self.db.query(Fast)
            .filter(Fast.user_id == user_id)
            .order_by(Fast.start_time.desc(), Fast.id.desc())
            .all()
        )

    def start(self, user_id: int, start_time: datetime) -> Fast:
        """Insert a running fast; the partial unique index rejects a second one"""
        fast = Fast(user_id=user_id, start_time=start_time, end_time=None, is_active=True)
        try:
            return self.create(fast)
        except IntegrityError:
            self.db.rollback()
            raise AlreadyActiveError()

    def end(self, fast_id: int, end_time: datetime, note: Optional[str]) -> Fast:
        """Close a fast with its end time and note"""
        fast = self.get_by_id(fast_id)
        if fast is None:
            raise NotFoundError(f"Fast {fast_id} not found")
        fast.end_time = end_time
        fast.is_active = False
        fast.note = note
        return self.update(fast)


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_by_fast_id(self, fast_id: int) -> List[Meal]:
        """Get all meals for a fast, oldest first"""
        return (
            self.db.query(Meal)
            .filter(Meal.fast_id == fast_id)
            .order_by(Meal.meal_time.asc(), Meal.id.asc())
            .all()
        )

    def add(self, fast_id: int, description: str, meal_time: datetime) -> Meal:
        return self.create(Meal(fast_id=fast_id, description=description, meal_time=meal_time))
