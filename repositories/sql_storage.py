"""
Relational Storage implementation backed by one SQLAlchemy session.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from domain.models import Fast, Meal, User
from repositories.fast_repository import FastRepository, MealRepository
from repositories.session_repository import SessionRepository
from repositories.storage import Storage
from repositories.user_repository import UserRepository


class SqlStorage(Storage):
    """Storage over the SQL repositories, scoped to a single request"""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.fasts = FastRepository(db)
        self.meals = MealRepository(db)
        self.sessions = SessionRepository(db)

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get_by_id(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.get_by_username(username)

    def create_user(self, user: User) -> User:
        return self.users.create_user(user)

    def create_fast(self, user_id: int, start_time: datetime) -> Fast:
        return self.fasts.start(user_id, start_time)

    def get_fast(self, fast_id: int) -> Optional[Fast]:
        return self.fasts.get_by_id(fast_id)

    def get_active_fast(self, user_id: int) -> Optional[Fast]:
        return self.fasts.get_active(user_id)

    def end_fast(self, fast_id: int, end_time: datetime, note: Optional[str]) -> Fast:
        return self.fasts.end(fast_id, end_time, note)

    def get_fasts(self, user_id: int) -> List[Fast]:
        return self.fasts.get_by_user_id(user_id)

    def create_meal(self, fast_id: int, description: str, meal_time: datetime) -> Meal:
        return self.meals.add(fast_id, description, meal_time)

    def get_meals_for_fast(self, fast_id: int) -> List[Meal]:
        return self.meals.get_by_fast_id(fast_id)
