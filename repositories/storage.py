"""
Storage contract shared by the SQL and in-memory backends.

Services only talk to a ``Storage``; which implementation they get is decided
once per request by ``api.dependencies.get_storage``.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import List, Optional

from domain.models import Fast, Meal, User, UserSession


class SessionStore(ABC):
    """Opaque token -> user id mapping with a fixed lifetime"""

    @abstractmethod
    def create(self, user_id: int, ttl: timedelta) -> UserSession:
        ...

    @abstractmethod
    def get(self, token: str) -> Optional[UserSession]:
        """Return the live session for token; expired sessions are dropped and yield None"""

    @abstractmethod
    def destroy(self, token: str) -> bool:
        ...

    @abstractmethod
    def purge_expired(self) -> int:
        """Delete every expired session, returning how many were removed"""


class Storage(ABC):
    """Users, fasts and meals plus the session store"""

    sessions: SessionStore

    # User operations
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Persist a new user; raises DuplicateUsernameError if the name is taken"""

    # Fast operations
    @abstractmethod
    def create_fast(self, user_id: int, start_time: datetime) -> Fast:
        """Open a fast; raises AlreadyActiveError if the user already has one running"""

    @abstractmethod
    def get_fast(self, fast_id: int) -> Optional[Fast]:
        ...

    @abstractmethod
    def get_active_fast(self, user_id: int) -> Optional[Fast]:
        ...

    @abstractmethod
    def end_fast(self, fast_id: int, end_time: datetime, note: Optional[str]) -> Fast:
        ...

    @abstractmethod
    def get_fasts(self, user_id: int) -> List[Fast]:
        """All fasts of a user, most recent first"""

    # Meal operations
    @abstractmethod
    def create_meal(self, fast_id: int, description: str, meal_time: datetime) -> Meal:
        ...

    @abstractmethod
    def get_meals_for_fast(self, fast_id: int) -> List[Meal]:
        """Meals of a fast in the order they were eaten"""
