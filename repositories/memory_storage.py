"""
In-memory Storage implementation.

Holds plain (never persisted) ORM instances in dictionaries. One instance is
built at application start and shared by every request, so all reads and
writes go through a single lock.
"""

import itertools
import logging
import threading
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from app.exceptions import AlreadyActiveError, DuplicateUsernameError, NotFoundError
from app.security import new_session_token
from domain.clock import utcnow
from domain.models import Fast, Meal, User, UserSession
from repositories.storage import SessionStore, Storage

logger = logging.getLogger("fastlog.storage.memory")


class MemorySessionStore(SessionStore):
    def __init__(self, lock: threading.RLock):
        self._lock = lock
        self._sessions: Dict[str, UserSession] = {}

    def create(self, user_id: int, ttl: timedelta) -> UserSession:
        now = utcnow()
        record = UserSession(
            token=new_session_token(),
            user_id=user_id,
            created_at=now,
            expires_at=now + ttl,
        )
        with self._lock:
            self._sessions[record.token] = record
        return record

    def get(self, token: str) -> Optional[UserSession]:
        with self._lock:
            record = self._sessions.get(token)
            if record is None:
                return None
            if record.expires_at <= utcnow():
                del self._sessions[token]
                return None
            return record

    def destroy(self, token: str) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def purge_expired(self) -> int:
        now = utcnow()
        with self._lock:
            expired = [t for t, s in self._sessions.items() if s.expires_at <= now]
            for token in expired:
                del self._sessions[token]
        return len(expired)


class MemoryStorage(Storage):
    """Dictionary-backed Storage for development and tests"""

    def __init__(self):
        self._lock = threading.RLock()
        self._users: Dict[int, User] = {}
        self._fasts: Dict[int, Fast] = {}
        self._meals: Dict[int, Meal] = {}
        self._user_ids = itertools.count(1)
        self._fast_ids = itertools.count(1)
        self._meal_ids = itertools.count(1)
        self.sessions = MemorySessionStore(self._lock)
        logger.info("memory_storage_initialized")

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return next(
                (u for u in self._users.values() if u.username == username), None
            )

    def create_user(self, user: User) -> User:
        with self._lock:
            if any(u.username == user.username for u in self._users.values()):
                raise DuplicateUsernameError()
            user.id = next(self._user_ids)
            self._users[user.id] = user
        return user

    def create_fast(self, user_id: int, start_time: datetime) -> Fast:
        with self._lock:
            if self.get_active_fast(user_id) is not None:
                raise AlreadyActiveError()
            fast = Fast(
                id=next(self._fast_ids),
                user_id=user_id,
                start_time=start_time,
                end_time=None,
                is_active=True,
                note=None,
            )
            self._fasts[fast.id] = fast
        return fast

    def get_fast(self, fast_id: int) -> Optional[Fast]:
        with self._lock:
            return self._fasts.get(fast_id)

    def get_active_fast(self, user_id: int) -> Optional[Fast]:
        with self._lock:
            return next(
                (
                    f
                    for f in self._fasts.values()
                    if f.user_id == user_id and f.is_active
                ),
                None,
            )

    def end_fast(self, fast_id: int, end_time: datetime, note: Optional[str]) -> Fast:
        with self._lock:
            fast = self._fasts.get(fast_id)
            if fast is None:
                raise NotFoundError(f"Fast {fast_id} not found")
            fast.end_time = end_time
            fast.is_active = False
            fast.note = note
        return fast

    def get_fasts(self, user_id: int) -> List[Fast]:
        with self._lock:
            fasts = [f for f in self._fasts.values() if f.user_id == user_id]
        return sorted(fasts, key=lambda f: (f.start_time, f.id), reverse=True)

    def create_meal(self, fast_id: int, description: str, meal_time: datetime) -> Meal:
        with self._lock:
            if fast_id not in self._fasts:
                raise NotFoundError(f"Fast {fast_id} not found")
            meal = Meal(
                id=next(self._meal_ids),
                fast_id=fast_id,
                description=description,
                meal_time=meal_time,
            )
            self._meals[meal.id] = meal
        return meal

    def get_meals_for_fast(self, fast_id: int) -> List[Meal]:
        with self._lock:
            meals = [m for m in self._meals.values() if m.fast_id == fast_id]
        return sorted(meals, key=lambda m: (m.meal_time, m.id))
