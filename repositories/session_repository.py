"""
Session Repository - login sessions stored in the relational database
"""

from datetime import timedelta
from typing import Optional
from sqlalchemy.orm import Session

from app.security import new_session_token
from domain.clock import utcnow
from domain.models import UserSession
from repositories.base import BaseRepository
from repositories.storage import SessionStore


class SessionRepository(BaseRepository[UserSession], SessionStore):
    """Repository for session data access"""

    def __init__(self, db: Session):
        super().__init__(db, UserSession)

    def create(self, user_id: int, ttl: timedelta) -> UserSession:
        now = utcnow()
        record = UserSession(
            token=new_session_token(),
            user_id=user_id,
            created_at=now,
            expires_at=now + ttl,
        )
        self.db.add(record)
        self.db.commit()
        return record

    def get(self, token: str) -> Optional[UserSession]:
        record = self.get_by_id(token)
        if record is None:
            return None
        if record.expires_at <= utcnow():
            self.db.delete(record)
            self.db.commit()
            return None
        return record

    def destroy(self, token: str) -> bool:
        count = self.db.query(UserSession).filter(UserSession.token == token).delete()
        self.db.commit()
        return count > 0

    def purge_expired(self) -> int:
        count = (
            self.db.query(UserSession)
            .filter(UserSession.expires_at <= utcnow())
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count
