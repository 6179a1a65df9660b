"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import DuplicateUsernameError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by (already lowercased) username"""
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, user: User) -> User:
        """Create a new user"""
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise DuplicateUsernameError()
