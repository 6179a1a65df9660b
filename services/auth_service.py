from datetime import timedelta
from typing import Optional, Tuple
import logging

from adapters.avatar_store import LocalAvatarStore
from app.config import settings
from app.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    ServiceValidationError,
)
from app.security import burn_password_check, hash_password, verify_password
from domain.models import User, UserSession
from domain.schemas.user_schemas import UserRegister
from repositories import Storage

logger = logging.getLogger("fastlog.auth")

REQUIRED_FIELDS = (
    "username",
    "password",
    "first_name",
    "last_name",
    "city",
    "state",
    "country",
)


def normalize_username(username: str) -> str:
    return username.strip().lower()


class AuthService:
    """Registration, login and session resolution"""

    @staticmethod
    def session_ttl() -> timedelta:
        return timedelta(hours=settings.session_ttl_hours)

    @staticmethod
    def register(
        storage: Storage,
        avatar_store: LocalAvatarStore,
        form: UserRegister,
        avatar_data: Optional[bytes],
        avatar_filename: Optional[str],
        avatar_content_type: Optional[str],
    ) -> Tuple[User, UserSession]:
        """
        Create a user with a stored avatar and open a session for it.

        Raises:
            ServiceValidationError: a required field is blank or the avatar is unusable
            DuplicateUsernameError: the lowercased username is already registered
        """
        missing = [
            name for name in REQUIRED_FIELDS if not (getattr(form, name) or "").strip()
        ]
        if missing:
            raise ServiceValidationError(
                "Missing required fields: " + ", ".join(missing),
                details={"missing": missing},
                code="MISSING_FIELD",
            )

        username = normalize_username(form.username)
        if storage.get_user_by_username(username) is not None:
            logger.warning(f"register_rejected reason=duplicate username={username}")
            raise DuplicateUsernameError()

        avatar_store.validate(avatar_data, avatar_filename, avatar_content_type)
        password_hash = hash_password(form.password)
        avatar_ref = avatar_store.put(avatar_data, avatar_filename, avatar_content_type)

        user = User(
            username=username,
            password_hash=password_hash,
            first_name=form.first_name.strip(),
            last_name=form.last_name.strip(),
            city=form.city.strip(),
            state=form.state.strip(),
            country=form.country.strip(),
            avatar=avatar_ref,
        )
        try:
            user = storage.create_user(user)
        except DuplicateUsernameError:
            avatar_store.delete(avatar_ref)
            raise

        session = storage.sessions.create(user.id, AuthService.session_ttl())
        logger.info(f"user_registered user_id={user.id} username={username}")
        return user, session

    @staticmethod
    def login(storage: Storage, username: str, password: str) -> Tuple[User, UserSession]:
        """
        Check credentials and open a session.

        Unknown usernames and wrong passwords fail identically and create no session.
        """
        storage.sessions.purge_expired()

        normalized = normalize_username(username)
        user = storage.get_user_by_username(normalized)
        if user is None:
            burn_password_check(password)
            logger.info(f"login_failed username={normalized}")
            raise InvalidCredentialsError()
        if not verify_password(password, user.password_hash):
            logger.info(f"login_failed username={normalized}")
            raise InvalidCredentialsError()

        session = storage.sessions.create(user.id, AuthService.session_ttl())
        logger.info(f"login_succeeded user_id={user.id}")
        return user, session

    @staticmethod
    def logout(storage: Storage, token: Optional[str]) -> bool:
        if not token:
            return False
        return storage.sessions.destroy(token)

    @staticmethod
    def current_user(storage: Storage, token: Optional[str]) -> Optional[User]:
        """Resolve the user behind a session token, or None"""
        if not token:
            return None
        session = storage.sessions.get(token)
        if session is None:
            return None
        user = storage.get_user(session.user_id)
        if user is None:
            logger.warning(f"session_orphaned user_id={session.user_id}")
            storage.sessions.destroy(token)
        return user
