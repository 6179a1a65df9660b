"""
API dependencies for dependency injection
"""

from typing import Generator, Optional

from fastapi import Depends, Request, Response

from adapters.avatar_store import LocalAvatarStore
from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import SessionLocal, User, UserSession
from repositories import SqlStorage, Storage
from services.auth_service import AuthService


def get_storage(request: Request) -> Generator[Storage, None, None]:
    """
    Storage dependency for FastAPI routes.

    The in-memory store lives on ``app.state`` for the whole process; the SQL
    store wraps a fresh ORM session that is closed after the request.

    Usage:
        @router.get("/example")
        def example(storage: Storage = Depends(get_storage)):
            ...
    """
    memory = getattr(request.app.state, "memory_storage", None)
    if memory is not None:
        yield memory
        return

    db = SessionLocal()
    try:
        yield SqlStorage(db)
    finally:
        db.close()


def get_avatar_store(request: Request) -> LocalAvatarStore:
    return request.app.state.avatar_store


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.session_cookie_name)


def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    storage: Storage = Depends(get_storage),
) -> User:
    """Resolve the logged-in user or fail with 401"""
    user = AuthService.current_user(storage, token)
    if user is None:
        raise UnauthorizedError()
    return user


def set_session_cookie(response: Response, session: UserSession) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=settings.session_ttl_hours * 3600,
        httponly=True,
        secure=settings.is_production(),
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.is_production(),
        samesite="lax",
    )
