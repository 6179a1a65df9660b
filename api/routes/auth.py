"""Registration, login and session routes"""

from typing import Optional
import logging

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from adapters.avatar_store import LocalAvatarStore
from api.dependencies import (
    clear_session_cookie,
    get_avatar_store,
    get_current_user,
    get_session_token,
    get_storage,
    set_session_cookie,
)
from api.responses import ERROR_RESPONSES, success_response
from domain.mappers import UserMapper
from domain.models import User
from domain.schemas.user_schemas import LoginRequest, UserRegister, UserResponse
from repositories import Storage
from services.auth_service import AuthService

router = APIRouter(tags=["Auth"], responses=ERROR_RESPONSES)
logger = logging.getLogger("fastlog.api.auth")


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
def register(
    response: Response,
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    first_name: Optional[str] = Form(None, alias="firstName"),
    last_name: Optional[str] = Form(None, alias="lastName"),
    city: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
    country: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    current_token: Optional[str] = Depends(get_session_token),
    storage: Storage = Depends(get_storage),
    avatar_store: LocalAvatarStore = Depends(get_avatar_store),
):
    """Create an account from a multipart form with an avatar image and log it in."""
    form = UserRegister(
        username=username,
        password=password,
        first_name=first_name,
        last_name=last_name,
        city=city,
        state=state,
        country=country,
    )
    # Read one byte past the limit so validate() sees oversized files
    avatar_data = (
        avatar.file.read(avatar_store.max_bytes + 1) if avatar is not None else None
    )
    user, session = AuthService.register(
        storage,
        avatar_store,
        form,
        avatar_data,
        avatar.filename if avatar is not None else None,
        avatar.content_type if avatar is not None else None,
    )
    AuthService.logout(storage, current_token)
    set_session_cookie(response, session)
    return UserMapper.to_response(user)


@router.post("/login", response_model=UserResponse)
def login(
    credentials: LoginRequest,
    response: Response,
    current_token: Optional[str] = Depends(get_session_token),
    storage: Storage = Depends(get_storage),
):
    """Exchange username and password for a session cookie."""
    user, session = AuthService.login(storage, credentials.username, credentials.password)
    AuthService.logout(storage, current_token)
    set_session_cookie(response, session)
    return UserMapper.to_response(user)


@router.post("/logout")
def logout(
    response: Response,
    user: User = Depends(get_current_user),
    token: Optional[str] = Depends(get_session_token),
    storage: Storage = Depends(get_storage),
):
    """Destroy the current session."""
    AuthService.logout(storage, token)
    clear_session_cookie(response)
    logger.info(f"logout user_id={user.id}")
    return success_response(message="Logged out")


@router.get("/user", response_model=UserResponse)
def current_user(user: User = Depends(get_current_user)):
    """Return the logged-in user."""
    return UserMapper.to_response(user)
