from typing import Optional

from domain.schemas.base import CamelModel


class UserRegister(CamelModel):
    """Registration form fields; presence is checked by AuthService.register."""

    username: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class LoginRequest(CamelModel):
    username: str
    password: str


class UserResponse(CamelModel):
    id: int
    username: str
    first_name: str
    last_name: str
    city: str
    state: str
    country: str
    avatar: str
