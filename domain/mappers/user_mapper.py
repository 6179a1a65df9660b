"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.user_schemas import UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """
        Convert User ORM model to UserResponse DTO.

        The password hash is never part of the response.
        """
        return UserResponse(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            city=user.city,
            state=user.state,
            country=user.country,
            avatar=user.avatar,
        )
