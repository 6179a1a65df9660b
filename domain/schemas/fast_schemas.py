from typing import Optional

from pydantic import Field

from domain.schemas.base import CamelModel, UtcDatetime


class EndFastRequest(CamelModel):
    note: Optional[str] = Field(None, max_length=2000)


class FastResponse(CamelModel):
    id: int
    user_id: int
    start_time: UtcDatetime
    end_time: Optional[UtcDatetime] = None
    is_active: bool
    note: Optional[str] = None
    duration_seconds: int = Field(0, description="Elapsed seconds, up to now while active")


class MealCreate(CamelModel):
    description: str = Field(..., max_length=500)


class MealResponse(CamelModel):
    id: int
    fast_id: int
    description: str
    meal_time: UtcDatetime
