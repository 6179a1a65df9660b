"""Fast ledger and meal log routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from api.dependencies import get_current_user, get_storage
from api.responses import ERROR_RESPONSES
from domain.mappers import FastMapper
from domain.models import User
from domain.schemas.fast_schemas import (
    EndFastRequest,
    FastResponse,
    MealCreate,
    MealResponse,
)
from repositories import Storage
from services.fast_service import FastService
from services.meal_service import MealService

router = APIRouter(prefix="/fasts", tags=["Fasts"], responses=ERROR_RESPONSES)


@router.post(
    "/start", response_model=FastResponse, status_code=status.HTTP_201_CREATED
)
def start_fast(
    user: User = Depends(get_current_user), storage: Storage = Depends(get_storage)
):
    """Start a fast for the current user. Fails with 400 while another is active."""
    fast = FastService.start_fast(storage, user.id)
    return FastMapper.to_response(fast)


@router.post("/{fast_id}/end", response_model=FastResponse)
def end_fast(
    fast_id: int,
    payload: Optional[EndFastRequest] = None,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """End one of the current user's active fasts, optionally with a note."""
    note = payload.note if payload is not None else None
    fast = FastService.end_fast(storage, fast_id, user.id, note)
    return FastMapper.to_response(fast)


@router.get("", response_model=List[FastResponse])
def list_fasts(
    user: User = Depends(get_current_user), storage: Storage = Depends(get_storage)
):
    """All fasts of the current user, most recent first."""
    return [FastMapper.to_response(f) for f in FastService.list_fasts(storage, user.id)]


@router.get("/active", response_model=Optional[FastResponse])
def get_active_fast(
    user: User = Depends(get_current_user), storage: Storage = Depends(get_storage)
):
    """The running fast of the current user, or null."""
    fast = FastService.get_active_fast(storage, user.id)
    return FastMapper.to_response(fast) if fast is not None else None


@router.post(
    "/{fast_id}/meals",
    response_model=MealResponse,
    status_code=status.HTTP_201_CREATED,
)
def log_meal(
    fast_id: int,
    payload: MealCreate,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Log a meal against one of the current user's active fasts."""
    meal = MealService.log_meal(storage, fast_id, user.id, payload.description)
    return FastMapper.meal_to_response(meal)


@router.get("/{fast_id}/meals", response_model=List[MealResponse])
def list_meals(
    fast_id: int,
    user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Meals of one of the current user's fasts, oldest first."""
    meals = MealService.list_meals(storage, fast_id, user.id)
    return [FastMapper.meal_to_response(m) for m in meals]
