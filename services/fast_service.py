from typing import List, Optional
import logging

from app.exceptions import (
    AlreadyActiveError,
    FastNotActiveError,
    NotFoundError,
    NotOwnerError,
)
from domain.clock import utcnow
from domain.models import Fast
from repositories import Storage

logger = logging.getLogger("fastlog.fasts")

# Largest id an INTEGER primary key column can hold on PostgreSQL
MAX_FAST_ID = 2**31 - 1


class FastService:
    """Business logic for the fast ledger"""

    @staticmethod
    def get_owned_fast(storage: Storage, fast_id: int, caller_id: int) -> Fast:
        """Load a fast and check that the caller owns it"""
        if not 1 <= fast_id <= MAX_FAST_ID:
            raise NotFoundError(f"Fast {fast_id} not found")
        fast = storage.get_fast(fast_id)
        if fast is None:
            raise NotFoundError(f"Fast {fast_id} not found")
        if fast.user_id != caller_id:
            logger.warning(f"fast_access_denied fast_id={fast_id} user_id={caller_id}")
            raise NotOwnerError()
        return fast

    @staticmethod
    def start_fast(storage: Storage, user_id: int) -> Fast:
        """Open a new fast; at most one may be active per user"""
        # create_fast re-checks under a lock or unique index
        FastService._reject_if_active(storage, user_id)
        fast = storage.create_fast(user_id, utcnow())
        logger.info(f"fast_started fast_id={fast.id} user_id={user_id}")
        return fast

    @staticmethod
    def _reject_if_active(storage: Storage, user_id: int) -> None:
        active = storage.get_active_fast(user_id)
        if active is not None:
            logger.info(f"fast_start_rejected user_id={user_id} active_fast_id={active.id}")
            raise AlreadyActiveError()

    @staticmethod
    def end_fast(
        storage: Storage, fast_id: int, caller_id: int, note: Optional[str] = None
    ) -> Fast:
        """Close the caller's running fast with an optional note"""
        fast = FastService.get_owned_fast(storage, fast_id, caller_id)
        if not fast.is_active:
            raise FastNotActiveError()

        note = note.strip() if note else None
        ended = storage.end_fast(fast_id, utcnow(), note or None)
        logger.info(f"fast_ended fast_id={fast_id} user_id={caller_id}")
        return ended

    @staticmethod
    def list_fasts(storage: Storage, user_id: int) -> List[Fast]:
        """All of a user's fasts, most recent first"""
        return storage.get_fasts(user_id)

    @staticmethod
    def get_active_fast(storage: Storage, user_id: int) -> Optional[Fast]:
        return storage.get_active_fast(user_id)
