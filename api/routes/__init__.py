"""API routes package"""

from . import auth, fasts, health

__all__ = ["auth", "fasts", "health"]
