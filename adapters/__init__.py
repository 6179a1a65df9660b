"""
Adapters package - External resource connections.
Blob storage for uploaded avatar images.
"""

from adapters.avatar_store import LocalAvatarStore

__all__ = ["LocalAvatarStore"]
