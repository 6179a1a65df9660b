"""Local-disk blob store for profile avatars.

Files are written under the configured upload directory and referenced by the
URL path they are served from (``/uploads/<name>``).
"""

import logging
import secrets
import time
from pathlib import Path, PurePosixPath
from typing import Optional

from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("fastlog.avatar_store")

ALLOWED_SUFFIXES = {".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp"}


class LocalAvatarStore:
    def __init__(self, root: str, url_prefix: str = "/uploads", max_bytes: int = 5 * 1024 * 1024):
        self.root = Path(root)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.max_bytes = max_bytes

    def ensure_dir(self) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def validate(self, data: Optional[bytes], filename: Optional[str], content_type: Optional[str]) -> None:
        """Reject missing, empty, oversized or non-image uploads"""
        if data is None or not filename:
            raise ServiceValidationError("Avatar image is required", code="INVALID_AVATAR")
        if not (content_type or "").startswith("image/"):
            raise ServiceValidationError("Avatar must be an image", code="INVALID_AVATAR")
        if not data:
            raise ServiceValidationError("Avatar image is empty", code="INVALID_AVATAR")
        if len(data) > self.max_bytes:
            raise ServiceValidationError(
                "Avatar image is too large",
                details={"max_bytes": self.max_bytes},
                code="INVALID_AVATAR",
            )

    def put(self, data: bytes, filename: str, content_type: Optional[str]) -> str:
        """Store an uploaded avatar and return its reference"""
        self.validate(data, filename, content_type)
        suffix = PurePosixPath(filename).suffix.lower()
        if suffix not in ALLOWED_SUFFIXES:
            suffix = ""
        name = f"avatar-{int(time.time() * 1000)}-{secrets.token_hex(6)}{suffix}"
        path = self.ensure_dir() / name
        path.write_bytes(data)
        logger.info(f"avatar_stored name={name} bytes={len(data)}")
        return f"{self.url_prefix}/{name}"

    def get(self, ref: str) -> bytes:
        """Read back an avatar by the reference put() returned"""
        name = PurePosixPath(ref).name
        if not ref.startswith(self.url_prefix + "/") or not name:
            raise NotFoundError(f"Avatar {ref} not found")
        path = self.root / name
        if not path.is_file():
            raise NotFoundError(f"Avatar {ref} not found")
        return path.read_bytes()

    def delete(self, ref: str) -> None:
        """Remove a stored avatar; used when registration fails after upload"""
        path = self.root / PurePosixPath(ref).name
        path.unlink(missing_ok=True)
