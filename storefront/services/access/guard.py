"""Shared-secret access guard for administrative operations."""
import hmac
import logging
from enum import Enum
from typing import Optional

from storefront.services.errors import Unauthorized

logger = logging.getLogger(__name__)


class AuthMode(str, Enum):
    """How administrative requests are authorized."""

    OPEN = "open"
    SHARED_SECRET = "shared_secret"


class AccessGuard:
    """Gate for admin reads and writes.

    In OPEN mode every request is allowed (local development, no secret
    configured). In SHARED_SECRET mode the provided secret must match.
    """

    def __init__(self, mode: AuthMode, secret: Optional[str] = None):
        if mode is AuthMode.SHARED_SECRET and not secret:
            raise ValueError("SHARED_SECRET mode requires a non-empty secret")
        self.mode = mode
        self._secret = secret if mode is AuthMode.SHARED_SECRET else None

    @classmethod
    def from_secret(cls, secret: Optional[str]) -> "AccessGuard":
        """Select the mode from a configured secret; unset or empty means OPEN."""
        if secret:
            return cls(AuthMode.SHARED_SECRET, secret)
        return cls(AuthMode.OPEN)

    def authorize(self, provided: Optional[str]) -> bool:
        """Check a provided secret."""
        if self.mode is AuthMode.OPEN:
            return True
        if provided is None:
            return False
        return hmac.compare_digest(provided.encode(), self._secret.encode())

    def require(self, provided: Optional[str]) -> None:
        """Raise Unauthorized unless the provided secret is accepted."""
        if not self.authorize(provided):
            logger.warning("Access guard denied request")
            raise Unauthorized()
