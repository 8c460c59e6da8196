"""
Administrator authentication.

The storefront has exactly one administrator, configured through
``ADMIN_USERNAME`` and ``ADMIN_PASSWORD_HASH``.  Credentials are checked
on the server and a signed token is issued; the client never sees the
stored hash.
"""

import hmac
import logging
from typing import Optional

from streamstore_api.app.core.config import settings
from streamstore_api.app.core.security import ADMIN_ROLE, create_access_token, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Service class for administrator login."""

    @classmethod
    async def authenticate(cls, username: str, password: str) -> bool:
        """Return ``True`` if the credentials match the configured admin."""
        if not settings.admin_password_hash:
            logger.warning("Login attempted but ADMIN_PASSWORD_HASH is not configured")
            return False
        username_ok = hmac.compare_digest(username.encode("utf-8"), settings.admin_username.encode("utf-8"))
        # The hash check runs even when the username is wrong.
        password_ok = verify_password(password, settings.admin_password_hash)
        if not (username_ok and password_ok):
            logger.warning("Failed admin login for user '%s'", username)
            return False
        return True

    @classmethod
    async def login(cls, username: str, password: str) -> Optional[str]:
        """Return a fresh admin token, or ``None`` if the credentials are wrong."""
        if not await cls.authenticate(username, password):
            return None
        logger.info("Admin '%s' logged in", username)
        return create_access_token({"sub": settings.admin_username, "role": ADMIN_ROLE})
