"""
User authentication functionality.

Credential check only; sessions and tokens are handled by the caller.
"""

from loguru import logger

from referral_network.services.base_service import ServiceResult
from referral_network.services.user.crypto import verify_password
from referral_network.utils.exceptions import AuthenticationError


class UserAuthenticationMixin:
    """Mixin for user authentication functionality."""

    async def authenticate(self, username: str, password: str) -> ServiceResult:
        """
        Check username and password.

        The failure message is the same for an unknown user and a wrong
        password.

        Args:
            username: Username (case-insensitive)
            password: Plain password to verify

        Returns:
            ServiceResult with the user as data on success
        """
        user = None
        if username:
            user = await self.store.get_user_by_username(username.strip().lower())

        if user is None or not verify_password(password or "", user.password_hash):
            error = AuthenticationError("Invalid username or password")
            logger.info(
                "Authentication failed",
                extra={"username": username, "user_found": user is not None},
            )
            return ServiceResult(
                success=False, error=str(error), error_code=error.error_code
            )

        logger.info("User authenticated", extra={"user_id": user.id})
        return ServiceResult(success=True, data=user)
