"""
User repository.

Data access layer for User model.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from referral_network.models.user import User
from referral_network.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """User repository with specific queries."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize user repository."""
        super().__init__(User, session)

    async def get_by_username(self, username: str) -> User | None:
        """
        Get user by username.

        Args:
            username: Lowercase username

        Returns:
            User or None
        """
        return await self.get_by(username=username)

    async def get_by_email(self, email: str) -> User | None:
        """
        Get user by email.

        Args:
            email: Lowercase email

        Returns:
            User or None
        """
        return await self.get_by(email=email)

    async def get_by_referral_code(
        self, referral_code: str
    ) -> User | None:
        """
        Get user by referral code.

        Args:
            referral_code: Referral code

        Returns:
            User or None
        """
        return await self.get_by(referral_code=referral_code)

    async def get_referred_by(self, referral_code: str) -> list[User]:
        """
        Get users directly referred through a referral code.

        Ordered by registration time so tree children come out stable.

        Args:
            referral_code: Referrer's code

        Returns:
            List of users
        """
        return await self.find_all(
            order_by=(User.created_at, User.id),
            referred_by=referral_code,
        )

    async def get_all(self) -> list[User]:
        """
        Get all users in registration order.

        Returns:
            List of users
        """
        return await self.find_all(order_by=(User.created_at, User.id))
