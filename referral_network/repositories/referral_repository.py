"""
Referral repository.

Data access layer for Referral model.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from referral_network.models.referral import Referral
from referral_network.repositories.base import BaseRepository


class ReferralRepository(BaseRepository[Referral]):
    """Referral repository with specific queries."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize referral repository."""
        super().__init__(Referral, session)

    async def get_by_referrer(self, referrer_id: str) -> list[Referral]:
        """
        Get referral records by referrer.

        Args:
            referrer_id: Referrer user ID

        Returns:
            List of referral records in creation order
        """
        return await self.find_all(
            order_by=(Referral.created_at, Referral.id),
            referrer_id=referrer_id,
        )

    async def get_all(self) -> list[Referral]:
        """
        Get all referral records in creation order.

        Returns:
            List of referral records
        """
        return await self.find_all(order_by=(Referral.created_at, Referral.id))

