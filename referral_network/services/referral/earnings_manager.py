"""
Referral earnings management module.

Credits rewards to referrers and appends attribution records.
"""

from decimal import Decimal

from loguru import logger

from referral_network.models.levels import ReferralLevel, level_for
from referral_network.models.referral import Referral
from referral_network.repositories.record_store import RecordStore
from referral_network.utils.datetime_utils import Clock
from referral_network.utils.identifiers import IdGenerator


class ReferralEarningsManager:
    """Manages referral earnings operations."""

    def __init__(
        self, store: RecordStore, id_generator: IdGenerator, clock: Clock
    ) -> None:
        """
        Initialize earnings manager.

        Args:
            store: Record store
            id_generator: Source of referral record ids
            clock: Source of award timestamps
        """
        self.store = store
        self.id_generator = id_generator
        self.clock = clock

    async def award_earnings(
        self,
        referrer_id: str,
        referred_user_id: str,
        level: ReferralLevel | int,
        amount: Decimal,
    ) -> Referral | None:
        """
        Credit a reward to one referrer.

        A referrer that no longer exists is skipped without raising, so one
        vanished ancestor does not abort the rest of a distribution.

        Args:
            referrer_id: Referrer user ID
            referred_user_id: Newly onboarded user ID
            level: Attribution level (variant or level number)
            amount: Reward amount

        Returns:
            Created referral record, or None if the referrer was missing
        """
        if isinstance(level, int):
            level = level_for(level)

        referrer = await self.store.get_user_by_id(referrer_id)
        if referrer is None:
            logger.warning(
                "Referrer not found for award, skipping",
                extra={
                    "referrer_id": referrer_id,
                    "referred_user_id": referred_user_id,
                    "level": level.number,
                },
            )
            return None

        referrer.add_earnings(level.bucket, amount)
        await self.store.update_user(referrer)

        referral = Referral(
            id=self.id_generator.new_id(),
            referrer_id=referrer_id,
            referred_id=referred_user_id,
            level=level.number,
            earnings=amount,
            created_at=self.clock(),
        )
        await self.store.add_referral(referral)

        # Each award stands on its own; later failures do not undo it
        await self.store.commit()

        logger.info(
            "Referral reward awarded",
            extra={
                "referrer_id": referrer_id,
                "referred_user_id": referred_user_id,
                "level": level.number,
                "bucket": level.bucket.value,
                "amount": str(amount),
            },
        )

        return referral
