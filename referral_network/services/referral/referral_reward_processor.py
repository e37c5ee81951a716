"""
Referral reward processor.

Distributes onboarding rewards up the referrer chain of a new user.
"""

from decimal import Decimal

from loguru import logger

from referral_network.models.levels import reward_for
from referral_network.repositories.record_store import RecordStore
from referral_network.services.referral.chain_manager import ReferralChainManager
from referral_network.services.referral.earnings_manager import (
    ReferralEarningsManager,
)
from referral_network.services.referral.types import ReferralResult
from referral_network.utils.exceptions import (
    ReferralError,
    ReferrerNotFoundError,
    UserNotFoundError,
)


class ReferralRewardProcessor:
    """
    Processor for onboarding rewards.

    Rewards are not atomic as a group: every award is committed as soon as it
    is made, so a hard failure part way up the chain leaves the lower levels
    paid.
    """

    def __init__(
        self,
        store: RecordStore,
        chain_manager: ReferralChainManager,
        earnings_manager: ReferralEarningsManager,
    ) -> None:
        """
        Initialize referral reward processor.

        Args:
            store: Record store
            chain_manager: Upward chain walker
            earnings_manager: Award bookkeeping
        """
        self.store = store
        self.chain_manager = chain_manager
        self.earnings_manager = earnings_manager

    async def process_new_referral(
        self, new_user_id: str, referral_code: str
    ) -> ReferralResult:
        """
        Award every ancestor of a newly onboarded user.

        Level 1 goes to the owner of referral_code, level 2 to that user's
        referrer, and so on until a root or a broken link is reached.

        Args:
            new_user_id: ID of the just-created user
            referral_code: Code supplied at registration (level-1 referrer)

        Returns:
            ReferralResult with success flag, award count and total, or the
            error message of a hard failure
        """
        awards_count = 0
        total_awarded = Decimal("0")

        try:
            new_user = await self.store.get_user_by_id(new_user_id)
            if new_user is None:
                raise UserNotFoundError("User not found")

            level1_referrer = await self.store.get_user_by_referral_code(
                referral_code
            )
            if level1_referrer is None:
                raise ReferrerNotFoundError("Referrer not found")

            async for level, referrer in self.chain_manager.walk_from(
                level1_referrer
            ):
                amount = reward_for(level)
                referral = await self.earnings_manager.award_earnings(
                    referrer.id, new_user_id, level, amount
                )
                if referral is not None:
                    awards_count += 1
                    total_awarded += amount

        except ReferralError as e:
            logger.warning(
                "Error processing referral",
                extra={
                    "new_user_id": new_user_id,
                    "referral_code": referral_code,
                    "error": str(e),
                    "awards_committed": awards_count,
                },
            )
            return ReferralResult(
                success=False,
                error=str(e),
                awards_count=awards_count,
                total_awarded=total_awarded,
            )

        logger.info(
            "Referral processed",
            extra={
                "new_user_id": new_user_id,
                "referral_code": referral_code,
                "awards_count": awards_count,
                "total_awarded": str(total_awarded),
            },
        )

        return ReferralResult(
            success=True,
            awards_count=awards_count,
            total_awarded=total_awarded,
        )
