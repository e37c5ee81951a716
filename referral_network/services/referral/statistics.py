"""
Referral statistics module.

Per-user downline statistics and platform-wide aggregates. Everything is
recomputed from the record store on every call.
"""

from decimal import Decimal

from referral_network.models.levels import EarningsBucket
from referral_network.repositories.record_store import RecordStore
from referral_network.services.referral.query_manager import ReferralQueryManager
from referral_network.services.referral.types import (
    ReferralStats,
    SystemStats,
    TopEarner,
)


class ReferralStatisticsManager:
    """Manages referral statistics and analytics."""

    def __init__(
        self,
        store: RecordStore,
        query_manager: ReferralQueryManager,
        top_earners_limit: int,
    ) -> None:
        """Initialize statistics manager."""
        self.store = store
        self.query_manager = query_manager
        self.top_earners_limit = top_earners_limit

    async def get_referral_stats(self, user_id: str) -> ReferralStats:
        """
        Get downline statistics for user.

        The user itself (depth 0) is not counted.

        Args:
            user_id: User ID

        Returns:
            ReferralStats; all zero if the user is missing
        """
        stats = ReferralStats()

        tree = await self.query_manager.build_referral_tree(user_id)
        if tree is None:
            return stats

        for _, depth in tree.iter_descendants():
            if depth == 1:
                stats.direct_referrals += 1
            stats.total_referrals += 1
            stats.levels[depth] = stats.levels.get(depth, 0) + 1

        return stats

    async def get_network_size(self, user_id: str) -> int:
        """
        Count every user below a user in the referral tree.

        Args:
            user_id: User ID

        Returns:
            Number of descendants (0 if the user is missing)
        """
        tree = await self.query_manager.build_referral_tree(user_id)
        if tree is None:
            return 0
        return sum(1 for _ in tree.iter_descendants())

    async def get_system_stats(self) -> SystemStats:
        """
        Get platform-wide referral statistics.

        Top earners are ordered by total earnings, descending. The sort is
        stable, so ties keep the store's iteration order, which the store
        does not promise to keep fixed.

        Returns:
            SystemStats aggregate
        """
        users = await self.store.get_all_users()
        referrals = await self.store.get_all_referrals()

        total_earnings = sum(
            (user.total_earnings or Decimal("0") for user in users),
            Decimal("0"),
        )

        earnings_by_level = SystemStats.empty_buckets()
        for user in users:
            for bucket in EarningsBucket:
                earnings_by_level[bucket.value] += (
                    getattr(user, bucket.column) or Decimal("0")
                )

        ranked = sorted(
            users,
            key=lambda user: user.total_earnings or Decimal("0"),
            reverse=True,
        )
        top_earners = [
            TopEarner(
                username=user.username,
                total_earnings=user.total_earnings or Decimal("0"),
                referral_code=user.referral_code,
            )
            for user in ranked[: self.top_earners_limit]
        ]

        return SystemStats(
            total_users=len(users),
            total_referrals=len(referrals),
            total_earnings=total_earnings,
            earnings_by_level=earnings_by_level,
            top_earners=top_earners,
        )
