"""
Referral query management module.

Handles downline lookups: direct referrals, full referral trees and the
per-award earnings breakdown.
"""

from referral_network.models.user import User
from referral_network.repositories.record_store import RecordStore
from referral_network.services.referral.types import (
    EarningsBreakdownEntry,
    ReferralTree,
)
from referral_network.utils.exceptions import ReferralChainTooDeepError


class ReferralQueryManager:
    """Manages referral query operations."""

    def __init__(self, store: RecordStore, max_depth: int) -> None:
        """
        Initialize query manager.

        Args:
            store: Record store
            max_depth: Maximum tree depth before the graph is treated as corrupted
        """
        self.store = store
        self.max_depth = max_depth

    async def get_direct_referrals(self, user_id: str) -> list[User]:
        """
        Get users directly referred by a user.

        Args:
            user_id: User ID

        Returns:
            Users whose referred_by equals the user's code (empty if user missing)
        """
        user = await self.store.get_user_by_id(user_id)
        if user is None:
            return []
        return await self.store.get_users_referred_by(user.referral_code)

    async def build_referral_tree(self, user_id: str) -> ReferralTree | None:
        """
        Build the complete downline tree of a user.

        The tree is rebuilt from user records on every call. There is no
        cycle detection; a cyclic graph trips the depth guard instead.

        Args:
            user_id: Root user ID

        Returns:
            ReferralTree rooted at the user, or None if the user is missing

        Raises:
            ReferralChainTooDeepError: If the tree is deeper than max_depth
        """
        root = await self.store.get_user_by_id(user_id)
        if root is None:
            return None

        tree = ReferralTree(user=root)
        pending = [(tree, 0)]

        while pending:
            node, depth = pending.pop()
            children = await self.store.get_users_referred_by(
                node.user.referral_code
            )
            if children and depth >= self.max_depth:
                raise ReferralChainTooDeepError(root.id, self.max_depth)

            for child in children:
                child_node = ReferralTree(user=child)
                node.children.append(child_node)
                pending.append((child_node, depth + 1))

        return tree

    async def get_earnings_breakdown(
        self, user_id: str
    ) -> list[EarningsBreakdownEntry]:
        """
        Get every award a user received, newest first.

        Args:
            user_id: Referrer user ID

        Returns:
            Breakdown entries joined to the referred user (None if deleted)
        """
        referrals = await self.store.get_referrals_by_referrer_id(user_id)

        breakdown = []
        for referral in referrals:
            referred_user = await self.store.get_user_by_id(referral.referred_id)
            breakdown.append(
                EarningsBreakdownEntry(
                    referred_user=referred_user,
                    level=referral.level,
                    earnings=referral.earnings,
                    date=referral.created_at,
                )
            )

        # Stable sort: equal timestamps keep store order
        breakdown.sort(key=lambda entry: entry.date, reverse=True)

        return breakdown
