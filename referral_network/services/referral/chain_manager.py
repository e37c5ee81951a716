"""
Referral chain management module.

Walks the referrer chain upward through referred_by codes.
"""

from collections.abc import AsyncIterator

from loguru import logger

from referral_network.models.levels import Level1, ReferralLevel, next_level
from referral_network.models.user import User
from referral_network.repositories.record_store import RecordStore
from referral_network.utils.exceptions import ReferralChainTooDeepError


class ReferralChainManager:
    """Manages upward referral chain traversal."""

    def __init__(self, store: RecordStore, max_depth: int) -> None:
        """
        Initialize chain manager.

        Args:
            store: Record store
            max_depth: Maximum number of levels walked before giving up
        """
        self.store = store
        self.max_depth = max_depth

    async def walk_from(
        self, first_referrer: User
    ) -> AsyncIterator[tuple[ReferralLevel, User]]:
        """
        Walk upward starting at a level-1 referrer.

        Yields each ancestor with its level before the next one is resolved,
        so callers can act on a level before the chain above it is read.
        The walk ends at a root (no referred_by) or at a code that no longer
        resolves; the latter is a silent chain break.

        Args:
            first_referrer: Level-1 referrer

        Yields:
            (level, referrer) pairs, nearest first

        Raises:
            ReferralChainTooDeepError: If the chain is longer than max_depth
        """
        level: ReferralLevel = Level1()
        current = first_referrer
        yield level, current

        while current.referred_by:
            upstream = await self.store.get_user_by_referral_code(
                current.referred_by
            )
            if upstream is None:
                logger.warning(
                    "Referral chain broken: code does not resolve",
                    extra={
                        "user_id": current.id,
                        "referred_by": current.referred_by,
                        "level": level.number,
                    },
                )
                return

            # Only a resolved ancestor beyond the limit counts as too deep
            if level.number >= self.max_depth:
                logger.critical(
                    "Referral chain exceeds max depth",
                    extra={
                        "start_user_id": first_referrer.id,
                        "max_depth": self.max_depth,
                    },
                )
                raise ReferralChainTooDeepError(first_referrer.id, self.max_depth)

            level = next_level(level)
            current = upstream
            yield level, current

    async def get_upline(self, user_id: str) -> list[User]:
        """
        Get every ancestor of a user, nearest first.

        Args:
            user_id: User ID

        Returns:
            List of referrers; empty if user is missing or a root
        """
        user = await self.store.get_user_by_id(user_id)
        if user is None or not user.referred_by:
            return []

        direct_referrer = await self.store.get_user_by_referral_code(
            user.referred_by
        )
        if direct_referrer is None:
            return []

        return [ancestor async for _, ancestor in self.walk_from(direct_referrer)]
