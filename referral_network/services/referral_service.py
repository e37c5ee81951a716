"""
Referral service.

Single entry point for the referral engine: onboarding rewards, downline
trees, uplines and statistics.
"""

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from referral_network.config.settings import settings
from referral_network.models.levels import ReferralLevel
from referral_network.models.referral import Referral
from referral_network.models.user import User
from referral_network.repositories.record_store import RecordStore, SqlRecordStore
from referral_network.services.base_service import BaseService, log_operation
from referral_network.services.referral import (
    EarningsBreakdownEntry,
    ReferralChainManager,
    ReferralEarningsManager,
    ReferralQueryManager,
    ReferralResult,
    ReferralRewardProcessor,
    ReferralStatisticsManager,
    ReferralStats,
    ReferralTree,
    SystemStats,
)
from referral_network.utils.datetime_utils import Clock, utc_now
from referral_network.utils.identifiers import IdGenerator, UuidIdGenerator


class ReferralService(BaseService):
    """Referral service for managing referral chains and rewards."""

    def __init__(
        self,
        store: RecordStore,
        *,
        id_generator: IdGenerator | None = None,
        clock: Clock | None = None,
        max_chain_depth: int | None = None,
        top_earners_limit: int | None = None,
    ) -> None:
        """
        Initialize referral service.

        Args:
            store: Record store
            id_generator: Referral record id source (uuid4 by default)
            clock: Award timestamp source (UTC now by default)
            max_chain_depth: Depth guard (settings by default)
            top_earners_limit: Size of top earners list (settings by default)
        """
        super().__init__(store)
        if max_chain_depth is None:
            max_chain_depth = settings.referral_max_chain_depth
        if top_earners_limit is None:
            top_earners_limit = settings.top_earners_limit

        self.chain_manager = ReferralChainManager(store, max_chain_depth)
        self.earnings_manager = ReferralEarningsManager(
            store, id_generator or UuidIdGenerator(), clock or utc_now
        )
        self.query_manager = ReferralQueryManager(store, max_chain_depth)
        self.statistics_manager = ReferralStatisticsManager(
            store, self.query_manager, top_earners_limit
        )
        self.reward_processor = ReferralRewardProcessor(
            store, self.chain_manager, self.earnings_manager
        )

    @classmethod
    def from_session(cls, session: AsyncSession, **kwargs) -> "ReferralService":
        """Build a service over a SQL record store."""
        return cls(SqlRecordStore(session), **kwargs)

    @log_operation
    async def process_new_referral(
        self, new_user_id: str, referral_code: str
    ) -> ReferralResult:
        """
        Distribute onboarding rewards up the chain of a new user.

        Args:
            new_user_id: ID of the just-created user
            referral_code: Code of the level-1 referrer

        Returns:
            ReferralResult (failure carries the error message)
        """
        return await self.reward_processor.process_new_referral(
            new_user_id, referral_code
        )

    async def award_earnings(
        self,
        referrer_id: str,
        referred_user_id: str,
        level: ReferralLevel | int,
        amount: Decimal,
    ) -> Referral | None:
        """Credit one reward; silently skipped if the referrer is gone."""
        return await self.earnings_manager.award_earnings(
            referrer_id, referred_user_id, level, amount
        )

    async def get_direct_referrals(self, user_id: str) -> list[User]:
        return await self.query_manager.get_direct_referrals(user_id)

    async def build_referral_tree(self, user_id: str) -> ReferralTree | None:
        return await self.query_manager.build_referral_tree(user_id)

    async def get_referral_stats(self, user_id: str) -> ReferralStats:
        return await self.statistics_manager.get_referral_stats(user_id)

    async def get_upline(self, user_id: str) -> list[User]:
        """Ancestors of a user, nearest first."""
        return await self.chain_manager.get_upline(user_id)

    async def get_earnings_breakdown(
        self, user_id: str
    ) -> list[EarningsBreakdownEntry]:
        return await self.query_manager.get_earnings_breakdown(user_id)

    async def get_network_size(self, user_id: str) -> int:
        return await self.statistics_manager.get_network_size(user_id)

    @log_operation
    async def get_system_stats(self) -> SystemStats:
        return await self.statistics_manager.get_system_stats()
