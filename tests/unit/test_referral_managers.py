"""
Unit tests for referral managers with a mocked record store.

Tests cover:
- Upward chain walking and chain breaks
- Depth guard
- Award bookkeeping and vanished referrers
- Hard failures of reward processing
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from referral_network.models.levels import Level2, LevelNPlus
from referral_network.models.user import User
from referral_network.services.referral import (
    ReferralChainManager,
    ReferralEarningsManager,
    ReferralRewardProcessor,
)
from referral_network.utils.exceptions import (
    RecordStoreError,
    ReferralChainTooDeepError,
)
from referral_network.utils.identifiers import SequentialIdGenerator


def build_user(name: str, referred_by: str | None = None) -> User:
    """Transient user whose referral code is its uppercased name."""
    return User(
        id=name,
        username=name,
        email=f"{name}@example.com",
        referral_code=name.upper(),
        referred_by=referred_by,
    )


def wire_store(store, *users: User) -> None:
    """Make the mocked store resolve the given users."""
    by_id = {user.id: user for user in users}
    by_code = {user.referral_code: user for user in users}
    store.get_user_by_id.side_effect = by_id.get
    store.get_user_by_referral_code.side_effect = by_code.get


class TestChainManager:
    """Test upward chain traversal."""

    @pytest.mark.asyncio
    async def test_walk_yields_levels_in_order(self, mock_store):
        """Walk yields nearest ancestor first with increasing levels."""
        root = build_user("root")
        mid = build_user("mid", referred_by="ROOT")
        low = build_user("low", referred_by="MID")
        wire_store(mock_store, root, mid, low)
        manager = ReferralChainManager(mock_store, max_depth=100)

        walked = [
            (level.number, user.id) async for level, user in manager.walk_from(low)
        ]

        assert walked == [(1, "low"), (2, "mid"), (3, "root")]

    @pytest.mark.asyncio
    async def test_walk_stops_on_dangling_code(self, mock_store):
        """A code that does not resolve ends the walk silently."""
        orphan = build_user("orphan", referred_by="GONE")
        wire_store(mock_store, orphan)
        manager = ReferralChainManager(mock_store, max_depth=100)

        walked = [user.id async for _, user in manager.walk_from(orphan)]

        assert walked == ["orphan"]

    @pytest.mark.asyncio
    async def test_walk_depth_guard_on_cycle(self, mock_store):
        """A cycle trips the depth guard instead of looping forever."""
        a = build_user("a", referred_by="B")
        b = build_user("b", referred_by="A")
        wire_store(mock_store, a, b)
        manager = ReferralChainManager(mock_store, max_depth=5)

        seen = []
        with pytest.raises(ReferralChainTooDeepError):
            async for level, _ in manager.walk_from(a):
                seen.append(level.number)

        assert seen == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_dangling_code_at_max_depth(self, mock_store):
        """The guard only counts ancestors that actually resolve."""
        top = build_user("top", referred_by="GONE")
        low = build_user("low", referred_by="TOP")
        wire_store(mock_store, top, low)
        manager = ReferralChainManager(mock_store, max_depth=2)

        walked = [
            (level.number, user.id) async for level, user in manager.walk_from(low)
        ]

        assert walked == [(1, "low"), (2, "top")]

    @pytest.mark.asyncio
    async def test_upline_missing_user(self, mock_store):
        manager = ReferralChainManager(mock_store, max_depth=100)
        assert await manager.get_upline("nobody") == []


class TestEarningsManager:
    """Test award bookkeeping."""

    @pytest.fixture
    def manager(self, mock_store, clock):
        return ReferralEarningsManager(
            mock_store, SequentialIdGenerator(prefix="ref"), clock
        )

    @pytest.mark.asyncio
    async def test_award_credits_bucket_and_total(self, manager, mock_store):
        """Award increments the bucket, the total and writes a record."""
        referrer = build_user("referrer")
        wire_store(mock_store, referrer)

        referral = await manager.award_earnings(
            "referrer", "newbie", LevelNPlus(7), Decimal("20")
        )

        assert referral is not None
        assert referral.id == "ref_000001"
        assert referral.level == 7
        assert referral.earnings == Decimal("20")
        assert referrer.level4_plus_earnings == Decimal("20")
        assert referrer.total_earnings == Decimal("20")
        mock_store.update_user.assert_awaited_once_with(referrer)
        mock_store.add_referral.assert_awaited_once_with(referral)
        mock_store.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_award_accepts_level_number(self, manager, mock_store):
        referrer = build_user("referrer")
        wire_store(mock_store, referrer)

        await manager.award_earnings("referrer", "newbie", 2, Decimal("60"))

        assert referrer.level2_earnings == Decimal("60")

    @pytest.mark.asyncio
    async def test_award_to_vanished_referrer_is_skipped(
        self, manager, mock_store
    ):
        """Missing referrer: no record, no write, no error."""
        result = await manager.award_earnings(
            "ghost", "newbie", Level2(), Decimal("60")
        )

        assert result is None
        mock_store.update_user.assert_not_awaited()
        mock_store.add_referral.assert_not_awaited()
        mock_store.commit.assert_not_awaited()


class TestRewardProcessor:
    """Test onboarding reward processing failures."""

    @pytest.fixture
    def processor(self, mock_store, clock):
        return ReferralRewardProcessor(
            mock_store,
            ReferralChainManager(mock_store, max_depth=100),
            ReferralEarningsManager(
                mock_store, SequentialIdGenerator(prefix="ref"), clock
            ),
        )

    @pytest.mark.asyncio
    async def test_missing_new_user(self, processor, mock_store):
        result = await processor.process_new_referral("nobody", "ANY")

        assert result.success is False
        assert result.error == "User not found"
        mock_store.add_referral.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_referral_code(self, processor, mock_store):
        newbie = build_user("newbie", referred_by="NOPE")
        wire_store(mock_store, newbie)

        result = await processor.process_new_referral("newbie", "NOPE")

        assert result.success is False
        assert result.error == "Referrer not found"
        assert result.awards_count == 0

    @pytest.mark.asyncio
    async def test_store_failure_keeps_committed_awards(
        self, processor, mock_store
    ):
        """A write failure part way up reports failure; lower awards stand."""
        root = build_user("root")
        parent = build_user("parent", referred_by="ROOT")
        newbie = build_user("newbie", referred_by="PARENT")
        wire_store(mock_store, root, parent, newbie)
        mock_store.add_referral = AsyncMock(
            side_effect=[None, RecordStoreError("add_referral failed")]
        )

        result = await processor.process_new_referral("newbie", "PARENT")

        assert result.success is False
        assert result.awards_count == 1
        assert result.total_awarded == Decimal("100")
        assert parent.total_earnings == Decimal("100")
