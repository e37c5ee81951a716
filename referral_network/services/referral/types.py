"""
Referral engine value types.

Plain dataclasses returned by the referral managers.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from referral_network.models.levels import EarningsBucket
from referral_network.models.user import User
from referral_network.utils.datetime_utils import to_iso


@dataclass
class ReferralResult:
    """Result of onboarding a referred user."""

    success: bool
    error: str | None = None
    awards_count: int = 0
    total_awarded: Decimal = Decimal("0")


@dataclass
class ReferralTree:
    """
    Referral tree node.

    Derived from User records on every request; never persisted or cached.
    """

    user: User
    children: list["ReferralTree"] = field(default_factory=list)

    def iter_descendants(self) -> Iterator[tuple["ReferralTree", int]]:
        """
        Walk the subtree depth-first, excluding this node.

        Yields:
            (node, depth) pairs where direct children have depth 1
        """
        stack = [(child, 1) for child in reversed(self.children)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            stack.extend((child, depth + 1) for child in reversed(node.children))

    def to_dict(self) -> dict:
        """Nested dict view of the tree."""
        return {
            "user": self.user.to_public_dict(),
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class ReferralStats:
    """Downline statistics for one user."""

    direct_referrals: int = 0
    total_referrals: int = 0
    levels: dict[int, int] = field(default_factory=dict)


@dataclass
class EarningsBreakdownEntry:
    """One award received by a referrer, joined to the referred user."""

    referred_user: User | None
    level: int
    earnings: Decimal
    date: datetime

    def to_dict(self) -> dict:
        return {
            "referred_user": (
                self.referred_user.to_public_dict() if self.referred_user else None
            ),
            "level": self.level,
            "earnings": self.earnings,
            "date": to_iso(self.date),
        }


@dataclass
class TopEarner:
    username: str
    total_earnings: Decimal
    referral_code: str


@dataclass
class SystemStats:
    """Platform-wide aggregate."""

    total_users: int
    total_referrals: int
    total_earnings: Decimal
    earnings_by_level: dict[str, Decimal]
    top_earners: list[TopEarner]

    @staticmethod
    def empty_buckets() -> dict[str, Decimal]:
        return {bucket.value: Decimal("0") for bucket in EarningsBucket}
