"""
User model.

A registered user and, at the same time, a node of the referral tree.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from referral_network.models.base import Base
from referral_network.models.levels import EarningsBucket
from referral_network.models.types import IdType, MoneyType, UtcDateTime
from referral_network.utils.datetime_utils import to_iso, utc_now


class User(Base):
    """
    User entity.

    Attributes:
        id: Primary key (from the id generator)
        username: Lowercase unique username
        email: Lowercase unique email
        password_hash: bcrypt hash
        referral_code: Own public referral code
        referred_by: Referral code of the direct referrer (None for roots)
        is_admin: Admin flag
        created_at: Registration time
        total_earnings: Sum of all referral rewards
        level1_earnings .. level4_plus_earnings: Per-level buckets
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "total_earnings >= 0", name="check_user_total_earnings_non_negative"
        ),
    )

    # Primary key
    id: Mapped[str] = mapped_column(IdType, primary_key=True)

    # Identity
    username: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(
        String(255), nullable=False, default=""
    )
    is_admin: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    # Referral
    referral_code: Mapped[str] = mapped_column(
        String(20), unique=True, index=True, nullable=False
    )
    # Not a foreign key: a deleted referrer leaves a dangling code behind
    referred_by: Mapped[str | None] = mapped_column(
        String(20), nullable=True, index=True
    )

    # Earnings
    total_earnings: Mapped[Decimal] = mapped_column(
        MoneyType, default=Decimal("0"), nullable=False
    )
    level1_earnings: Mapped[Decimal] = mapped_column(
        MoneyType, default=Decimal("0"), nullable=False
    )
    level2_earnings: Mapped[Decimal] = mapped_column(
        MoneyType, default=Decimal("0"), nullable=False
    )
    level3_earnings: Mapped[Decimal] = mapped_column(
        MoneyType, default=Decimal("0"), nullable=False
    )
    level4_plus_earnings: Mapped[Decimal] = mapped_column(
        MoneyType, default=Decimal("0"), nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        UtcDateTime, default=utc_now, nullable=False
    )

    def add_earnings(self, bucket: EarningsBucket, amount: Decimal) -> None:
        """
        Credit amount to the total and to one level bucket.

        Args:
            bucket: Bucket to credit
            amount: Reward amount
        """
        self.total_earnings = (self.total_earnings or Decimal("0")) + amount
        current = getattr(self, bucket.column) or Decimal("0")
        setattr(self, bucket.column, current + amount)

    @property
    def earnings_by_level(self) -> dict[str, Decimal]:
        """Per-bucket earnings keyed by bucket name."""
        return {
            bucket.value: getattr(self, bucket.column) or Decimal("0")
            for bucket in EarningsBucket
        }

    def to_public_dict(self) -> dict:
        """User data without the password hash."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "referral_code": self.referral_code,
            "referred_by": self.referred_by,
            "is_admin": self.is_admin,
            "created_at": to_iso(self.created_at),
            "total_earnings": self.total_earnings,
            "earnings_by_level": self.earnings_by_level,
        }

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<User(id={self.id}, username={self.username!r}, "
            f"referral_code={self.referral_code!r})>"
        )
