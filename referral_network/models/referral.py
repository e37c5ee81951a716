"""
Referral model.

Immutable attribution event: one row per (referrer, new user, level),
written when the new user is onboarded and never updated afterwards.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from referral_network.models.base import Base
from referral_network.models.types import IdType, MoneyType, UtcDateTime
from referral_network.utils.datetime_utils import to_iso, utc_now


class Referral(Base):
    """
    Referral attribution record.

    Attributes:
        id: Primary key (from the id generator)
        referrer_id: User who earned the reward
        referred_id: Newly onboarded user
        level: Distance from referred user up to referrer (1 = direct)
        earnings: Reward amount
        created_at: Award time
    """

    __tablename__ = "referrals"
    __table_args__ = (
        Index("idx_referrals_referrer_created", "referrer_id", "created_at"),
    )

    id: Mapped[str] = mapped_column(IdType, primary_key=True)

    # Plain ids, not foreign keys: records outlive deleted users
    referrer_id: Mapped[str] = mapped_column(IdType, nullable=False, index=True)
    referred_id: Mapped[str] = mapped_column(IdType, nullable=False, index=True)

    level: Mapped[int] = mapped_column(Integer, nullable=False)
    earnings: Mapped[Decimal] = mapped_column(MoneyType, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        UtcDateTime, default=utc_now, nullable=False
    )

    def to_dict(self) -> dict:
        """Plain dict view for exports."""
        return {
            "id": self.id,
            "referrer_id": self.referrer_id,
            "referred_id": self.referred_id,
            "level": self.level,
            "earnings": self.earnings,
            "created_at": to_iso(self.created_at),
        }

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<Referral(id={self.id}, referrer_id={self.referrer_id}, "
            f"referred_id={self.referred_id}, level={self.level})>"
        )
