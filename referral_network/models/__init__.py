"""
Database models.

Exports all SQLAlchemy models for easy imports.
"""

from referral_network.models.base import Base
from referral_network.models.levels import (
    EarningsBucket,
    Level1,
    Level2,
    Level3,
    LevelNPlus,
    ReferralLevel,
)
from referral_network.models.referral import Referral
from referral_network.models.user import User

__all__ = [
    # Base
    "Base",
    # Levels
    "EarningsBucket",
    "Level1",
    "Level2",
    "Level3",
    "LevelNPlus",
    "ReferralLevel",
    # Models
    "User",
    "Referral",
]
