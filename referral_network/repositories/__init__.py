"""Data access layer."""

from referral_network.repositories.record_store import RecordStore, SqlRecordStore
from referral_network.repositories.referral_repository import ReferralRepository
from referral_network.repositories.user_repository import UserRepository

__all__ = [
    "RecordStore",
    "SqlRecordStore",
    "ReferralRepository",
    "UserRepository",
]
