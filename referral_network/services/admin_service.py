"""
Admin data service.

Administrative data operations that sit outside the referral engine:
full export, wipe and single user removal.
"""

from typing import Any

from referral_network.repositories.record_store import RecordStore
from referral_network.services.base_service import BaseService, log_operation
from referral_network.utils.datetime_utils import Clock, to_iso, utc_now


class AdminDataService(BaseService):
    """Admin service for bulk data operations."""

    def __init__(self, store: RecordStore, clock: Clock | None = None) -> None:
        """
        Initialize admin data service.

        Args:
            store: Record store
            clock: Export timestamp source (UTC now by default)
        """
        super().__init__(store)
        self.clock = clock or utc_now

    @log_operation
    async def export_data(self) -> dict[str, Any]:
        """
        Export every user and referral record.

        Returns:
            Dict with users (no password hashes), referrals and exported_at
        """
        users = await self.store.get_all_users()
        referrals = await self.store.get_all_referrals()

        return {
            "users": [user.to_public_dict() for user in users],
            "referrals": [referral.to_dict() for referral in referrals],
            "exported_at": to_iso(self.clock()),
        }

    @log_operation
    async def clear_all_data(self) -> None:
        """Delete every referral record and every user."""
        await self.store.clear_all()
        await self.store.commit()
        self.logger.warning("All referral network data cleared")

    async def delete_user(self, user_id: str) -> bool:
        """
        Delete a single user.

        Referral records and the referred_by codes of the user's downline are
        left in place.

        Args:
            user_id: User ID

        Returns:
            True if deleted, False if not found
        """
        deleted = await self.store.delete_user(user_id)
        if deleted:
            await self.store.commit()
            self.logger.info("User deleted", extra={"user_id": user_id})
        return deleted
