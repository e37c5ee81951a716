"""
Core user service functionality.

Holds the collaborators shared by the registration and authentication mixins
and the basic user lookups.
"""

from referral_network.models.user import User
from referral_network.repositories.record_store import RecordStore
from referral_network.services.base_service import BaseService
from referral_network.services.referral_service import ReferralService
from referral_network.utils.datetime_utils import Clock, utc_now
from referral_network.utils.identifiers import IdGenerator, UuidIdGenerator


class UserServiceCore(BaseService):
    """
    Core user service.

    Provides basic user retrieval and the public user view.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        id_generator: IdGenerator | None = None,
        clock: Clock | None = None,
        referral_service: ReferralService | None = None,
    ) -> None:
        """
        Initialize user service core.

        Args:
            store: Record store
            id_generator: User id source (uuid4 by default)
            clock: Registration timestamp source (UTC now by default)
            referral_service: Engine used for onboarding rewards (built over
                the same store by default)
        """
        super().__init__(store)
        self.id_generator = id_generator or UuidIdGenerator()
        self.clock = clock or utc_now
        self.referral_service = referral_service or ReferralService(
            store, clock=self.clock
        )

    async def get_by_id(self, user_id: str) -> User | None:
        return await self.store.get_user_by_id(user_id)

    async def get_by_username(self, username: str) -> User | None:
        """Lookup by username (case-insensitive)."""
        return await self.store.get_user_by_username(username.strip().lower())

    @staticmethod
    def sanitize_user(user: User) -> dict:
        """
        Public view of a user.

        Args:
            user: User entity

        Returns:
            User data without the password hash
        """
        return user.to_public_dict()
