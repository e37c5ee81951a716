"""
Record store.

The referral engine talks to persistence only through the RecordStore
protocol. Lookups return None (or an empty list) when a key is absent;
writes raise RecordStoreError when the backend rejects them.
"""

from typing import Protocol

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from referral_network.models.referral import Referral
from referral_network.models.user import User
from referral_network.repositories.referral_repository import ReferralRepository
from referral_network.repositories.user_repository import UserRepository
from referral_network.utils.exceptions import RecordStoreError


class RecordStore(Protocol):
    """Persistence operations consumed by the referral engine."""

    async def get_user_by_id(self, user_id: str) -> User | None: ...

    async def get_user_by_referral_code(self, code: str) -> User | None: ...

    async def get_user_by_username(self, username: str) -> User | None: ...

    async def get_user_by_email(self, email: str) -> User | None: ...

    async def get_users_referred_by(self, code: str) -> list[User]: ...

    async def get_all_users(self) -> list[User]: ...

    async def add_user(self, user: User) -> User: ...

    async def update_user(self, user: User) -> User: ...

    async def delete_user(self, user_id: str) -> bool: ...

    async def add_referral(self, referral: Referral) -> Referral: ...

    async def get_referrals_by_referrer_id(
        self, referrer_id: str
    ) -> list[Referral]: ...

    async def get_all_referrals(self) -> list[Referral]: ...

    async def clear_all(self) -> None: ...

    async def commit(self) -> None: ...


class SqlRecordStore:
    """RecordStore backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize SQL record store.

        Args:
            session: Async database session
        """
        self.session = session
        self.user_repo = UserRepository(session)
        self.referral_repo = ReferralRepository(session)

    # Users

    async def get_user_by_id(self, user_id: str) -> User | None:
        return await self.user_repo.get_by_id(user_id)

    async def get_user_by_referral_code(self, code: str) -> User | None:
        return await self.user_repo.get_by_referral_code(code)

    async def get_user_by_username(self, username: str) -> User | None:
        return await self.user_repo.get_by_username(username)

    async def get_user_by_email(self, email: str) -> User | None:
        return await self.user_repo.get_by_email(email)

    async def get_users_referred_by(self, code: str) -> list[User]:
        return await self.user_repo.get_referred_by(code)

    async def get_all_users(self) -> list[User]:
        return await self.user_repo.get_all()

    async def add_user(self, user: User) -> User:
        return await self._write(self.user_repo.add(user), "add_user")

    async def update_user(self, user: User) -> User:
        return await self._write(self.user_repo.save(user), "update_user")

    async def delete_user(self, user_id: str) -> bool:
        return await self._write(self.user_repo.delete(user_id), "delete_user")

    # Referrals

    async def add_referral(self, referral: Referral) -> Referral:
        return await self._write(
            self.referral_repo.add(referral), "add_referral"
        )

    async def get_referrals_by_referrer_id(
        self, referrer_id: str
    ) -> list[Referral]:
        return await self.referral_repo.get_by_referrer(referrer_id)

    async def get_all_referrals(self) -> list[Referral]:
        return await self.referral_repo.get_all()

    # Maintenance

    async def clear_all(self) -> None:
        """Delete every referral record, then every user."""
        await self._write(self.referral_repo.delete_all(), "clear_referrals")
        await self._write(self.user_repo.delete_all(), "clear_users")
        # Bulk deletes bypass the identity map
        self.session.expunge_all()

    async def commit(self) -> None:
        """
        Commit current transaction.

        Raises:
            RecordStoreError: If the database rejects the commit
        """
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                "Record store commit failed",
                extra={"error": str(e)},
            )
            raise RecordStoreError(f"Commit failed: {e}") from e

    async def _write(self, operation, name: str):
        """Await a repository write, translating database errors."""
        try:
            return await operation
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"Record store write failed: {name}",
                extra={"operation": name, "error": str(e)},
            )
            raise RecordStoreError(f"{name} failed: {e}") from e
