"""Unit tests for registration with a mocked record store."""

from unittest.mock import AsyncMock

import pytest

from referral_network.services.user import UserRegistrationService
from referral_network.utils.exceptions import RecordStoreError
from referral_network.utils.identifiers import SequentialIdGenerator


@pytest.fixture
def registration_store(mock_store):
    """Store with no existing users."""
    mock_store.get_user_by_username = AsyncMock(return_value=None)
    mock_store.get_user_by_email = AsyncMock(return_value=None)
    return mock_store


@pytest.fixture
def service(registration_store, clock):
    return UserRegistrationService(
        registration_store,
        id_generator=SequentialIdGenerator(prefix="user"),
        clock=clock,
        referral_service=AsyncMock(),
    )


class TestRegistrationStoreFailures:
    """Store rejections come back as failed results."""

    @pytest.mark.asyncio
    async def test_add_user_rejected(self, service, registration_store):
        """A unique constraint hit on insert is reported, not raised."""
        registration_store.add_user = AsyncMock(
            side_effect=RecordStoreError("add_user failed: UNIQUE constraint")
        )

        result = await service.register_user("alice", "a@example.com", "secret-pass")

        assert result.success is False
        assert result.error_code == RecordStoreError.error_code
        assert "UNIQUE" in result.error
        service.referral_service.process_new_referral.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_commit_rejected(self, service, registration_store):
        registration_store.add_user = AsyncMock(side_effect=lambda user: user)
        registration_store.commit = AsyncMock(
            side_effect=RecordStoreError("Commit failed")
        )

        result = await service.register_user("alice", "a@example.com", "secret-pass")

        assert result.success is False
        assert result.error == "Commit failed"
        assert result.error_code == "store_error"
