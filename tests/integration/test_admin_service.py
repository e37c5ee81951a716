"""Integration tests for AdminDataService."""

import pytest

pytestmark = pytest.mark.integration


class TestAdminDataService:
    """Tests for export, wipe and user removal."""

    @pytest.mark.asyncio
    async def test_export_data(self, admin_service, user_service):
        alice = (
            await user_service.register_user("alice", "a@example.com", "secret-pass")
        ).data
        await user_service.register_user(
            "bob", "b@example.com", "secret-pass", alice.referral_code
        )

        export = await admin_service.export_data()

        assert [user["username"] for user in export["users"]] == ["alice", "bob"]
        assert all("password_hash" not in user for user in export["users"])
        assert len(export["referrals"]) == 1
        assert export["referrals"][0]["referrer_id"] == alice.id
        assert export["exported_at"].startswith("2024-01-01T")

    @pytest.mark.asyncio
    async def test_clear_all_data(self, admin_service, user_service, store):
        alice = (
            await user_service.register_user("alice", "a@example.com", "secret-pass")
        ).data
        await user_service.register_user(
            "bob", "b@example.com", "secret-pass", alice.referral_code
        )

        await admin_service.clear_all_data()

        assert await store.get_all_users() == []
        assert await store.get_all_referrals() == []

    @pytest.mark.asyncio
    async def test_delete_user(self, admin_service, make_user, store):
        await make_user("alice", "AAAA")

        assert await admin_service.delete_user("u_alice") is True
        assert await store.get_user_by_id("u_alice") is None
        assert await admin_service.delete_user("u_alice") is False

    @pytest.mark.asyncio
    async def test_delete_user_keeps_downline_code(
        self, admin_service, make_user, store
    ):
        """Downline keeps the dangling referred_by code."""
        await make_user("alice", "AAAA")
        await make_user("bob", "BBBB", referred_by="AAAA")

        await admin_service.delete_user("u_alice")

        bob = await store.get_user_by_id("u_bob")
        assert bob.referred_by == "AAAA"
