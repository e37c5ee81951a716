"""
Script to create an admin user.

Usage:
    python scripts/create_admin.py <username> <email> <password>

Example:
    python scripts/create_admin.py admin admin@example.com s3cret-pass

Note:
    The admin is a root of the referral tree; its referral code is printed
    once created.
"""

import asyncio
import sys

from loguru import logger

from referral_network.database import create_engine, create_session_maker, init_database
from referral_network.initialization.logging import setup_logging
from referral_network.repositories.record_store import SqlRecordStore
from referral_network.services.user import UserRegistrationService
from referral_network.utils.exceptions import RegistrationError

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def create_admin(username: str, email: str, password: str) -> None:
    """
    Create admin user.

    Args:
        username: Admin username
        email: Admin email
        password: Admin password
    """
    setup_logging()
    engine = create_engine()
    await init_database(engine)
    session_maker = create_session_maker(engine)

    async with session_maker() as session:
        user_service = UserRegistrationService(SqlRecordStore(session))
        try:
            admin = await user_service.create_admin_user(username, email, password)
        except RegistrationError as e:
            logger.error(f"Admin not created: {e}")
            await engine.dispose()
            sys.exit(1)

        logger.success(
            f"Admin created: ID={admin.id}, Username={admin.username}, "
            f"Referral code={admin.referral_code}"
        )

    await engine.dispose()


if __name__ == "__main__":
    if len(sys.argv) < 4:
        logger.error("Usage: python scripts/create_admin.py <username> <email> <password>")
        sys.exit(1)

    asyncio.run(create_admin(sys.argv[1], sys.argv[2], sys.argv[3]))
