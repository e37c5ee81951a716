#!/usr/bin/env python3
"""Initialize database tables."""

import asyncio
import sys

from loguru import logger

from referral_network.config.settings import settings
from referral_network.database import create_engine, init_database
from referral_network.initialization.logging import setup_logging

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def main() -> None:
    """Create all database tables."""
    setup_logging()
    logger.info("Connecting to database...")
    engine = create_engine(settings.database_url)

    logger.info("Creating tables (checkfirst=True)...")
    await init_database(engine)

    await engine.dispose()
    logger.success("Database tables created successfully!")


if __name__ == "__main__":
    asyncio.run(main())
