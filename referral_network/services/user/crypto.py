"""
User Service - Password Hashing.

This module provides utilities for:
- Password hashing
- Password verification
"""

import bcrypt

from referral_network.config.settings import settings


def hash_password(password: str) -> str:
    """
    Hash password using bcrypt.

    Args:
        password: Plain password

    Returns:
        Hashed password
    """
    return bcrypt.hashpw(
        password.encode(), bcrypt.gensalt(rounds=settings.password_hash_rounds)
    ).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify password against hash.

    Args:
        plain_password: Plain password
        hashed_password: Hashed password (empty never matches)

    Returns:
        True if match
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode(), hashed_password.encode()
        )
    except ValueError:
        # Malformed stored hash
        return False
