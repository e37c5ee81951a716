"""
Identifier and referral code generation.

Record ids come from an IdGenerator capability instead of being derived from
wall-clock time, so tests can plug in a deterministic sequence.
"""

import itertools
import secrets
import uuid
from typing import Protocol

from referral_network.config.business_constants import REFERRAL_CODE_ALPHABET


class IdGenerator(Protocol):
    """Produces process-wide unique string identifiers."""

    def new_id(self) -> str:
        ...


class UuidIdGenerator:
    """Random 32-char hex identifiers (uuid4)."""

    def new_id(self) -> str:
        return uuid.uuid4().hex


class SequentialIdGenerator:
    """
    Monotonic identifiers: ``<prefix>_000001``, ``<prefix>_000002``, ...

    Deterministic, intended for tests and fixtures.
    """

    def __init__(self, prefix: str = "id", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self.prefix}_{next(self._counter):06d}"


def generate_referral_code(length: int = 8) -> str:
    """
    Generate a random referral code.

    Uniqueness is not guaranteed here; callers check the store and retry.

    Args:
        length: Number of characters

    Returns:
        Code made of uppercase letters and digits
    """
    return "".join(
        secrets.choice(REFERRAL_CODE_ALPHABET) for _ in range(length)
    )


def normalize_referral_code(code: str | None) -> str | None:
    """
    Normalize user-supplied referral code.

    Args:
        code: Raw code (may be None or blank)

    Returns:
        Stripped uppercase code, or None if blank
    """
    if code is None:
        return None
    code = code.strip()
    if not code:
        return None
    return code.upper()
