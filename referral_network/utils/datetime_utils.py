"""
Datetime utilities.

Provides timezone-aware datetime functions.
"""

from collections.abc import Callable
from datetime import UTC, datetime

# Anything returning "now"; injected where timestamps must be testable
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """
    Get current UTC datetime with timezone info.

    Returns:
        Current datetime in UTC with timezone awareness
    """
    return datetime.now(UTC)


def to_iso(value: datetime | None) -> str | None:
    """
    Format datetime as ISO 8601 string.

    Args:
        value: Datetime or None

    Returns:
        ISO string or None
    """
    if value is None:
        return None
    return value.isoformat()
