"""
Standard type definitions for database models.

Provides consistent types for monetary and identifier fields across all models.
"""

from datetime import UTC, datetime

from sqlalchemy import DECIMAL, DateTime, String
from sqlalchemy.types import TypeDecorator

# Standard money type for earnings and rewards
# Precision: 18 digits total, 8 after decimal point
# Range: up to 9,999,999,999.99999999
MoneyType = DECIMAL(18, 8)

# Identifier column type; wide enough for uuid4 hex and prefixed sequences
IdType = String(64)


class UtcDateTime(TypeDecorator):
    """
    Timezone-aware UTC datetime.

    SQLite drops the offset on storage; values loaded back without tzinfo
    are marked as UTC so they compare with the ones still held in memory.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
