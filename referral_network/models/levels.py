"""
Referral attribution levels.

A level is the distance from a newly onboarded user up to one of its
ancestors (1 = direct referrer). Levels form a closed set of variants:

    Level1 | Level2 | Level3 | LevelNPlus(n)   (n >= 4)

Every variant carries the earnings bucket it credits, and the reward table is
keyed by bucket, so reward lookup and bucket increment never fall through to
an "unknown level" branch.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Union

from referral_network.config.business_constants import (
    FLAT_REWARD_START_LEVEL,
    REWARD_LEVEL_1,
    REWARD_LEVEL_2,
    REWARD_LEVEL_3,
    REWARD_LEVEL_4_PLUS,
)


class EarningsBucket(str, Enum):
    """Per-user earnings bucket."""

    LEVEL1 = "level1"
    LEVEL2 = "level2"
    LEVEL3 = "level3"
    LEVEL4_PLUS = "level4_plus"

    @property
    def column(self) -> str:
        """Name of the User column backing this bucket."""
        return f"{self.value}_earnings"


REFERRAL_REWARDS: dict[EarningsBucket, Decimal] = {
    EarningsBucket.LEVEL1: REWARD_LEVEL_1,
    EarningsBucket.LEVEL2: REWARD_LEVEL_2,
    EarningsBucket.LEVEL3: REWARD_LEVEL_3,
    EarningsBucket.LEVEL4_PLUS: REWARD_LEVEL_4_PLUS,
}


@dataclass(frozen=True)
class Level1:
    """Direct referrer."""

    number: ClassVar[int] = 1
    bucket: ClassVar[EarningsBucket] = EarningsBucket.LEVEL1


@dataclass(frozen=True)
class Level2:
    """Referrer of the direct referrer."""

    number: ClassVar[int] = 2
    bucket: ClassVar[EarningsBucket] = EarningsBucket.LEVEL2


@dataclass(frozen=True)
class Level3:
    number: ClassVar[int] = 3
    bucket: ClassVar[EarningsBucket] = EarningsBucket.LEVEL3


@dataclass(frozen=True)
class LevelNPlus:
    """Any ancestor at level 4 or beyond; all share the flat bucket."""

    number: int
    bucket: ClassVar[EarningsBucket] = EarningsBucket.LEVEL4_PLUS

    def __post_init__(self) -> None:
        if self.number < FLAT_REWARD_START_LEVEL:
            raise ValueError(
                f"LevelNPlus requires level >= {FLAT_REWARD_START_LEVEL}, "
                f"got {self.number}"
            )


ReferralLevel = Union[Level1, Level2, Level3, LevelNPlus]

_FIXED_LEVELS: dict[int, ReferralLevel] = {
    1: Level1(),
    2: Level2(),
    3: Level3(),
}


def level_for(number: int) -> ReferralLevel:
    """
    Map a level number to its variant.

    Args:
        number: Level number (>= 1)

    Returns:
        Matching ReferralLevel

    Raises:
        ValueError: If number < 1
    """
    if number < 1:
        raise ValueError(f"Referral level must be >= 1, got {number}")
    fixed = _FIXED_LEVELS.get(number)
    if fixed is not None:
        return fixed
    return LevelNPlus(number)


def next_level(level: ReferralLevel) -> ReferralLevel:
    """Level of the next ancestor up the chain."""
    return level_for(level.number + 1)


def reward_for(level: ReferralLevel) -> Decimal:
    """
    Reward paid to an ancestor at the given level.

    Args:
        level: Attribution level

    Returns:
        Fixed reward amount
    """
    return REFERRAL_REWARDS[level.bucket]
