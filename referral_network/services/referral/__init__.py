"""
Referral services package.

Contains modular services for referral processing:
- chain_manager: Upward referrer chain traversal
- earnings_manager: Reward crediting and attribution records
- referral_reward_processor: Onboarding reward distribution
- query_manager: Direct referrals, trees, earnings breakdown
- statistics: Per-user and platform-wide statistics
- types: Result and statistics value types
"""

from referral_network.services.referral.chain_manager import ReferralChainManager
from referral_network.services.referral.earnings_manager import (
    ReferralEarningsManager,
)
from referral_network.services.referral.query_manager import ReferralQueryManager
from referral_network.services.referral.referral_reward_processor import (
    ReferralRewardProcessor,
)
from referral_network.services.referral.statistics import (
    ReferralStatisticsManager,
)
from referral_network.services.referral.types import (
    EarningsBreakdownEntry,
    ReferralResult,
    ReferralStats,
    ReferralTree,
    SystemStats,
    TopEarner,
)


__all__ = [
    # Managers
    "ReferralChainManager",
    "ReferralEarningsManager",
    "ReferralQueryManager",
    "ReferralStatisticsManager",
    # Reward processing
    "ReferralRewardProcessor",
    # Types
    "EarningsBreakdownEntry",
    "ReferralResult",
    "ReferralStats",
    "ReferralTree",
    "SystemStats",
    "TopEarner",
]
