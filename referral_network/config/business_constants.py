"""
Business constants.

Single source of truth for the referral reward table and referral code format.
"""

import string
from decimal import Decimal

# Fixed reward per attribution level.
# Levels 4 and beyond all receive the flat LEVEL_4_PLUS amount.
REWARD_LEVEL_1 = Decimal("100")
REWARD_LEVEL_2 = Decimal("60")
REWARD_LEVEL_3 = Decimal("40")
REWARD_LEVEL_4_PLUS = Decimal("20")

# First level number that falls into the flat bucket
FLAT_REWARD_START_LEVEL = 4

# Referral codes: uppercase letters and digits
REFERRAL_CODE_ALPHABET = string.ascii_uppercase + string.digits
