"""Multi-level referral tracking and earnings distribution."""

__version__ = "0.1.0"
