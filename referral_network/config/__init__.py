"""Configuration package."""

from referral_network.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
