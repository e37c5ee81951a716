"""
Exception types.

Hard failures of the referral engine and the identity layer all derive from
ReferralError so callers can catch the whole family in one place.
"""


class ReferralError(Exception):
    """Base class for referral network errors."""

    error_code = "referral_error"


class UserNotFoundError(ReferralError):
    """Raised when the user being onboarded does not exist."""

    error_code = "user_not_found"


class ReferrerNotFoundError(ReferralError):
    """Raised when a referral code does not resolve to the level-1 referrer."""

    error_code = "referrer_not_found"


class ReferralChainTooDeepError(ReferralError):
    """
    Raised when a walk over the referral graph exceeds the configured depth.

    The referrer graph must be acyclic. Hitting the guard means the stored
    graph is corrupted (most likely a cycle), so the walk is aborted.
    """

    error_code = "chain_too_deep"

    def __init__(self, user_id: str, max_depth: int) -> None:
        self.user_id = user_id
        self.max_depth = max_depth
        super().__init__(
            f"Referral chain starting at user {user_id} exceeds "
            f"{max_depth} levels (cycle in referrer graph?)"
        )


class RecordStoreError(ReferralError):
    """Raised when the record store rejects a write."""

    error_code = "store_error"


class RegistrationError(ReferralError):
    """Base class for registration failures."""

    error_code = "registration_error"


class ValidationError(RegistrationError):
    """Raised when registration input is malformed."""

    error_code = "validation_error"


class DuplicateUserError(RegistrationError):
    """Raised when a username or email is already taken."""

    error_code = "duplicate_user"


class InvalidReferralCodeError(RegistrationError):
    """Raised when a registration referral code does not resolve."""

    error_code = "invalid_referral_code"


class AuthenticationError(ReferralError):
    """Raised when credentials do not match."""

    error_code = "authentication_failed"
