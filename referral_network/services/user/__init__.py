"""
User service module.

Provides registration and authentication on top of the referral engine.

Structure:
- core.py: Shared collaborators, user lookups and the public user view
- registration.py: User registration with referral support
- authentication.py: Username/password verification
- crypto.py: bcrypt password hashing

Usage:
    from referral_network.services.user import UserRegistrationService

    user_service = UserRegistrationService(store)
    result = await user_service.register_user(username, email, password, code)
    result = await user_service.authenticate(username, password)
"""

from referral_network.services.user.authentication import UserAuthenticationMixin
from referral_network.services.user.core import UserServiceCore
from referral_network.services.user.registration import UserRegistrationMixin


class UserRegistrationService(
    UserServiceCore,
    UserRegistrationMixin,
    UserAuthenticationMixin,
):
    """
    Combined user service.

    Inherits from all user service mixins to provide complete functionality.
    """


__all__ = ["UserRegistrationService"]
