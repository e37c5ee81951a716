"""
User registration functionality.

Handles new user registration with referral support.
"""

from loguru import logger

from referral_network.config.settings import settings
from referral_network.models.user import User
from referral_network.services.base_service import ServiceResult
from referral_network.services.user.crypto import hash_password
from referral_network.utils.exceptions import (
    DuplicateUserError,
    InvalidReferralCodeError,
    RecordStoreError,
    RegistrationError,
)
from referral_network.utils.identifiers import (
    generate_referral_code,
    normalize_referral_code,
)
from referral_network.utils.validation import (
    validate_email,
    validate_password,
    validate_username,
)


class UserRegistrationMixin:
    """
    Mixin for user registration functionality.

    Expects store, id_generator, clock and referral_service attributes
    (see UserServiceCore).
    """

    async def register_user(
        self,
        username: str,
        email: str,
        password: str,
        referral_code: str | None = None,
    ) -> ServiceResult:
        """
        Register new user with referral support.

        Onboarding rewards are distributed after the user is committed. A
        reward failure is logged and does not undo the registration.

        Args:
            username: Username (stored lowercase)
            email: Email (stored lowercase)
            password: Plain text password (will be hashed with bcrypt)
            referral_code: Code of the referrer (optional, case-insensitive)

        Returns:
            ServiceResult with the created user as data, or the error
        """
        try:
            user = await self._create_user(
                username, email, password, referral_code=referral_code
            )
        except RegistrationError as e:
            logger.info(
                "Registration rejected",
                extra={"username": username, "error": str(e)},
            )
            return ServiceResult(
                success=False, error=str(e), error_code=e.error_code
            )
        except RecordStoreError as e:
            logger.warning(
                "Registration failed to persist",
                extra={"username": username, "error": str(e)},
            )
            return ServiceResult(
                success=False, error=str(e), error_code=e.error_code
            )

        if user.referred_by:
            result = await self.referral_service.process_new_referral(
                user.id, user.referred_by
            )
            if not result.success:
                logger.warning(
                    "Failed to process referral rewards",
                    extra={
                        "new_user_id": user.id,
                        "referral_code": user.referred_by,
                        "error": result.error,
                    },
                )

        logger.info(
            "User registered",
            extra={
                "user_id": user.id,
                "username": user.username,
                "has_referrer": user.referred_by is not None,
            },
        )

        return ServiceResult(success=True, data=user)

    async def create_admin_user(
        self, username: str, email: str, password: str
    ) -> User:
        """
        Create admin user (a root of the referral tree).

        Args:
            username: Username
            email: Email
            password: Plain text password

        Returns:
            Created admin user

        Raises:
            RegistrationError: If input is invalid or already taken
        """
        user = await self._create_user(username, email, password, is_admin=True)
        logger.info(
            "Admin user created",
            extra={"user_id": user.id, "username": user.username},
        )
        return user

    async def _create_user(
        self,
        username: str,
        email: str,
        password: str,
        referral_code: str | None = None,
        is_admin: bool = False,
    ) -> User:
        username = validate_username(username)
        email = validate_email(email)
        validate_password(password)

        # Check if already exists
        if await self.store.get_user_by_username(username):
            raise DuplicateUserError("Username already taken")
        if await self.store.get_user_by_email(email):
            raise DuplicateUserError("Email already registered")

        # Find referrer if provided
        referred_by = normalize_referral_code(referral_code)
        if referred_by is not None:
            referrer = await self.store.get_user_by_referral_code(referred_by)
            if referrer is None:
                raise InvalidReferralCodeError("Invalid referral code")

        # Generate unique referral code
        while True:
            own_code = generate_referral_code(settings.referral_code_length)
            exists = await self.store.get_user_by_referral_code(own_code)
            if not exists:
                break

        user = User(
            id=self.id_generator.new_id(),
            username=username,
            email=email,
            password_hash=hash_password(password),
            is_admin=is_admin,
            referral_code=own_code,
            referred_by=referred_by,
            created_at=self.clock(),
        )
        await self.store.add_user(user)
        await self.store.commit()

        return user
