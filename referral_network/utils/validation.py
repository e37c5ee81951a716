"""Registration input validation."""

from referral_network.config.settings import settings
from referral_network.utils.exceptions import ValidationError


def validate_username(username: str | None, min_length: int | None = None) -> str:
    """
    Validate and normalize username.

    Args:
        username: Raw username
        min_length: Minimum length (defaults to settings)

    Returns:
        Lowercased username

    Raises:
        ValidationError: If username is too short
    """
    if min_length is None:
        min_length = settings.username_min_length
    if not username or len(username.strip()) < min_length:
        raise ValidationError(
            f"Username must be at least {min_length} characters"
        )
    return username.strip().lower()


def validate_email(email: str | None) -> str:
    """
    Validate and normalize email address.

    Only a minimal shape check is done: a local part, "@" and a domain.

    Args:
        email: Raw email

    Returns:
        Lowercased email

    Raises:
        ValidationError: If email is malformed
    """
    if not email:
        raise ValidationError("Invalid email address")
    email = email.strip()
    local, sep, domain = email.partition("@")
    if not sep or not local or not domain:
        raise ValidationError("Invalid email address")
    return email.lower()


def validate_password(password: str | None, min_length: int | None = None) -> str:
    """
    Validate password length.

    Args:
        password: Plain text password
        min_length: Minimum length (defaults to settings)

    Returns:
        The password unchanged

    Raises:
        ValidationError: If password is too short
    """
    if min_length is None:
        min_length = settings.password_min_length
    if not password or len(password) < min_length:
        raise ValidationError(
            f"Password must be at least {min_length} characters"
        )
    return password
