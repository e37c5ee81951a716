"""Unit tests for registration input validation."""

import pytest

from referral_network.utils.exceptions import ValidationError
from referral_network.utils.validation import (
    validate_email,
    validate_password,
    validate_username,
)


class TestUsernameValidation:
    """Tests for username validation."""

    def test_username_lowercased(self):
        assert validate_username("  Alice ") == "alice"

    @pytest.mark.parametrize("username", ["", "ab", None, "  a  "])
    def test_short_username_invalid(self, username):
        """Usernames under three characters are rejected."""
        with pytest.raises(ValidationError):
            validate_username(username)

    def test_custom_min_length(self):
        with pytest.raises(ValidationError):
            validate_username("alice", min_length=6)


class TestEmailValidation:
    """Tests for email validation."""

    def test_email_lowercased(self):
        assert validate_email("Alice@Example.COM") == "alice@example.com"

    @pytest.mark.parametrize(
        "email", ["", None, "alice", "@example.com", "alice@"]
    )
    def test_malformed_email_invalid(self, email):
        with pytest.raises(ValidationError):
            validate_email(email)


class TestPasswordValidation:
    """Tests for password validation."""

    def test_valid_password_unchanged(self):
        assert validate_password("secret1") == "secret1"

    @pytest.mark.parametrize("password", ["", None, "12345"])
    def test_short_password_invalid(self, password):
        """Passwords under six characters are rejected."""
        with pytest.raises(ValidationError):
            validate_password(password)

    def test_validation_error_is_registration_error(self):
        """Validation failures belong to the registration error family."""
        from referral_network.utils.exceptions import RegistrationError

        with pytest.raises(RegistrationError):
            validate_password("x")
