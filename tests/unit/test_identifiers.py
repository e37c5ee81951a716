"""Unit tests for identifier and referral code helpers."""

import pytest

from referral_network.config.business_constants import REFERRAL_CODE_ALPHABET
from referral_network.utils.identifiers import (
    SequentialIdGenerator,
    UuidIdGenerator,
    generate_referral_code,
    normalize_referral_code,
)


class TestIdGenerators:
    """Tests for id generators."""

    def test_sequential_ids(self):
        """Sequential generator is deterministic and monotonic."""
        generator = SequentialIdGenerator(prefix="ref")
        assert generator.new_id() == "ref_000001"
        assert generator.new_id() == "ref_000002"

    def test_sequential_start(self):
        generator = SequentialIdGenerator(prefix="u", start=42)
        assert generator.new_id() == "u_000042"

    def test_uuid_ids_unique(self):
        """Random ids do not repeat."""
        generator = UuidIdGenerator()
        ids = {generator.new_id() for _ in range(100)}
        assert len(ids) == 100


class TestReferralCodes:
    """Tests for referral code generation and normalization."""

    def test_generated_code_format(self):
        code = generate_referral_code(8)
        assert len(code) == 8
        assert all(char in REFERRAL_CODE_ALPHABET for char in code)

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("abc123", "ABC123"),
            ("  XyZ9  ", "XYZ9"),
            ("", None),
            ("   ", None),
            (None, None),
        ],
    )
    def test_normalize(self, raw, expected):
        """Codes are stripped and uppercased; blanks mean no code."""
        assert normalize_referral_code(raw) == expected
