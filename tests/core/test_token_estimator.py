"""
Test suite for token estimation.

System role: Verification of attribution routing input estimates
"""

from backend.core.attribution.token_estimator import CHARS_PER_TOKEN, estimate_tokens


class TestEstimateTokens:
    """Test suite for estimate_tokens()."""

    def test_empty_text_should_be_zero_tokens(self) -> None:
        """Test empty string estimates to zero."""
        assert estimate_tokens("") == 0

    def test_estimate_should_round_up(self) -> None:
        """Test partial tokens round up (7 chars / 3.5 = 2, 8 chars -> 3)."""
        assert estimate_tokens("a" * 7) == 2
        assert estimate_tokens("a" * 8) == 3
        assert estimate_tokens("a") == 1

    def test_default_ratio_should_be_clinical_prose_calibration(self) -> None:
        """Test default ratio is 3.5 characters per token."""
        assert CHARS_PER_TOKEN == 3.5
        assert estimate_tokens("x" * 3500) == 1000

    def test_custom_ratio_should_be_respected(self) -> None:
        """Test explicit ratio overrides the default."""
        assert estimate_tokens("x" * 40, chars_per_token=4.0) == 10
