"""Tests for numbrle.core.validation – guess acceptance rules."""

from __future__ import annotations

import pytest

from numbrle.core.validation import (
    EQUATION_LENGTH,
    MAX_GUESSES,
    VALID_CHARS,
    Rejection,
    ValidationResult,
    validate_guess,
)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

class TestConstants:
    def test_lengths(self):
        assert EQUATION_LENGTH == 6
        assert MAX_GUESSES == 6

    def test_alphabet(self):
        assert VALID_CHARS == "0123456789+-×÷="


# ---------------------------------------------------------------------------
# Accepted guesses
# ---------------------------------------------------------------------------

class TestAccepted:
    @pytest.mark.parametrize(
        "guess, target",
        [
            ("6×7=42", 42),
            ("7×6=42", 42),
            ("042=42", 42),
            ("10÷2=5", 5),
            ("00+5=5", 5),
            ("2×7=14", 14),
        ],
    )
    def test_valid(self, guess, target):
        result = validate_guess(guess, target)
        assert result == ValidationResult(valid=True)
        assert result.reason is None


# ---------------------------------------------------------------------------
# Rejections, in the order they are checked
# ---------------------------------------------------------------------------

class TestRejections:
    def _rejection(self, guess: str, target: int) -> ValidationResult:
        result = validate_guess(guess, target)
        assert result.valid is False
        return result

    @pytest.mark.parametrize("guess", ["1+1=2", "", "6×7=042", "abcdefg"])
    def test_wrong_length(self, guess):
        result = self._rejection(guess, 2)
        assert result.rejection is Rejection.WRONG_LENGTH
        assert result.reason == "Equation must be 6 characters"

    def test_no_equals(self):
        result = self._rejection("6×7+42", 42)
        assert result.rejection is Rejection.EQUALS_COUNT
        assert result.reason == "Equation must contain exactly one ="

    def test_two_equals(self):
        result = self._rejection("6×7=4=", 42)
        assert result.rejection is Rejection.EQUALS_COUNT

    @pytest.mark.parametrize("guess", ["=6×742", "6×742="])
    def test_empty_side(self, guess):
        result = self._rejection(guess, 42)
        assert result.rejection is Rejection.EMPTY_SIDE
        assert result.reason == "Both sides of = must have values"

    def test_right_side_other_number(self):
        result = self._rejection("6×7=43", 42)
        assert result.rejection is Rejection.RIGHT_SIDE
        assert result.reason == "Right side must equal 42"

    def test_right_side_leading_zero(self):
        result = self._rejection("004=05", 5)
        assert result.rejection is Rejection.RIGHT_SIDE

    def test_right_side_checked_before_left(self):
        result = self._rejection("6×÷=43", 42)
        assert result.rejection is Rejection.RIGHT_SIDE

    @pytest.mark.parametrize("guess", ["6×÷=42", "5÷0=42", "-42=42", "6*7=42"])
    def test_invalid_expression(self, guess):
        result = self._rejection(guess, 42)
        assert result.rejection is Rejection.INVALID_EXPRESSION
        assert result.reason == "Invalid expression"

    def test_wrong_value(self):
        result = self._rejection("6+7=42", 42)
        assert result.rejection is Rejection.WRONG_VALUE
        assert result.reason == "Expression equals 13, not 42"

    def test_wrong_negative_value(self):
        result = self._rejection("1-9=42", 42)
        assert result.reason == "Expression equals -8, not 42"

    def test_every_rejection_is_distinct(self):
        reasons = {
            validate_guess("1+1=2", 2).reason,
            validate_guess("6×7+42", 42).reason,
            validate_guess("=6×742", 42).reason,
            validate_guess("6×7=43", 42).reason,
            validate_guess("6×÷=42", 42).reason,
            validate_guess("6+7=42", 42).reason,
        }
        assert len(reasons) == 6
