"""
Tests for schema.py - numeric input checks.
"""

import math

import pytest

from payroll_desk.schema import (
    BASE_PAY_NEGATIVE,
    BONUS_RATE_OUT_OF_RANGE,
    parse_amount,
    validate_base_pay,
    validate_bonus_job,
    validate_bonus_rate,
)


class TestValidateBasePay:
    """Base pay must be a finite, non-negative number."""

    @pytest.mark.parametrize("value", [0, 0.0, 1, 99999.99])
    def test_valid(self, value):
        assert validate_base_pay(value) == []

    def test_negative(self):
        assert validate_base_pay(-1) == [BASE_PAY_NEGATIVE]

    @pytest.mark.parametrize("value", ["100", None, True, [100]])
    def test_not_a_number(self, value):
        errors = validate_base_pay(value)
        assert len(errors) == 1
        assert "must be a number" in errors[0]

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_not_finite(self, value):
        assert validate_base_pay(value) == ["Base pay must be a finite number"]


class TestValidateBonusRate:
    """Bonus rate is a percentage in [0, 100]."""

    @pytest.mark.parametrize("value", [0, 0.5, 50, 100])
    def test_valid(self, value):
        assert validate_bonus_rate(value) == []

    @pytest.mark.parametrize("value", [-0.1, 100.1, 250])
    def test_out_of_range(self, value):
        assert validate_bonus_rate(value) == [BONUS_RATE_OUT_OF_RANGE]

    def test_nan(self):
        assert validate_bonus_rate(math.nan) == ["Bonus rate must be a finite number"]

    def test_combined(self):
        assert validate_bonus_job(100, 10) == []
        assert validate_bonus_job(-1, 101) == [BASE_PAY_NEGATIVE, BONUS_RATE_OUT_OF_RANGE]


class TestParseAmount:
    """Prompt text to float."""

    @pytest.mark.parametrize(
        "text,expected",
        [("100", 100.0), (" 12.5 \n", 12.5), ("1500,75", 1500.75), ("-5", -5.0), ("0", 0.0)],
    )
    def test_numbers(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3", "10%"])
    def test_rejects_garbage(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)

    def test_range_not_checked(self):
        """Negative values parse; validation happens in the model."""
        assert validate_base_pay(parse_amount("-5")) == [BASE_PAY_NEGATIVE]
