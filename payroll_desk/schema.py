import math
from typing import Any, List

MIN_BASE_PAY = 0.0
MIN_BONUS_RATE = 0.0
MAX_BONUS_RATE = 100.0

BASE_PAY_NEGATIVE = "Base pay cannot be negative."
BONUS_RATE_OUT_OF_RANGE = "Invalid bonus rate. Enter a value from 0 to 100."


def _is_number(v: Any) -> bool:
    # bool is an int subclass, but True is not a salary
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_finite_number(v: Any) -> bool:
    return _is_number(v) and math.isfinite(v)


def validate_base_pay(value: Any) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    if not _is_number(value):
        return ["Base pay must be a number"]
    if not _is_finite_number(value):
        return ["Base pay must be a finite number"]
    if value < MIN_BASE_PAY:
        return [BASE_PAY_NEGATIVE]
    return []


def validate_bonus_rate(value: Any) -> List[str]:
    """
    Bonus rate is a percentage in [0, 100], inclusive at both ends.
    """
    if not _is_number(value):
        return ["Bonus rate must be a number"]
    if not _is_finite_number(value):
        return ["Bonus rate must be a finite number"]
    if value < MIN_BONUS_RATE or value > MAX_BONUS_RATE:
        return [BONUS_RATE_OUT_OF_RANGE]
    return []


def validate_bonus_job(base_pay: Any, bonus_rate: Any) -> List[str]:
    errors: List[str] = []
    errors.extend(validate_base_pay(base_pay))
    errors.extend(validate_bonus_rate(bonus_rate))
    return errors


def parse_amount(text: str) -> float:
    """
    Parse a number typed at a prompt.

    Accepts a decimal comma ("1500,50") as well as a point. Raises
    ValueError for anything that is not a number; range checks are left
    to the validate_* functions.
    """
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        raise ValueError("Empty input")
    return float(cleaned)
