"""
Pay records: the polymorphic job model.

Every job carries a non-negative base pay and knows how to compute its
own pay. Validation runs before any attribute is touched, so a failed
constructor or setter never leaves a half-updated job behind.
"""

from abc import ABC, abstractmethod
from typing import List

from .errors import InvalidArgument
from .schema import validate_base_pay, validate_bonus_job, validate_bonus_rate


def _raise_if_invalid(errors: List[str]) -> None:
    if errors:
        raise InvalidArgument("; ".join(errors))


class Job(ABC):
    """Pay calculation interface shared by every kind of job."""

    kind = "job"

    def __init__(self, base_pay: float):
        _raise_if_invalid(validate_base_pay(base_pay))
        self._base_pay = float(base_pay)

    @abstractmethod
    def calculate_pay(self) -> float:
        raise NotImplementedError

    @property
    def base_pay(self) -> float:
        return self._base_pay

    def get_base_pay(self) -> float:
        return self._base_pay

    def set_base_pay(self, new_base_pay: float) -> None:
        _raise_if_invalid(validate_base_pay(new_base_pay))
        self._base_pay = float(new_base_pay)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_pay={self._base_pay!r})"


class RegularJob(Job):
    """Flat job: pay equals base pay."""

    kind = "regular"

    def calculate_pay(self) -> float:
        return self._base_pay


class BonusJob(Job):
    """Job paid base pay plus a percentage bonus."""

    kind = "bonus"

    def __init__(self, base_pay: float, bonus_rate: float = 0):
        # Both checks run before the base class stores anything.
        _raise_if_invalid(validate_bonus_job(base_pay, bonus_rate))
        super().__init__(base_pay)
        self._bonus_fraction = bonus_rate / 100

    def calculate_pay(self) -> float:
        return self._base_pay * (1 + self._bonus_fraction)

    @property
    def bonus_rate(self) -> float:
        return self.get_bonus_rate()

    def get_bonus_rate(self) -> float:
        """Bonus rate as a percentage (0-100)."""
        return self._bonus_fraction * 100

    def set_bonus_rate(self, new_bonus_rate: float) -> None:
        _raise_if_invalid(validate_bonus_rate(new_bonus_rate))
        self._bonus_fraction = new_bonus_rate / 100

    def __repr__(self) -> str:
        return f"BonusJob(base_pay={self._base_pay!r}, bonus_rate={self.get_bonus_rate()!r})"


def new_flat_job(base_pay: float) -> RegularJob:
    return RegularJob(base_pay)


def new_bonus_job(base_pay: float, bonus_rate: float) -> BonusJob:
    return BonusJob(base_pay, bonus_rate)
